# -*- coding: utf-8 -*-

# Copyright © 2022-2026 EmojiTones contributors
#
# This file is part of EmojiTones.
#
# EmojiTones is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# EmojiTones is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

"""
File containing Config.
"""

import os
import platform
from gettext import gettext as _

from packaging.version import Version, InvalidVersion

from EmojiTones.ConfigUtils  import ConfigObject
from EmojiTones.ToneResolver import DEFAULT_KEY_OVERRIDES
from EmojiTones.utils        import XDGDirs, parse_code_point, \
                                    parse_code_point_list

import logging
_logger = logging.getLogger("Config")

INSTALL_DIR                = os.path.join(os.path.dirname(
                                          os.path.abspath(__file__)), "data")
USER_DIR                   = "emojitones"

SYSTEM_DEFAULTS_FILENAME   = "emojitones-defaults.conf"
SYSTEM_DEFAULTS_SECTION    = "emojitones"
TONE_OVERRIDES_SECTION     = "tone-overrides"

DEFAULT_CATALOG_FILENAME     = "emoji-categories.csv"
DEFAULT_ANNOTATIONS_FILENAME = "emoji-annotations-en.json"

# Newest emoji version the catalog data knows about.
LATEST_EMOJI_VERSION       = 15.0

# First macOS release of each emoji version, ascending.
# Releases of 10.x before 10.14 don't get any versioned emoji.
MACOS_EMOJI_VERSIONS = [
    ("10.14",   11.0),
    ("10.15",   12.0),
    ("10.15.1", 12.1),
    ("11.0",    13.0),
    ("11.3",    13.1),
    ("12.3",    14.0),
    ("13.3",    15.0),
]


def get_macos_emoji_version(release):
    """
    Emoji version supported by a macOS release.
    Raises packaging.version.InvalidVersion.

    Doctests:

    >>> get_macos_emoji_version("10.15")
    12.0
    >>> get_macos_emoji_version("10.15.7")
    12.1
    >>> get_macos_emoji_version("12.2.1")
    13.1
    >>> get_macos_emoji_version("10.13.6")
    0.0
    >>> get_macos_emoji_version("14.1")
    15.0
    """
    version = Version(release)
    if version.major == 10 and version < Version("10.14"):
        return 0.0

    result = LATEST_EMOJI_VERSION
    for first_release, emoji_version in MACOS_EMOJI_VERSIONS:
        if version >= Version(first_release):
            result = emoji_version
    return result

def get_platform_emoji_version(system = None, release = None):
    """
    Best guess of the emoji version the running platform can display.
    Platforms we know nothing about are assumed to be up to date.
    """
    if system is None:
        system = platform.system()

    if system == "Darwin":
        if release is None:
            release = platform.mac_ver()[0]
        try:
            return get_macos_emoji_version(release)
        except InvalidVersion as ex:
            _logger.warning(_("Unknown macOS release {!r}: {}") \
                            .format(release, ex))

    return LATEST_EMOJI_VERSION


class Config(ConfigObject):
    """
    Class to encapsulate the system defaults and command line
    options and check values.
    """

    def __init__(self, options = None, system_defaults_paths = None):
        self.tone_overrides = {}

        ConfigObject.__init__(self)

        # Load system defaults (if there are any, not required).
        if system_defaults_paths is None:
            system_defaults_paths = self.get_system_defaults_paths()
        self.load_system_defaults(system_defaults_paths)

        # initialize all property values
        self.init_properties(options)

    def _init_keys(self):
        self.sysdef_section = SYSTEM_DEFAULTS_SECTION

        # 0.0 means: ask the platform
        self.add_key("max-emoji-version", 0.0)
        self.add_key("catalog-file", DEFAULT_CATALOG_FILENAME)
        self.add_key("annotations-file", DEFAULT_ANNOTATIONS_FILENAME)

    def _can_set_max_emoji_version(self, value):
        return value >= 0.0

    @staticmethod
    def get_system_defaults_paths():
        """ Lowest priority first, the last setting found wins. """
        paths = [os.path.join(INSTALL_DIR, SYSTEM_DEFAULTS_FILENAME),
                 os.path.join("/etc/emojitones", SYSTEM_DEFAULTS_FILENAME)]
        paths += reversed(XDGDirs.get_all_config_dirs(
                              os.path.join(USER_DIR, SYSTEM_DEFAULTS_FILENAME)))
        return paths

    def _read_sysdef_section(self, parser):
        ConfigObject._read_sysdef_section(self, parser)

        self.tone_overrides = {}
        if parser.has_section(TONE_OVERRIDES_SECTION):
            for key, value in parser.items(TONE_OVERRIDES_SECTION):
                try:
                    self.tone_overrides[parse_code_point(key)] = \
                        parse_code_point_list(value)
                except ValueError as ex:
                    _logger.warning(_("System defaults: Invalid tone "
                                      "override '{}={}': {}") \
                                      .format(key, value, ex))

    def get_emoji_version_ceiling(self):
        """ Emoji newer than this are left out of the catalog. """
        if self.max_emoji_version:
            return self.max_emoji_version
        return get_platform_emoji_version()

    def get_key_overrides(self):
        """
        Leading code point -> alternative catalog keys for composite emoji,
        built in ones extended by the system defaults.
        """
        overrides = dict(DEFAULT_KEY_OVERRIDES)
        for key, values in self.tone_overrides.items():
            merged = list(overrides.get(key, ()))
            merged += [v for v in values if v not in merged]
            overrides[key] = tuple(merged)
        return overrides

    def get_catalog_filename(self):
        return self._find_data_file(self.catalog_file,
                                    DEFAULT_CATALOG_FILENAME,
                                    _("emoji catalog"))

    def get_annotations_filename(self):
        return self._find_data_file(self.annotations_file,
                                    DEFAULT_ANNOTATIONS_FILENAME,
                                    _("emoji annotations"))

    def _find_data_file(self, filename, default_filename, description):
        return self._get_user_sys_filename(
                filename, description,
                final_fallback = os.path.join(INSTALL_DIR, default_filename),
                user_filename_func = lambda fn: XDGDirs.get_data_home(
                                                  os.path.join(USER_DIR, fn)),
                system_filename_func = lambda fn: XDGDirs.find_data_file(
                                                  os.path.join(USER_DIR, fn)))

    def load_catalog(self):
        """ Raises CatalogLoadError. """
        from EmojiTones.EmojiCatalog import load_catalog_file
        return load_catalog_file(self.get_catalog_filename(),
                                 self.get_emoji_version_ceiling())

    def load_annotations(self):
        """ Raises AnnotationsFileError. """
        from EmojiTones.Annotations import load_annotations_file
        return load_annotations_file(self.get_annotations_filename())
