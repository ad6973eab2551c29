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

import os
import re

import logging
_logger = logging.getLogger(__name__)


_code_point_pattern = re.compile(r"""(?:U\+|0x)?    # optional prefix
                                     ([0-9A-Fa-f]{1,6})
                                  """, re.VERBOSE | re.IGNORECASE)

def parse_code_point(text):
    """
    Parse a hexadecimal code point, with or without "U+" or "0x" prefix.
    Raises ValueError.

    Doctests:

    >>> hex(parse_code_point("1F469"))
    '0x1f469'
    >>> hex(parse_code_point("U+1f46b"))
    '0x1f46b'
    >>> parse_code_point("woman")
    Traceback (most recent call last):
    ...
    ValueError: invalid code point 'woman'
    """
    match = _code_point_pattern.fullmatch(text.strip())
    if not match:
        raise ValueError("invalid code point {!r}".format(text))
    value = int(match.group(1), 16)
    if value > 0x10FFFF:
        raise ValueError("code point out of range {!r}".format(text))
    return value

def parse_code_point_list(text):
    """
    Converts a space or comma separated string of code points into a tuple.
    Raises ValueError.

    Doctests:

    >>> [hex(cp) for cp in parse_code_point_list("1F46B 1F46D")]
    ['0x1f46b', '0x1f46d']
    >>> [hex(cp) for cp in parse_code_point_list("U+1F48F, U+1F491")]
    ['0x1f48f', '0x1f491']
    """
    return tuple(parse_code_point(t)
                 for t in re.split(r"[\s,]+", text.strip()) if t)


class XDGDirs:
    """
    Build paths compliant with XDG Base Directory Specification.
    http://standards.freedesktop.org/basedir-spec/basedir-spec-latest.html

    Doctests:

    >>> old_env = os.environ.copy()
    >>> os.environ["HOME"] = "/home/test_user"

    # XDG_CONFIG_HOME unavailable
    >>> os.environ["XDG_CONFIG_HOME"] = ""
    >>> XDGDirs.get_config_home("emojitones/test.conf")
    '/home/test_user/.config/emojitones/test.conf'

    # XDG_CONFIG_HOME available
    >>> os.environ["XDG_CONFIG_HOME"] = "/home/test_user/.config_home"
    >>> XDGDirs.get_config_home("emojitones/test.conf")
    '/home/test_user/.config_home/emojitones/test.conf'

    # XDG_DATA_HOME unavailable
    >>> os.environ["XDG_DATA_HOME"] = ""
    >>> XDGDirs.get_data_home("emojitones/test.csv")
    '/home/test_user/.local/share/emojitones/test.csv'

    # XDG_DATA_HOME available
    >>> os.environ["XDG_DATA_HOME"] = "/home/test_user/.data_home"
    >>> XDGDirs.get_data_home("emojitones/test.csv")
    '/home/test_user/.data_home/emojitones/test.csv'

    # XDG_CONFIG_DIRS unvailable
    >>> os.environ["XDG_CONFIG_HOME"] = ""
    >>> os.environ["XDG_CONFIG_DIRS"] = ""
    >>> XDGDirs.get_all_config_dirs("emojitones/test.conf")
    ['/home/test_user/.config/emojitones/test.conf', '/etc/xdg/emojitones/test.conf']

    # XDG_DATA_DIRS available
    >>> os.environ["XDG_DATA_HOME"] = ""
    >>> os.environ["XDG_DATA_DIRS"] = "/usr/share/gnome:/usr/local/share/:/usr/share/"
    >>> XDGDirs.get_all_data_dirs("emojitones/test.csv")
    ['/home/test_user/.local/share/emojitones/test.csv', \
'/usr/share/gnome/emojitones/test.csv', \
'/usr/local/share/emojitones/test.csv', \
'/usr/share/emojitones/test.csv']

    >>> os.environ.clear()
    >>> os.environ.update(old_env)
    """

    @staticmethod
    def _get_home(env_var, default, file):
        path = os.environ.get(env_var)
        if path and not os.path.isabs(path):
            _logger.warning("{} doesn't contain an absolute path, "
                            "ignoring.".format(env_var))
            path = None
        if not path:
            path = os.path.join(os.path.expanduser("~"), default)
        return os.path.join(path, file) if file else path

    @staticmethod
    def _get_dirs(env_var, default):
        """ Absolute paths of a colon separated list, in given order """
        value = os.environ.get(env_var) or default
        return [p for p in value.split(":") if os.path.isabs(p)]

    @staticmethod
    def get_config_home(file = None):
        """ User specific config directory """
        return XDGDirs._get_home("XDG_CONFIG_HOME", ".config", file)

    @staticmethod
    def get_config_dirs():
        return XDGDirs._get_dirs("XDG_CONFIG_DIRS", "/etc/xdg")

    @staticmethod
    def get_all_config_dirs(file = None):
        """ User directory first, then system directories """
        paths = [XDGDirs.get_config_home()] + XDGDirs.get_config_dirs()
        return [os.path.join(p, file) for p in paths] if file else paths

    @staticmethod
    def get_data_home(file = None):
        """ User specific data directory """
        return XDGDirs._get_home("XDG_DATA_HOME",
                                 os.path.join(".local", "share"), file)

    @staticmethod
    def get_data_dirs():
        return XDGDirs._get_dirs("XDG_DATA_DIRS",
                                 "/usr/local/share/:/usr/share/")

    @staticmethod
    def get_all_data_dirs(file = None):
        paths = [XDGDirs.get_data_home()] + XDGDirs.get_data_dirs()
        return [os.path.join(p, file) for p in paths] if file else paths

    @staticmethod
    def find_data_files(file):
        """ Readable instances of file, highest priority first """
        return [p for p in XDGDirs.get_all_data_dirs(file)
                if os.path.isfile(p) and os.access(p, os.R_OK)]

    @staticmethod
    def find_data_file(file):
        paths = XDGDirs.find_data_files(file)
        return paths[0] if paths else None
