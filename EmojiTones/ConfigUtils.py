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
Settings with hard coded defaults, overridable by system defaults
(ini files) and command line options.
"""

import os
import configparser
from ast import literal_eval
from gettext import gettext as _

import logging
_logger = logging.getLogger("ConfigUtils")


_CAN_SET_HOOK       = "_can_set_"       # return true if value is valid


class ConfigObject(object):
    """
    Base class of settings objects.

    Keys declared in _init_keys() become python properties. Their values
    are taken, in increasing priority, from the key's default, the
    system defaults section and the command line options.
    """
    def __init__(self):
        self.keys = {}             # {property name, ConfigKey()}
        self.sysdef_section = None # system defaults section name
        self.system_defaults = {}  # {property name, value}

        self._init_keys()

        for ckey in self.keys.values():
            self._setup_property(ckey)

        self.check_hooks()

    def _init_keys(self):
        """ overload this and use add_key() to declare keys """
        pass

    def add_key(self, key, default, prop = None, sysdef = None):
        ckey = ConfigKey(key, default, prop, sysdef)
        self.keys[ckey.prop] = ckey
        return ckey

    def check_hooks(self):
        """ Catch hook functions whose name doesn't match any key. """
        for member in dir(self):
            if member.startswith(_CAN_SET_HOOK):
                prop = member[len(_CAN_SET_HOOK):]
                if prop not in self.keys:
                    raise NameError(
                        "'{}' looks like a ConfigObject hook function, but "
                        "'{}' is not a known property of '{}'"
                        .format(member, prop, type(self).__name__))

    def _setup_property(self, ckey):
        prop = ckey.prop
        hook_name = _CAN_SET_HOOK + prop

        # Properties live in the class, values in the instance's keys.
        def get_value(self):
            return self.keys[prop].value

        def set_value(self, value):
            hook = getattr(self, hook_name, None)
            if hook is None or hook(value):
                self.keys[prop].value = value
            else:
                _logger.warning(_("Ignoring invalid value {!r} for '{}'") \
                                .format(value, self.keys[prop].key))

        setattr(type(self), prop, property(get_value, set_value))

    def init_properties(self, options = None):
        """ Assign defaults, then system defaults, then options. """
        for ckey in self.keys.values():
            ckey.value = ckey.default

        for prop, value in self.system_defaults.items():
            setattr(self, prop, value)

        if options is not None:
            for prop in self.keys:
                value = getattr(options, prop, None)
                if value is not None:
                    setattr(self, prop, value)

    @staticmethod
    def _get_user_sys_filename(filename, description,
                               final_fallback = None,
                               user_filename_func = None,
                               system_filename_func = None):
        """
        Resolve a data file name. Existing paths are taken as they are,
        plain names are looked for in the user directory, then in the
        system directories, and finally final_fallback is used.
        Returns "" if nothing was found.
        """
        candidates = [filename]
        if filename and not os.path.exists(filename):
            _logger.debug(_("{} '{}' not found, "
                            "retrying in default paths") \
                          .format(description, filename))
            candidates = [func(filename)
                          for func in (user_filename_func,
                                       system_filename_func)
                          if func]
            candidates.append(final_fallback)

        for filepath in candidates:
            if filepath and os.path.exists(filepath):
                _logger.debug(_("{} '{}' found.").format(description, filepath))
                return filepath

        _logger.error(_("failed to find {} '{}'").format(description, filename))
        return ""

    def load_system_defaults(self, paths):
        """
        Read the system defaults from the ini files in paths.
        Missing files are fine, the last setting found wins.
        """
        _logger.info(_("Looking for system defaults in {}").format(paths))

        parser = configparser.ConfigParser()
        try:
            filenames = parser.read(paths, encoding = "utf-8")
        except configparser.Error as ex:
            _logger.error(_("Failed to read system defaults. ") + str(ex))
            return

        if not filenames:
            _logger.info(_("No system defaults found."))
        else:
            _logger.info(_("Loading system defaults from {}") \
                         .format(filenames))
            self._read_sysdef_section(parser)

    def _read_sysdef_section(self, parser):
        """ Convert the items of our section to property values. """
        self.system_defaults = {}
        if not self.sysdef_section or \
           not parser.has_section(self.sysdef_section):
            return

        sysdef_keys = dict((k.sysdef, k) for k in self.keys.values())
        for sysdef, value in parser.items(self.sysdef_section):
            _logger.info(_("Found system default '{}={}'") \
                         .format(sysdef, value))

            ckey = sysdef_keys.get(sysdef)
            if ckey is None:
                _logger.warning(_("System defaults: Unknown key '{}' "
                                  "in section '{}'") \
                                .format(sysdef, self.sysdef_section))
                continue

            value = self._convert_sysdef_value(ckey, value)
            if value is not None:
                self.system_defaults[ckey.prop] = value

    def _convert_sysdef_value(self, ckey, value):
        """
        Ini file string -> value of the type of the key's default.
        Returns None for values that don't convert.
        """
        _type = type(ckey.default)
        if _type == str:
            return value

        try:
            value = literal_eval(value)
        except (ValueError, SyntaxError) as ex:
            _logger.warning(_("System defaults: Invalid value"
                              " for key '{}' in section '{}'"
                              "\n  {}").format(ckey.sysdef,
                                               self.sysdef_section, ex))
            return None

        if _type == float and type(value) == int:
            value = float(value)
        if type(value) != _type:
            _logger.warning(_("System defaults: Expected {} "
                              "for key '{}' in section '{}'") \
                            .format(_type.__name__, ckey.sysdef,
                                    self.sysdef_section))
            return None
        return value


class ConfigKey:
    """ Ties a property to its system defaults name and default value. """

    def __init__(self, key, default, prop = None, sysdef = None):
        self.key     = key                               # key name
        self.prop    = prop or key.replace("-", "_")     # property name
        self.sysdef  = sysdef or key                     # system default name
        self.default = default  # hard coded default, determines the type
        self.value   = default
