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
Command line interface, see "emojitones --help".
"""

import sys
from optparse import OptionParser
from gettext import gettext as _

import logging
_logger = logging.getLogger(__name__)

from EmojiTones.definitions  import SkinTone, ToneSupport
from EmojiTones.Config       import Config
from EmojiTones.Exceptions   import (CatalogLoadError, AnnotationsFileError,
                                     chain_handler)
from EmojiTones.ToneCodec    import (render_entry, extract_tones,
                                     dump_scalars)
from EmojiTones.ToneResolver import (resolve_base_emoji, find_entry,
                                     find_category)

USAGE = _("""%prog [options] COMMAND [ARGS]

Commands:
  tone EMOJI TONE [TONE2]   render emoji with skin tone(s)
  base EMOJI                print the toneless base of a toned emoji
  info EMOJI                describe emoji
  search WORDS              find emoji by annotation
  list                      list categories
  verify                    check reverse lookup of all toned emoji

Tones: light, medium-light, medium, medium-dark, dark or 1-5""")


def parse_command_line(argv):
    parser = OptionParser(usage = USAGE)
    parser.add_option("-m", "--max-version", type="float",
            dest="max_emoji_version",
            help="Leave out emoji newer than this emoji version")
    parser.add_option("-c", "--catalog", dest="catalog_file",
            help="Specify emoji catalog file")
    parser.add_option("-a", "--annotations", dest="annotations_file",
            help="Specify emoji annotations file (.json)")
    parser.add_option("-d", "--debug", type="str", dest="debug",
        help="DEBUG={notset|debug|info|warning|error|critical}")
    options, args = parser.parse_args(argv)
    return parser, options, args

def setup_logging(debug):
    log_params = {
        "format" : '%(asctime)s:%(levelname)s:%(name)s: %(message)s'
    }
    if debug:
        log_params["level"] = getattr(logging, debug.upper())
    logging.basicConfig(**log_params)


class CommandRunner:
    """ Executes one command against a loaded catalog. """

    def __init__(self, config, catalog, out = None):
        self.config = config
        self.catalog = catalog
        self.key_overrides = config.get_key_overrides()
        self.out = out if out is not None else sys.stdout
        self._annotations = None

    def _print(self, *args):
        print(*args, file=self.out)

    def get_annotations(self):
        """ Annotations are optional, None if unavailable. """
        if self._annotations is None:
            try:
                self._annotations = self.config.load_annotations()
            except AnnotationsFileError as ex:
                _logger.warning(_("Emoji annotations unavailable: ") + str(ex))
                self._annotations = False
        return self._annotations or None

    def get_label(self, emoji):
        annotations = self.get_annotations()
        if annotations:
            return annotations.get_label(emoji, catalog = self.catalog,
                                         key_overrides = self.key_overrides)
        return None

    def run(self, command, args):
        """ Returns the exit status. """
        func = getattr(self, "cmd_" + command, None)
        if func is None:
            _logger.error(_("Unknown command '{}'").format(command))
            return 2
        return func(*args) if self._check_arity(func, args) else 2

    @staticmethod
    def _check_arity(func, args):
        num_args = {"cmd_tone" : (2, 3), "cmd_base" : (1, 1),
                    "cmd_info" : (1, 1), "cmd_search" : (1, None),
                    "cmd_list" : (0, 0), "cmd_verify" : (0, 0)}
        low, high = num_args[func.__name__]
        if len(args) < low or (high is not None and len(args) > high):
            _logger.error(_("Wrong number of arguments for '{}'") \
                          .format(func.__name__[4:]))
            return False
        return True

    def cmd_tone(self, emoji, *tone_names):
        try:
            tones = [SkinTone.from_string(name) for name in tone_names]
        except KeyError as ex:
            _logger.error(_("Unknown skin tone {}").format(ex))
            return 2

        entry = find_entry(self.catalog, emoji, self.key_overrides)
        if entry is None:
            _logger.error(_("'{}' is not in the emoji catalog").format(emoji))
            return 1

        if not entry.supports_tones():
            _logger.error(_("'{}' doesn't support skin tones") \
                          .format(entry.string))
            return 1

        if entry.tone_support == ToneSupport.TWO and len(tones) == 1:
            tones = tones * 2     # same tone for both people
        elif entry.tone_support == ToneSupport.ONE and len(tones) != 1:
            _logger.error(_("'{}' takes a single skin tone") \
                          .format(entry.string))
            return 1

        self._print(render_entry(entry, tones))
        return 0

    def cmd_base(self, emoji):
        base = resolve_base_emoji(self.catalog, emoji, self.key_overrides)
        if base is None:
            _logger.error(_("No base emoji found for '{}' ({})") \
                          .format(emoji, dump_scalars(emoji)))
            return 1
        self._print(base)
        return 0

    def cmd_info(self, emoji):
        category = find_category(self.catalog, emoji, self.key_overrides)
        entry = find_entry(self.catalog, emoji, self.key_overrides)
        if entry is None:
            _logger.error(_("'{}' is not in the emoji catalog").format(emoji))
            return 1

        tones = extract_tones(emoji)
        label = self.get_label(entry.string)

        self._print("emoji:        {}".format(entry.string))
        self._print("scalars:      {}".format(dump_scalars(entry.string)))
        if label:
            self._print("label:        {}".format(label))
        self._print("category:     {}".format(category.name))
        self._print("skin tones:   {}".format(entry.tone_support.name.lower()))
        if tones:
            self._print("toned with:   {}".format(
                        ", ".join(t.get_label() for t in tones)))
        if entry.version is not None:
            self._print("version:      {}".format(entry.version))
        if entry.tone_version is not None:
            self._print("tone version: {}".format(entry.tone_version))
        return 0

    def cmd_search(self, *words):
        annotations = self.get_annotations()
        if not annotations:
            _logger.error(_("Searching requires emoji annotations"))
            return 1

        for entry in annotations.search(self.catalog, " ".join(words)):
            self._print("{}  {}".format(entry.string,
                                        annotations.get_label(entry.string)))
        return 0

    def cmd_list(self):
        for category in self.catalog:
            self._print("{}{}: {}".format(
                        category.name,
                        " (skin tones)" if category.supports_skin_tones else "",
                        len(category)))
        return 0

    def cmd_verify(self):
        """
        Tone every tone capable emoji of the skin tone categories with all
        tones and tone pairs and check that the reverse lookup finds it again.
        """
        num_checked = 0
        num_failed = 0
        for entry in self.catalog.iter_entries(skin_tones_only = True):
            if not entry.supports_tones():
                continue
            if entry.tone_support == ToneSupport.TWO:
                variations = [[tone1, tone2] for tone1 in SkinTone
                                             for tone2 in SkinTone]
            else:
                variations = [[tone] for tone in SkinTone]

            for tones in variations:
                toned = render_entry(entry, tones)
                base = resolve_base_emoji(self.catalog, toned,
                                          self.key_overrides)
                num_checked += 1
                if base != entry.string:
                    num_failed += 1
                    self._print("FAILED {} ({}) -> {} should be {} ({})" \
                                .format(toned, dump_scalars(toned),
                                        base, entry.string,
                                        dump_scalars(entry.string)))

        self._print("checked {} toned emoji, {} failed" \
                    .format(num_checked, num_failed))
        return 1 if num_failed else 0


def main(argv = None):
    sys.excepthook = chain_handler

    parser, options, args = parse_command_line(argv)
    setup_logging(options.debug)

    if not args:
        parser.print_usage(sys.stderr)
        return 2

    config = Config(options)
    try:
        catalog = config.load_catalog()
    except CatalogLoadError as ex:
        _logger.error(_("Failed to load emoji catalog: ") + str(ex))
        return 1

    runner = CommandRunner(config, catalog)
    return runner.run(args[0], args[1:])


if __name__ == "__main__":
    sys.exit(main())
