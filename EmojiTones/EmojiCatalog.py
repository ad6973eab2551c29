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
Emoji catalog model and loader.

The catalog text consists of groups separated by blank lines. Each group
starts with a header line "name[,skin-tone-flag]", followed by one line per
emoji "emoji[,tones][,version][,tone-version]". Trailing empty fields may be
left out. A tones field of "1" marks emoji taking a single skin tone, any
other non-empty value is the template of an emoji taking two skin tones.
"""

import math
import threading
from types import MappingProxyType

import logging
_logger = logging.getLogger(__name__)

from EmojiTones.definitions import ToneSupport
from EmojiTones.Exceptions  import CatalogLoadError


class _ReadOnly:
    """ Attributes may only be set during construction. """
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError("'{}' object is read-only" \
                             .format(type(self).__name__))

    def _init_attr(self, name, value):
        object.__setattr__(self, name, value)


class EmojiEntry(_ReadOnly):
    """ One emoji of the catalog, in its toneless form. """
    __slots__ = ("string", "tone_support", "tone_template",
                 "version", "tone_version")

    def __init__(self, string, tone_support = ToneSupport.NONE,
                 tone_template = None, version = None, tone_version = None):
        if (tone_support == ToneSupport.TWO) != bool(tone_template):
            raise ValueError("tone template required for, and only for, "
                             "emoji with two skin tones: " + repr(string))
        self._init_attr("string", string)
        self._init_attr("tone_support", tone_support)
        self._init_attr("tone_template", tone_template)
        self._init_attr("version", version)
        self._init_attr("tone_version", tone_version)

    def supports_tones(self):
        return self.tone_support != ToneSupport.NONE

    def _key(self):
        return (self.string, self.tone_support, self.tone_template,
                self.version, self.tone_version)

    def __eq__(self, other):
        if not isinstance(other, EmojiEntry):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "EmojiEntry({!r}, {}, {!r}, {!r}, {!r})" \
               .format(self.string, self.tone_support, self.tone_template,
                       self.version, self.tone_version)


class Category(_ReadOnly):
    """ Named group of emoji, e.g. "Smileys & Emotion". """
    __slots__ = ("name", "supports_skin_tones", "entries")

    def __init__(self, name, supports_skin_tones, entries):
        if not name:
            raise ValueError("category name must not be empty")
        self._init_attr("name", name)
        self._init_attr("supports_skin_tones", bool(supports_skin_tones))
        self._init_attr("entries", tuple(entries))

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __eq__(self, other):
        if not isinstance(other, Category):
            return NotImplemented
        return (self.name, self.supports_skin_tones, self.entries) == \
               (other.name, other.supports_skin_tones, other.entries)

    def __hash__(self):
        return hash((self.name, self.supports_skin_tones, self.entries))

    def __repr__(self):
        return "Category({!r}, {}, <{} entries>)" \
               .format(self.name, self.supports_skin_tones, len(self.entries))


class Catalog(_ReadOnly):
    """
    Ordered, immutable collection of emoji categories.
    Safe to share between threads. The reverse index used to look up
    toned emoji is built on first use and kept with the catalog.
    """
    __slots__ = ("categories", "_reverse_index", "_lock")

    def __init__(self, categories):
        self._init_attr("categories", tuple(categories))
        self._init_attr("_reverse_index", None)
        self._init_attr("_lock", threading.Lock())

    def __iter__(self):
        return iter(self.categories)

    def __len__(self):
        return len(self.categories)

    def get_category(self, name):
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def get_skin_tone_categories(self):
        return [c for c in self.categories if c.supports_skin_tones]

    def iter_entries(self, skin_tones_only = False):
        """ Walk along all entries in catalog order. """
        for category in self.categories:
            if skin_tones_only and not category.supports_skin_tones:
                continue
            for entry in category.entries:
                yield entry

    def get_reverse_index(self):
        """
        Leading code point -> tone capable entries, built once.
        The result is a read-only view shared by all callers.
        """
        index = self._reverse_index
        if index is None:
            with self._lock:
                if self._reverse_index is None:
                    from EmojiTones.ToneResolver import build_reverse_index
                    self._init_attr("_reverse_index", MappingProxyType(
                                    build_reverse_index(self)))
                index = self._reverse_index
        return index

    def __eq__(self, other):
        if not isinstance(other, Catalog):
            return NotImplemented
        return self.categories == other.categories

    def __hash__(self):
        return hash(self.categories)

    def __repr__(self):
        return "Catalog(<{} categories>)".format(len(self.categories))


class CatalogParser:
    """
    Turns catalog text into a Catalog, dropping emoji and skin tones the
    platform can't display. The maximum supported emoji version is
    supplied by the caller, see Config.get_emoji_version_ceiling().
    """

    def __init__(self, max_supported_version):
        self.max_supported_version = max_supported_version
        self._num_dropped = 0
        self._num_untoned = 0

    def parse(self, raw_text):
        """ Raises CatalogLoadError, never returns partial catalogs. """
        text = self._decode(raw_text)

        categories = []
        self._num_dropped = 0
        self._num_untoned = 0

        name = None
        supports_skin_tones = False
        entries = []

        lines = text.split("\n")
        for line_number, line in enumerate(lines, 1):
            if line.endswith("\r"):
                line = line[:-1]

            if not line:
                if name:
                    categories.append(Category(name, supports_skin_tones,
                                               entries))
                name = None
                supports_skin_tones = False
                entries = []

            elif name is None:
                name, supports_skin_tones = \
                    self._parse_header(line, line_number)

            else:
                entry = self._parse_entry(line, line_number)
                if entry is not None:
                    entries.append(entry)

        if name:
            categories.append(Category(name, supports_skin_tones, entries))

        _logger.debug("loaded {} categories, {} emoji; "
                      "{} emoji and {} skin tone variations "
                      "newer than emoji version {}" \
                      .format(len(categories),
                              sum(len(c) for c in categories),
                              self._num_dropped, self._num_untoned,
                              self.max_supported_version))

        return Catalog(categories)

    @staticmethod
    def _decode(raw_text):
        if isinstance(raw_text, bytes):
            try:
                return raw_text.decode("utf-8")
            except UnicodeDecodeError as ex:
                raise CatalogLoadError("Error decoding emoji catalog", ex)
        if isinstance(raw_text, str):
            return raw_text
        raise CatalogLoadError("Emoji catalog must be text, not {}" \
                               .format(type(raw_text).__name__))

    @staticmethod
    def _parse_header(line, line_number):
        """
        Returns (name, supports_skin_tones). Empty names are allowed,
        the group is dropped later.
        """
        fields = line.split(",")
        if len(fields) > 2:
            raise CatalogLoadError("Invalid category header in line {}: {!r}" \
                                   .format(line_number, line))
        supports_skin_tones = len(fields) > 1 and bool(fields[1])
        return fields[0], supports_skin_tones

    def _parse_entry(self, line, line_number):
        """ Returns None for emoji the platform can't display. """
        fields = line.split(",")
        if len(fields) > 4:
            raise CatalogLoadError("Too many fields in line {}: {!r}" \
                                   .format(line_number, line))
        string = fields[0]
        if not string:
            raise CatalogLoadError("Missing emoji in line {}: {!r}" \
                                   .format(line_number, line))

        tone_field = fields[1] if len(fields) > 1 else ""
        if not tone_field:
            tone_support = ToneSupport.NONE
            tone_template = None
        elif tone_field == "1":
            tone_support = ToneSupport.ONE
            tone_template = None
        else:
            tone_support = ToneSupport.TWO
            tone_template = tone_field

        version = self._parse_version(fields, 2, line_number)
        tone_version = self._parse_version(fields, 3, line_number)

        if not self.is_supported(version):
            self._num_dropped += 1
            return None

        if not self.is_supported(tone_version):
            if tone_support != ToneSupport.NONE:
                self._num_untoned += 1
            tone_support = ToneSupport.NONE
            tone_template = None

        return EmojiEntry(string, tone_support, tone_template,
                          version, tone_version)

    def is_supported(self, version):
        """ Unspecified versions are compatible with everything. """
        if version is None:
            return True
        return version <= self.max_supported_version

    @staticmethod
    def _parse_version(fields, index, line_number):
        if len(fields) <= index or not fields[index]:
            return None
        try:
            version = float(fields[index])
        except ValueError as ex:
            raise CatalogLoadError("Invalid version in line {}" \
                                   .format(line_number), ex)
        if not math.isfinite(version):
            raise CatalogLoadError("Invalid version in line {}: {!r}" \
                                   .format(line_number, fields[index]))
        return version


def load_catalog(raw_text, max_supported_version):
    """
    Load catalog from text or UTF-8 encoded bytes.
    Raises CatalogLoadError.
    """
    return CatalogParser(max_supported_version).parse(raw_text)

def load_catalog_file(filename, max_supported_version):
    """ Raises CatalogLoadError. """
    _logger.info("Loading emoji catalog '{}'".format(filename))
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as ex:
        raise CatalogLoadError("Failed to read emoji catalog '{}'" \
                               .format(filename), ex)
    return load_catalog(data, max_supported_version)
