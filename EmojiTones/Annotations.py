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
Display labels and search terms of emoji.

The annotations file is a JSON object mapping each emoji of the catalog to a
list of strings. The first string is the label, e.g. "thumbs up", the
remaining ones hold additional search terms.
"""

import orjson

import logging
_logger = logging.getLogger(__name__)

from EmojiTones.Exceptions   import AnnotationsFileError
from EmojiTones.ToneResolver import resolve_base_emoji


class EmojiAnnotations:

    def __init__(self, annotations):
        self._annotations = dict((emoji, tuple(terms))
                                 for emoji, terms in annotations.items())

    def __len__(self):
        return len(self._annotations)

    def __contains__(self, emoji):
        return emoji in self._annotations

    def _lookup_key(self, emoji, catalog, key_overrides):
        """ Toned emoji are looked up by their base, given a catalog. """
        if emoji not in self._annotations and catalog is not None:
            base = resolve_base_emoji(catalog, emoji, key_overrides)
            if base is not None:
                return base
        return emoji

    def get(self, emoji, catalog = None, key_overrides = None):
        """ All annotations of emoji, empty tuple if there are none. """
        key = self._lookup_key(emoji, catalog, key_overrides)
        return self._annotations.get(key, ())

    def get_label(self, emoji, catalog = None, key_overrides = None):
        terms = self.get(emoji, catalog, key_overrides)
        return terms[0] if terms else None

    def get_search_terms(self, emoji, catalog = None, key_overrides = None):
        return self.get(emoji, catalog, key_overrides)[1:]

    def search(self, catalog, text):
        """
        Catalog entries whose annotations contain all words of text,
        in catalog order. Case insensitive.
        """
        words = text.lower().split()
        if not words:
            return []

        results = []
        seen = set()
        for entry in catalog.iter_entries():
            if entry.string in seen:
                continue
            haystack = " ".join(self.get(entry.string)).lower()
            if haystack and all(word in haystack for word in words):
                results.append(entry)
                seen.add(entry.string)
        return results


def load_annotations(raw):
    """
    Load annotations from JSON text or bytes.
    Raises AnnotationsFileError.
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as ex:
        raise AnnotationsFileError("Invalid emoji annotations", ex)

    if not isinstance(data, dict):
        raise AnnotationsFileError("Emoji annotations must be a JSON object")

    for emoji, terms in data.items():
        if not isinstance(terms, list) or not terms or \
           not all(isinstance(term, str) for term in terms):
            raise AnnotationsFileError("Invalid annotations for '{}': {!r}" \
                                       .format(emoji, terms))

    _logger.debug("loaded annotations for {} emoji".format(len(data)))
    return EmojiAnnotations(data)

def load_annotations_file(filename):
    """ Raises AnnotationsFileError. """
    _logger.info("Loading emoji annotations '{}'".format(filename))
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as ex:
        raise AnnotationsFileError("Failed to read emoji annotations '{}'" \
                                   .format(filename), ex)
    return load_annotations(data)
