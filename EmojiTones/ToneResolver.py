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
Reverse lookup of toned emoji.

There is no way to parse the base emoji out of a toned one, the tone may
have replaced a variation selector, sit in front of a joiner or have been
appended. Instead we render all tone capable emoji that start with the same
code point with the tones found and look for an exact match.
"""

import logging
_logger = logging.getLogger(__name__)

from EmojiTones.ToneCodec   import extract_tones, render_entry, dump_scalars


# Composite emoji whose toned form starts with a different code point than
# their catalog entry, e.g. "women holding hands" U+1F46D is rendered with
# two tones as WOMAN ZWJ HANDSHAKE ZWJ WOMAN. Found by verifying the whole
# catalog, see "emojitones verify". Extend via the [tone-overrides] section
# of the system defaults.
DEFAULT_KEY_OVERRIDES = {
    0x1F469 : (0x1F46B, 0x1F46D),  # woman -> holding hands, women holding hands
    0x1F468 : (0x1F46C,),          # man -> men holding hands
    0x1F9D1 : (0x1F48F, 0x1F491),  # person -> kiss, couple with heart
    0x1FAF1 : (0x1F91D,),          # rightwards hand -> handshake
}


def build_reverse_index(catalog):
    """
    Map the first code point of all tone capable emoji to the emoji.
    Only categories supporting skin tones take part. Buckets are collected
    per category; a code point already claimed by an earlier category
    keeps its bucket.
    """
    index = {}
    for category in catalog.categories:
        if not category.supports_skin_tones:
            continue

        buckets = {}
        for entry in category.entries:
            if not entry.supports_tones() or not entry.string:
                continue
            buckets.setdefault(ord(entry.string[0]), []).append(entry)

        for key, bucket in buckets.items():
            if key not in index:
                index[key] = tuple(bucket)

    return index

def _match_candidates(index, key, toned, tones):
    for entry in index.get(key, ()):
        if render_entry(entry, tones) == toned:
            return entry
    return None

def resolve_base_entry(catalog, toned, key_overrides = None):
    """
    Find the catalog entry a toned emoji was rendered from.
    Returns None for emoji without skin tones and for misses.
    """
    tones = extract_tones(toned)
    if not tones or not toned:
        return None

    if key_overrides is None:
        key_overrides = DEFAULT_KEY_OVERRIDES

    index = catalog.get_reverse_index()
    key = ord(toned[0])

    entry = _match_candidates(index, key, toned, tones)
    if entry is None:
        for override_key in key_overrides.get(key, ()):
            entry = _match_candidates(index, override_key, toned, tones)
            if entry is not None:
                break

    if entry is None:
        _logger.debug("no base emoji for '{}' ({})" \
                      .format(toned, dump_scalars(toned)))
    return entry

def resolve_base_emoji(catalog, toned, key_overrides = None):
    """
    Return the toneless base of toned, toned itself if it carries no
    skin tones, or None if it is unknown.
    """
    if not extract_tones(toned):
        return toned

    entry = resolve_base_entry(catalog, toned, key_overrides)
    if entry is None:
        return None
    return entry.string

def _find(catalog, query, key_overrides):
    if extract_tones(query):
        base = resolve_base_emoji(catalog, query, key_overrides)
        if base is None:
            base = query
        categories = catalog.get_skin_tone_categories()
    else:
        base = query
        categories = catalog.categories

    for category in categories:
        for entry in category.entries:
            if entry.string == base:
                return category, entry
    return None, None

def find_entry(catalog, query, key_overrides = None):
    """
    Find the catalog entry of a toned or toneless emoji.
    Toned emoji are looked up in skin tone categories only.
    """
    return _find(catalog, query, key_overrides)[1]

def find_category(catalog, query, key_overrides = None):
    """ Category find_entry() found its entry in, or None. """
    return _find(catalog, query, key_overrides)[0]
