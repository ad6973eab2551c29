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
Scalar level editing of skin tones in emoji sequences.

Python strings are sequences of code points, which is exactly the
granularity skin tone modifiers live at. Nothing here knows about
grapheme clusters.

Doctests:

>>> dump_scalars(apply_one_tone("\\U0001F44D", SkinTone.MEDIUM))
'1F44D 1F3FD'
>>> dump_scalars(apply_one_tone("\\u270C\\uFE0F", SkinTone.DARK))
'270C 1F3FF'
>>> dump_scalars(apply_one_tone("\\U0001F469\\u200D\\U0001F4BB", SkinTone.LIGHT))
'1F469 1F3FB 200D 1F4BB'
>>> extract_tones("\\U0001F44D\\U0001F3FD")
[<SkinTone.MEDIUM: 127997>]
"""

import logging
_logger = logging.getLogger(__name__)

from EmojiTones.definitions import (SkinTone, ToneSupport,
                                    VARIATION_SELECTOR, ZERO_WIDTH_JOINER,
                                    FIRST_SKIN_TONE, LAST_SKIN_TONE)


def _tone_scalar(tone):
    """ Raises ValueError for code points chr() won't accept. """
    return chr(tone.value)

def is_tone_scalar(char):
    return FIRST_SKIN_TONE <= ord(char) <= LAST_SKIN_TONE

def add_variation_selector(sequence):
    """
    Append the emoji presentation selector. Unconditional, don't call
    this for sequences that already end with one.
    """
    return sequence + chr(VARIATION_SELECTOR)

def apply_one_tone(sequence, tone):
    """
    Convert the toneless base sequence of an emoji that takes a single
    skin tone to the given tone.

    The tone replaces the first variation selector, or goes in front of
    the first zero width joiner, whichever comes first. Without either
    it is appended.
    """
    try:
        tone_char = _tone_scalar(tone)
    except ValueError as ex:
        _logger.debug("can't apply tone {}: {}".format(tone, ex))
        return sequence

    for i, char in enumerate(sequence):
        cp = ord(char)
        if cp == VARIATION_SELECTOR:
            return sequence[:i] + tone_char + sequence[i + 1:]
        if cp == ZERO_WIDTH_JOINER:
            return sequence[:i] + tone_char + sequence[i:]

    return sequence + tone_char

def replace_two_tones(template, tone1, tone2):
    """
    Convert a two-tone template, e.g. the light/dark variation of
    "people holding hands", to the given pair of tones.
    The first tone scalar found becomes tone1, all later ones tone2.
    """
    try:
        tone_chars = (_tone_scalar(tone1), _tone_scalar(tone2))
    except ValueError as ex:
        _logger.debug("can't replace tones {}, {}: {}" \
                      .format(tone1, tone2, ex))
        return template

    chars = []
    replaced = 0
    for char in template:
        if is_tone_scalar(char):
            chars.append(tone_chars[min(replaced, 1)])
            replaced += 1
        else:
            chars.append(char)
    return "".join(chars)

def extract_tones(sequence):
    """ All skin tones of sequence in order of appearance. """
    return [SkinTone(ord(char)) for char in sequence
            if is_tone_scalar(char)]

def remove_tones(sequence):
    """
    Strip every skin tone scalar.
    Not the inverse of apply_one_tone when a variation selector was replaced,
    use ToneResolver.resolve_base_emoji to recover base emoji.
    """
    return "".join(char for char in sequence if not is_tone_scalar(char))

def render_entry(entry, tones):
    """
    Render catalog entry with the given skin tones.
    Returns the toneless string if the number of tones doesn't fit
    the tone support of the entry.
    """
    if entry.tone_support == ToneSupport.ONE:
        if len(tones) == 1:
            return apply_one_tone(entry.string, tones[0])

    elif entry.tone_support == ToneSupport.TWO:
        if len(tones) == 2 and entry.tone_template:
            return replace_two_tones(entry.tone_template, tones[0], tones[-1])

    return entry.string

def dump_scalars(sequence):
    return " ".join("{:04X}".format(ord(char)) for char in sequence)
