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
Global definitions.
"""

from enum import Enum


# Variation selector 16, requests emoji presentation.
VARIATION_SELECTOR = 0xFE0F

# Zero width joiner, glues scalars into composite emoji.
ZERO_WIDTH_JOINER = 0x200D

# Contiguous range of the Fitzpatrick skin tone modifiers.
FIRST_SKIN_TONE = 0x1F3FB
LAST_SKIN_TONE  = 0x1F3FF


class SkinTone(Enum):
    """ enum for skin tones, light to dark, valued by their code point """
    (
        LIGHT,
        MEDIUM_LIGHT,
        MEDIUM,
        MEDIUM_DARK,
        DARK,
    ) = range(FIRST_SKIN_TONE, LAST_SKIN_TONE + 1)

    def get_ordinal(self):
        """ Position of the tone, 0 for LIGHT through 4 for DARK """
        return self.value - FIRST_SKIN_TONE

    def get_label(self):
        return self.name.lower().replace("_", "-")

    @staticmethod
    def from_string(str_value):
        """
        Accepts labels like "medium-dark" as well as the
        ordinals "1" to "5". Raises KeyError.
        """
        value = str_value.strip().lower()
        if value.isdecimal():
            index = int(value) - 1
            tones = list(SkinTone)
            if not 0 <= index < len(tones):
                raise KeyError(str_value)
            return tones[index]
        return SkinTone[value.replace("-", "_").upper()]

    @staticmethod
    def from_scalar(code_point):
        """ Returns None for code points outside the skin tone range. """
        if FIRST_SKIN_TONE <= code_point <= LAST_SKIN_TONE:
            return SkinTone(code_point)
        return None


class ToneSupport(Enum):
    """ enum for the number of skin tones an emoji accepts """
    (
        NONE,
        ONE,
        TWO,
    ) = range(3)
