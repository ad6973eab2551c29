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
Skin tones for emoji: render emoji with skin tones and find the
base emoji of toned ones again.
"""

from EmojiTones.definitions  import SkinTone, ToneSupport
from EmojiTones.Exceptions   import (ChainableError, CatalogLoadError,
                                     AnnotationsFileError)
from EmojiTones.ToneCodec    import (add_variation_selector, apply_one_tone,
                                     replace_two_tones, extract_tones,
                                     remove_tones, render_entry)
from EmojiTones.EmojiCatalog import (EmojiEntry, Category, Catalog,
                                     load_catalog, load_catalog_file)
from EmojiTones.ToneResolver import (DEFAULT_KEY_OVERRIDES,
                                     build_reverse_index, resolve_base_emoji,
                                     resolve_base_entry, find_entry)

__version__ = "1.0.0"
