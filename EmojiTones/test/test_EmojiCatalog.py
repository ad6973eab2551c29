#!/usr/bin/python3

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
import tempfile
import threading
import unittest

from EmojiTones.definitions import ToneSupport
from EmojiTones.Exceptions import CatalogLoadError
from EmojiTones.EmojiCatalog import (EmojiEntry, Category, Catalog,
                                     load_catalog, load_catalog_file)
from EmojiTones.ToneResolver import resolve_base_emoji


GRINNING      = "\U0001F600"
THUMBS_UP     = "\U0001F44D"
HANDSHAKE     = "\U0001F91D"
HANDSHAKE_TEMPLATE = "\U0001FAF1\U0001F3FB\u200d\U0001FAF2\U0001F3FF"
HOLDING_HANDS = "\U0001F9D1\u200d\U0001F91D\u200d\U0001F9D1"
HOLDING_HANDS_TEMPLATE = "\U0001F9D1\U0001F3FB\u200d\U0001F91D" \
                         "\u200d\U0001F9D1\U0001F3FF"
MELTING       = "\U0001FAE0"

CATALOG_TEXT = (
    "Smileys\n"
    + GRINNING + "\n"
    + MELTING + ",,14.0\n"
    "\n"
    "People,1\n"
    + THUMBS_UP + ",1\n"
    + HOLDING_HANDS + "," + HOLDING_HANDS_TEMPLATE + ",12.0\n"
    + HANDSHAKE + "," + HANDSHAKE_TEMPLATE + ",,14.0\n"
)


class TestLoadCatalog(unittest.TestCase):

    def test_single_group(self):
        catalog = load_catalog("Smileys\n" + GRINNING + ",,12.0\n", 15.0)

        self.assertEqual(len(catalog), 1)
        category = catalog.categories[0]
        self.assertEqual(category.name, "Smileys")
        self.assertFalse(category.supports_skin_tones)
        self.assertEqual(len(category), 1)

        entry = category.entries[0]
        self.assertEqual(entry.string, GRINNING)
        self.assertEqual(entry.tone_support, ToneSupport.NONE)
        self.assertIsNone(entry.tone_template)
        self.assertEqual(entry.version, 12.0)
        self.assertIsNone(entry.tone_version)

    def test_groups_and_tone_fields(self):
        catalog = load_catalog(CATALOG_TEXT, 15.0)

        self.assertEqual([c.name for c in catalog], ["Smileys", "People"])
        self.assertEqual([c.supports_skin_tones for c in catalog],
                         [False, True])

        people = catalog.get_category("People")
        self.assertEqual([e.string for e in people],
                         [THUMBS_UP, HOLDING_HANDS, HANDSHAKE])
        self.assertEqual([e.tone_support for e in people],
                         [ToneSupport.ONE, ToneSupport.TWO, ToneSupport.TWO])
        self.assertIsNone(people.entries[0].tone_template)
        self.assertEqual(people.entries[1].tone_template,
                         HOLDING_HANDS_TEMPLATE)
        self.assertEqual(people.entries[2].tone_version, 14.0)

    def test_bytes_input(self):
        catalog = load_catalog(CATALOG_TEXT.encode("utf-8"), 15.0)
        self.assertEqual(catalog, load_catalog(CATALOG_TEXT, 15.0))

    def test_crlf_line_endings(self):
        catalog = load_catalog(CATALOG_TEXT.replace("\n", "\r\n"), 15.0)
        self.assertEqual(catalog, load_catalog(CATALOG_TEXT, 15.0))

    def test_without_trailing_newline(self):
        catalog = load_catalog("Smileys\n" + GRINNING, 15.0)
        self.assertEqual(len(catalog.categories[0]), 1)

    def test_consecutive_blank_lines(self):
        text = "A\n" + GRINNING + "\n\n\n\nB\n" + THUMBS_UP + "\n"
        catalog = load_catalog(text, 15.0)
        self.assertEqual([c.name for c in catalog], ["A", "B"])

    def test_empty_text(self):
        self.assertEqual(len(load_catalog("", 15.0)), 0)
        self.assertEqual(len(load_catalog("\n\n", 15.0)), 0)

    def test_group_with_empty_name_is_dropped(self):
        text = ",1\n" + THUMBS_UP + ",1\n\nSmileys\n" + GRINNING + "\n"
        catalog = load_catalog(text, 15.0)
        self.assertEqual([c.name for c in catalog], ["Smileys"])
        self.assertEqual([e.string for e in catalog.iter_entries()],
                         [GRINNING])

    def test_empty_skin_tone_flag(self):
        catalog = load_catalog("People,\n" + THUMBS_UP + ",1\n", 15.0)
        self.assertFalse(catalog.categories[0].supports_skin_tones)

    def test_group_without_entries(self):
        catalog = load_catalog("Empty\n\nSmileys\n" + GRINNING + "\n", 15.0)
        self.assertEqual([len(c) for c in catalog], [0, 1])


class TestVersionGating(unittest.TestCase):

    def test_newer_emoji_are_dropped(self):
        catalog = load_catalog(CATALOG_TEXT, 13.1)
        smileys = catalog.get_category("Smileys")
        self.assertEqual([e.string for e in smileys], [GRINNING])

    def test_version_equal_to_ceiling_is_kept(self):
        catalog = load_catalog(CATALOG_TEXT, 14.0)
        self.assertIn(MELTING, [e.string for e in catalog.iter_entries()])
        handshake = catalog.get_category("People").entries[2]
        self.assertEqual(handshake.tone_support, ToneSupport.TWO)

    def test_newer_skin_tones_are_disabled(self):
        catalog = load_catalog(CATALOG_TEXT, 13.1)
        handshake = catalog.get_category("People").entries[2]
        self.assertEqual(handshake.string, HANDSHAKE)
        self.assertEqual(handshake.tone_support, ToneSupport.NONE)
        self.assertIsNone(handshake.tone_template)

    def test_no_surviving_entry_exceeds_ceiling(self):
        for ceiling in [0.0, 11.0, 12.0, 13.1, 14.0, 15.0]:
            catalog = load_catalog(CATALOG_TEXT, ceiling)
            for entry in catalog.iter_entries():
                if entry.version is not None:
                    self.assertLessEqual(entry.version, ceiling)
                if entry.tone_version is not None and \
                   entry.tone_version > ceiling:
                    self.assertEqual(entry.tone_support, ToneSupport.NONE)

    def test_unversioned_entries_always_survive(self):
        catalog = load_catalog(CATALOG_TEXT, 0.0)
        self.assertEqual([e.string for e in catalog.iter_entries()],
                         [GRINNING, THUMBS_UP, HANDSHAKE])


class TestMalformedCatalog(unittest.TestCase):

    def assert_load_error(self, text):
        with self.assertRaises(CatalogLoadError):
            load_catalog(text, 15.0)

    def test_header_with_too_many_fields(self):
        self.assert_load_error("Smileys,1,x\n" + GRINNING + "\n")

    def test_entry_with_too_many_fields(self):
        self.assert_load_error("Smileys\n" + GRINNING + ",,12.0,13.0,x\n")

    def test_missing_emoji(self):
        self.assert_load_error("Smileys\n,1\n")

    def test_invalid_version(self):
        self.assert_load_error("Smileys\n" + GRINNING + ",,twelve\n")
        self.assert_load_error("Smileys\n" + GRINNING + ",,,nan\n")

    def test_invalid_utf8(self):
        self.assert_load_error(b"Smileys\n\xf0\x9f\n")

    def test_wrong_type(self):
        self.assert_load_error(None)

    def test_error_message_names_line(self):
        text = "Smileys\n" + GRINNING + "\n" + GRINNING + ",,x\n"
        with self.assertRaises(CatalogLoadError) as cm:
            load_catalog(text, 15.0)
        self.assertIn("line 3", str(cm.exception))

    def test_load_catalog_file(self):
        with tempfile.TemporaryDirectory(prefix="test_emojitones_") as dir:
            filename = os.path.join(dir, "categories.csv")
            with open(filename, "w", encoding="utf-8") as f:
                f.write(CATALOG_TEXT)
            catalog = load_catalog_file(filename, 15.0)
            self.assertEqual(catalog, load_catalog(CATALOG_TEXT, 15.0))

            with self.assertRaises(CatalogLoadError):
                load_catalog_file(os.path.join(dir, "missing.csv"), 15.0)


class TestModel(unittest.TestCase):

    def test_template_required_for_two_tones(self):
        with self.assertRaises(ValueError):
            EmojiEntry(HOLDING_HANDS, ToneSupport.TWO)
        with self.assertRaises(ValueError):
            EmojiEntry(THUMBS_UP, ToneSupport.ONE, HOLDING_HANDS_TEMPLATE)

    def test_category_needs_name(self):
        with self.assertRaises(ValueError):
            Category("", False, [])

    def test_read_only(self):
        catalog = load_catalog(CATALOG_TEXT, 15.0)
        category = catalog.categories[0]
        entry = category.entries[0]
        with self.assertRaises(AttributeError):
            entry.string = THUMBS_UP
        with self.assertRaises(AttributeError):
            category.name = "x"
        with self.assertRaises(AttributeError):
            catalog.categories = ()
        self.assertIsInstance(category.entries, tuple)
        self.assertIsInstance(catalog.categories, tuple)

    def test_iter_entries(self):
        catalog = load_catalog(CATALOG_TEXT, 15.0)
        self.assertEqual(len(list(catalog.iter_entries())), 5)
        self.assertEqual([e.string for e in
                          catalog.iter_entries(skin_tones_only=True)],
                         [THUMBS_UP, HOLDING_HANDS, HANDSHAKE])

    def test_reverse_index_is_cached(self):
        catalog = load_catalog(CATALOG_TEXT, 15.0)
        index = catalog.get_reverse_index()
        self.assertIs(catalog.get_reverse_index(), index)

    def test_reverse_index_is_read_only(self):
        catalog = load_catalog("People,1\n" + THUMBS_UP + ",1\n", 15.0)
        index = catalog.get_reverse_index()
        with self.assertRaises(TypeError):
            index[0x1F44D] = ()
        with self.assertRaises(TypeError):
            del index[0x1F44D]
        with self.assertRaises(AttributeError):
            index[0x1F44D].clear()
        with self.assertRaises(AttributeError):
            index.clear()

        self.assertEqual(resolve_base_emoji(catalog,
                                            THUMBS_UP + "\U0001F3FB"),
                         THUMBS_UP)

    def test_supports_tones(self):
        self.assertFalse(EmojiEntry(GRINNING).supports_tones())
        self.assertTrue(EmojiEntry(THUMBS_UP, ToneSupport.ONE)
                        .supports_tones())
        self.assertTrue(EmojiEntry(HOLDING_HANDS, ToneSupport.TWO,
                                   HOLDING_HANDS_TEMPLATE).supports_tones())

    def test_reverse_index_concurrent_first_use(self):
        catalog = load_catalog(CATALOG_TEXT, 15.0)
        results = []

        def run():
            results.append(catalog.get_reverse_index())

        threads = [threading.Thread(target=run) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(results), 8)
        for index in results:
            self.assertIs(index, results[0])


if __name__ == '__main__':
    unittest.main()
