"""Tests for the Favorites domain model."""

import unittest

from domain.model.entry import WordEntry
from domain.model.favorites import Favorites


class TestFavorites(unittest.TestCase):
    """Test case-insensitive favorites keyed by word."""

    def setUp(self):
        """Set up a favorites set with two entries."""
        self.favorites = Favorites([WordEntry(word="zebra"), WordEntry(word="Apple")])

    def test_contains_is_case_insensitive(self):
        """Test membership ignores case."""
        self.assertIn("apple", self.favorites)
        self.assertIn("APPLE", self.favorites)
        self.assertNotIn("mango", self.favorites)

    def test_toggle_adds_then_removes(self):
        """Test toggling twice leaves the set unchanged."""
        entry = WordEntry(word="mango")

        self.assertTrue(self.favorites.toggle(entry))
        self.assertIn("mango", self.favorites)
        self.assertFalse(self.favorites.toggle(entry))
        self.assertNotIn("mango", self.favorites)
        self.assertEqual(len(self.favorites), 2)

    def test_toggle_matches_other_casing(self):
        """Test an entry saved as 'Apple' is removed by toggling 'apple'."""
        self.assertFalse(self.favorites.toggle(WordEntry(word="apple")))
        self.assertNotIn("Apple", self.favorites)

    def test_remove(self):
        """Test remove reports whether the word was saved."""
        self.assertTrue(self.favorites.remove("ZEBRA"))
        self.assertFalse(self.favorites.remove("zebra"))

    def test_sorted_by_word(self):
        """Test display order is case-insensitive by word."""
        self.favorites.add(WordEntry(word="banana"))

        self.assertEqual([e.word for e in self.favorites.sorted()], ["Apple", "banana", "zebra"])

    def test_entries_keep_insertion_order(self):
        """Test storage order follows insertion."""
        self.assertEqual([e.word for e in self.favorites.entries()], ["zebra", "Apple"])

    def test_replace_dedupes_by_key(self):
        """Test later duplicates win when replacing."""
        self.favorites.replace([WordEntry(word="Hi", origin="first"), WordEntry(word="hi", origin="second")])

        self.assertEqual(len(self.favorites), 1)
        self.assertEqual(self.favorites.get("HI").origin, "second")


if __name__ == '__main__':
    unittest.main()
