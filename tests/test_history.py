"""
Input History Tests

Adding, bounding and navigating entered lines.
"""

import unittest

from shellsim.shell import InputHistory


class TestInputHistory(unittest.TestCase):
    """Test the input history."""

    def setUp(self):
        self.history = InputHistory()
        for line in ["first", "second", "third"]:
            self.history.add(line)

    def test_newest_first(self):
        """Test that the newest entry has index 0."""
        self.assertEqual(self.history.entries, ["third", "second", "first"])
        self.assertEqual(self.history.get(0), "third")
        self.assertEqual(len(self.history), 3)

    def test_ignores_blank_entries(self):
        """Test that blank lines are not stored."""
        self.history.add("")
        self.history.add("   ")

        self.assertEqual(len(self.history), 3)

    def test_ignores_repeated_entries(self):
        """Test that repeating the newest entry is not stored twice."""
        self.history.add("third")
        self.history.add(" third ")
        self.history.add("second")

        self.assertEqual(self.history.entries, ["second", "third", "second", "first"])

    def test_get_bounds(self):
        """Test index -1 and out of range indices."""
        self.assertEqual(self.history.get(-1), "")
        with self.assertRaises(IndexError):
            self.history.get(3)
        with self.assertRaises(IndexError):
            self.history.get(-2)

    def test_previous_and_next(self):
        """Test moving through the history."""
        self.assertEqual(self.history.previous(), "third")
        self.assertEqual(self.history.previous(), "second")
        self.assertEqual(self.history.previous(), "first")
        self.assertEqual(self.history.previous(), "first")
        self.assertEqual(self.history.next(), "second")
        self.assertEqual(self.history.next(), "third")
        self.assertEqual(self.history.next(), "")
        self.assertEqual(self.history.next(), "")
        self.assertEqual(self.history.index, -1)

    def test_add_resets_index(self):
        """Test that adding an entry restarts navigation."""
        self.history.previous()
        self.history.previous()
        self.history.add("fourth")

        self.assertEqual(self.history.index, -1)
        self.assertEqual(self.history.previous(), "fourth")

    def test_empty_history(self):
        """Test navigating an empty history."""
        history = InputHistory()

        self.assertEqual(history.previous(), "")
        self.assertEqual(history.next(), "")

    def test_max_size(self):
        """Test that the oldest entries are dropped beyond the maximum size."""
        history = InputHistory(max_size=2)
        for line in ["a", "b", "c"]:
            history.add(line)

        self.assertEqual(history.entries, ["c", "b"])

    def test_initial_entries(self):
        """Test constructing a history from existing entries."""
        history = InputHistory(["new", "old", "older"], max_size=2)

        self.assertEqual(history.entries, ["new", "old"])

    def test_clear(self):
        """Test that clear removes every entry."""
        self.history.previous()
        self.history.clear()

        self.assertEqual(len(self.history), 0)
        self.assertEqual(self.history.index, -1)


if __name__ == '__main__':
    unittest.main()
