"""
Path Tests

Normalization, derived paths and ancestry of file system paths.
"""

import unittest

from shellsim.filesystem import Path


class TestPathNormalization(unittest.TestCase):
    """Test how paths are normalized at construction."""

    def test_collapses_slashes_and_parent_segments(self):
        """Test that '//' and '..' are resolved."""
        self.assertEqual(str(Path("/a//b/../c")), "/a/c")

    def test_parent_segments_at_root_are_absorbed(self):
        """Test that '..' above the root is ignored."""
        self.assertEqual(str(Path("/../../x")), "/x")

    def test_reflexive_segments_are_dropped(self):
        """Test that '.' segments disappear."""
        self.assertEqual(str(Path("/a/./b/.")), "/a/b")

    def test_relative_input_becomes_absolute(self):
        """Test that paths always start at the root."""
        self.assertEqual(str(Path("a", "b")), "/a/b")

    def test_fragments_are_joined(self):
        """Test that fragments are concatenated with slashes."""
        self.assertEqual(str(Path("/a/", "/b", "c/")), "/a/b/c")

    def test_normalization_is_idempotent(self):
        """Test that normalizing twice changes nothing."""
        for raw in ["/", "", "a/../../b", "/x/./y//z/..", "////", "/a/b/c/../../.."]:
            once = str(Path(raw))
            self.assertEqual(str(Path(once)), once)
            self.assertTrue(once.startswith("/"))
            self.assertNotIn(".", Path(raw).parts)
            self.assertNotIn("..", Path(raw).parts)

    def test_requires_a_fragment(self):
        """Test that a path without fragments is rejected."""
        with self.assertRaises(ValueError):
            Path()


class TestPathProperties(unittest.TestCase):
    """Test the values derived from a path."""

    def test_trailing_slash_marks_directory(self):
        """Test is_directory."""
        self.assertTrue(Path("/a/").is_directory)
        self.assertFalse(Path("/a").is_directory)
        self.assertEqual(str(Path("/a/")), "/a")

    def test_root_is_always_directory(self):
        """Test that the root reports is_directory."""
        self.assertTrue(Path("/").is_directory)
        self.assertTrue(Path("/a/..").is_directory)
        self.assertTrue(Path("/").is_root)

    def test_file_name(self):
        """Test the last segment."""
        self.assertEqual(Path("/a/b").file_name, "b")
        self.assertEqual(Path("/").file_name, "")

    def test_parent(self):
        """Test the parent path, including the parent of the root."""
        self.assertEqual(Path("/a/b").parent, Path("/a"))
        self.assertEqual(Path("/a").parent, Path("/"))
        self.assertEqual(Path("/").parent, Path("/"))

    def test_ancestors(self):
        """Test that ancestors run from the parent up to the root."""
        self.assertEqual(Path("/a/b/c").ancestors, [Path("/a/b"), Path("/a"), Path("/")])
        self.assertEqual(Path("/").ancestors, [])

    def test_parts(self):
        """Test the segments of a path."""
        self.assertEqual(Path("/a/./b").parts, ("a", "b"))
        self.assertEqual(Path("/").parts, ())

    def test_equality_includes_directory_flag(self):
        """Test that '/a' and '/a/' differ."""
        self.assertEqual(Path("/a/b"), Path("/a//b"))
        self.assertEqual(hash(Path("/a/b")), hash(Path("/a//b")))
        self.assertNotEqual(Path("/a"), Path("/a/"))


class TestPathAncestry(unittest.TestCase):
    """Test ancestor queries and child paths."""

    def test_is_ancestor_of(self):
        """Test strict ancestry."""
        self.assertTrue(Path("/a").is_ancestor_of(Path("/a/b")))
        self.assertTrue(Path("/").is_ancestor_of(Path("/a")))
        self.assertFalse(Path("/a").is_ancestor_of(Path("/a")))
        self.assertFalse(Path("/a").is_ancestor_of(Path("/ab")))
        self.assertFalse(Path("/a/b").is_ancestor_of(Path("/a")))

    def test_get_ancestors_until(self):
        """Test ancestors up to and including a given ancestor."""
        self.assertEqual(
            Path("/a/b/c").get_ancestors_until(Path("/a")),
            [Path("/a/b"), Path("/a")]
        )
        self.assertEqual(Path("/a/b").get_ancestors_until(Path("/a/b")), [])

    def test_get_ancestors_until_rejects_non_ancestor(self):
        """Test that an unrelated path is rejected."""
        with self.assertRaises(ValueError):
            Path("/a/b").get_ancestors_until(Path("/x"))

    def test_get_child(self):
        """Test that children are normalized."""
        self.assertEqual(Path("/a").get_child("b/../c"), Path("/a/c"))
        self.assertTrue(Path("/a").get_child("b/").is_directory)
        self.assertEqual(Path("/").get_child("x"), Path("/x"))

    def test_interpret_relative(self):
        """Test that relative paths are resolved against the cwd."""
        self.assertEqual(Path.interpret("/home", "docs"), Path("/home/docs"))
        self.assertEqual(Path.interpret(Path("/home/user"), "..", "x"), Path("/home/x"))

    def test_interpret_absolute(self):
        """Test that absolute paths ignore the cwd."""
        self.assertEqual(Path.interpret("/home", "/etc"), Path("/etc"))

    def test_interpret_without_paths(self):
        """Test that the cwd itself is returned."""
        self.assertEqual(Path.interpret("/home"), Path("/home"))


if __name__ == '__main__':
    unittest.main()
