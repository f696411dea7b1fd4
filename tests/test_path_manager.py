"""
Tests for PathManager path resolution.
"""

import os
import unittest

from easy_filedb.path_manager import PathManager


class TestPathManager(unittest.TestCase):
    """Test suite for database, collection and document paths."""

    def setUp(self) -> None:
        """Set up a path manager with a fixed base directory."""
        self.base_dir = os.path.join(os.sep, "srv", "app")
        self.path_manager = PathManager("testdb", self.base_dir)

    def test_database_root(self) -> None:
        """Test the root is the base directory joined with the name."""
        self.assertEqual(
            self.path_manager.get_database_root(),
            os.path.join(self.base_dir, "testdb"),
        )

    def test_default_database_name(self) -> None:
        """Test the default database name and base directory."""
        path_manager = PathManager()

        self.assertEqual(path_manager.database_name, ".data")
        self.assertEqual(
            path_manager.get_database_root(),
            os.path.join(os.getcwd(), ".data"),
        )

    def test_empty_database_name_uses_default(self) -> None:
        """Test an empty name never resolves the root to the base dir."""
        path_manager = PathManager("", self.base_dir)

        self.assertEqual(path_manager.database_name, ".data")
        self.assertEqual(
            path_manager.get_database_root(),
            os.path.join(self.base_dir, ".data"),
        )

    def test_collection_dir(self) -> None:
        """Test collection directories sit directly under the root."""
        self.assertEqual(
            self.path_manager.get_collection_dir("users"),
            os.path.join(self.base_dir, "testdb", "users"),
        )

    def test_document_path(self) -> None:
        """Test document files are named after the id with .json."""
        self.assertEqual(
            self.path_manager.get_document_path("users", "11111111"),
            os.path.join(self.base_dir, "testdb", "users", "11111111.json"),
        )

    def test_paths_are_deterministic(self) -> None:
        """Test repeated calls return the same paths without I/O."""
        first = self.path_manager.get_document_path("users", "abc")
        second = self.path_manager.get_document_path("users", "abc")

        self.assertEqual(first, second)
        self.assertFalse(os.path.exists(first))

    def test_names_are_not_sanitized(self) -> None:
        """Test ids are joined as given, including path separators."""
        path = self.path_manager.get_document_path("users", "a/b")

        self.assertTrue(path.endswith(os.path.join("users", "a/b.json")))


if __name__ == "__main__":
    unittest.main()
