"""
Tests for the Storage filesystem layer.
"""

import os
import shutil
import tempfile
import unittest
from unittest.mock import Mock, patch

from easy_filedb.models import WriteMode
from easy_filedb.storage import Storage


class TestStorage(unittest.TestCase):
    """Test suite for directory and file operations."""

    def setUp(self) -> None:
        """Set up a temporary directory and a storage with a mock logger."""
        self.test_dir = tempfile.mkdtemp(prefix="filedb_storage_test_")
        self.logger = Mock()
        self.storage = Storage(logger=self.logger)

    def tearDown(self) -> None:
        """Clean up the temporary directory."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_create_directory(self) -> None:
        """Test a missing directory is created."""
        path = os.path.join(self.test_dir, "users")

        self.storage.create_directory(path)

        self.assertTrue(os.path.isdir(path))

    def test_create_directory_is_idempotent(self) -> None:
        """Test creating an existing directory is suppressed and logged."""
        path = os.path.join(self.test_dir, "users")

        self.storage.create_directory(path)
        self.storage.create_directory(path)

        self.assertTrue(os.path.isdir(path))
        self.logger.warning.assert_not_called()
        self.assertTrue(self.logger.debug.called)

    def test_create_directory_failure_is_logged(self) -> None:
        """Test a failed create (missing parent) never raises."""
        path = os.path.join(self.test_dir, "missing", "users")

        self.storage.create_directory(path)

        self.assertFalse(os.path.exists(path))
        self.logger.warning.assert_called_once()

    def test_list_entries(self) -> None:
        """Test entries carry name, base name and full path."""
        for name in ("a.json", "b.json"):
            with open(os.path.join(self.test_dir, name), "w") as f:
                f.write("{}")

        entries = self.storage.list_entries(self.test_dir)

        self.assertEqual({e.name for e in entries}, {"a.json", "b.json"})
        self.assertEqual({e.base_name for e in entries}, {"a", "b"})
        for entry in entries:
            self.assertEqual(
                entry.full_path, os.path.join(self.test_dir, entry.name)
            )

    def test_list_entries_missing_directory_raises(self) -> None:
        """Test listing a missing directory raises an OSError."""
        with self.assertRaises(FileNotFoundError):
            self.storage.list_entries(os.path.join(self.test_dir, "nope"))

    def test_write_and_read_file(self) -> None:
        """Test bytes written in overwrite mode read back unchanged."""
        path = os.path.join(self.test_dir, "doc.json")

        self.storage.write_file(path, b'{"a": 1}')
        self.storage.write_file(path, b"2", WriteMode.OVERWRITE)

        self.assertEqual(self.storage.read_file(path), b"2")

    def test_exclusive_write_fails_if_file_exists(self) -> None:
        """Test exclusive mode refuses to replace an existing file."""
        path = os.path.join(self.test_dir, "doc.json")
        self.storage.write_file(path, b"1", WriteMode.EXCLUSIVE)

        with self.assertRaises(FileExistsError):
            self.storage.write_file(path, b"2", WriteMode.EXCLUSIVE)

        self.assertEqual(self.storage.read_file(path), b"1")

    def test_read_missing_file_raises(self) -> None:
        """Test reading a missing file propagates the error."""
        with self.assertRaises(FileNotFoundError):
            self.storage.read_file(os.path.join(self.test_dir, "x.json"))

    def test_delete_file(self) -> None:
        """Test deleting a file, and that a second delete raises."""
        path = os.path.join(self.test_dir, "doc.json")
        self.storage.write_file(path, b"{}")

        self.storage.delete_file(path)

        self.assertFalse(os.path.exists(path))
        with self.assertRaises(FileNotFoundError):
            self.storage.delete_file(path)

    def test_remove_directory_recursive(self) -> None:
        """Test nested files and directories are all removed."""
        root = os.path.join(self.test_dir, "db")
        nested = os.path.join(root, "users", "archive")
        os.makedirs(nested)
        for directory in (root, nested):
            with open(os.path.join(directory, "doc.json"), "w") as f:
                f.write("{}")

        self.storage.remove_directory(root)

        self.assertFalse(os.path.exists(root))

    def test_remove_missing_directory_is_noop(self) -> None:
        """Test removing an absent directory does not raise."""
        self.storage.remove_directory(os.path.join(self.test_dir, "nope"))

        self.logger.warning.assert_not_called()

    def test_remove_directory_on_file_is_logged(self) -> None:
        """Test removing a regular file as a directory never raises."""
        path = os.path.join(self.test_dir, "doc.json")
        self.storage.write_file(path, b"{}")

        self.storage.remove_directory(path)

        self.assertTrue(os.path.exists(path))
        self.logger.warning.assert_called_once()

    def test_remove_directory_continues_after_child_failure(self) -> None:
        """Test a child that cannot be deleted does not stop its siblings."""
        root = os.path.join(self.test_dir, "db")
        os.mkdir(root)
        names = ["a.json", "b.json", "c.json"]
        for name in names:
            with open(os.path.join(root, name), "w") as f:
                f.write("{}")
        stuck = os.path.join(root, "b.json")

        def delete_file(path: str) -> None:
            if path == stuck:
                raise PermissionError(f"cannot delete {path}")
            os.remove(path)

        with patch.object(
            self.storage, "delete_file", side_effect=delete_file
        ):
            self.storage.remove_directory(root)

        self.assertEqual(os.listdir(root), ["b.json"])
        # one for the stuck file, one for the non-empty rmdir
        self.assertEqual(self.logger.warning.call_count, 2)


if __name__ == "__main__":
    unittest.main()
