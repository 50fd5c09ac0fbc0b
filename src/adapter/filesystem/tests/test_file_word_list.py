"""Tests for FileWordListSource."""

import tempfile
import unittest
from pathlib import Path

from adapter.filesystem.word_list import FileWordListSource


class TestFileWordListSource(unittest.TestCase):
    """Test loading word lists from a directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.directory = Path(self._tmp.name)
        self.source = FileWordListSource(self.directory)

    def tearDown(self):
        self._tmp.cleanup()

    def test_loads_named_file(self):
        """Test <name>.txt is read and normalized."""
        (self.directory / "enable.txt").write_text("aa\nab\nCat\n", encoding="utf-8")

        word_list = self.source.load("enable")

        self.assertEqual(word_list.name, "enable")
        self.assertEqual(len(word_list), 3)
        self.assertTrue(word_list.contains("CAT"))
        self.assertFalse(word_list.contains("dog"))

    def test_windows_line_endings(self):
        """Test \\r\\n files load cleanly."""
        (self.directory / "sowpods.txt").write_bytes(b"aa\r\nzyzzyva\r\n")

        word_list = self.source.load("sowpods")

        self.assertTrue(word_list.contains("zyzzyva"))
        self.assertEqual(len(word_list), 2)

    def test_missing_file_gives_empty_list(self):
        """Test a missing file is not fatal."""
        with self.assertLogs("adapter.filesystem.word_list", level="WARNING"):
            word_list = self.source.load("twl2014")

        self.assertEqual(len(word_list), 0)
        self.assertFalse(word_list.contains("aa"))
        self.assertEqual(word_list.name, "twl2014")

    def test_undecodable_file_gives_empty_list(self):
        """Test a non-UTF-8 file is logged and treated as empty."""
        (self.directory / "enable.txt").write_bytes(b"\xff\xfe\xfa\n")

        with self.assertLogs("adapter.filesystem.word_list", level="ERROR"):
            word_list = self.source.load("enable")

        self.assertEqual(len(word_list), 0)

    def test_empty_file(self):
        (self.directory / "enable.txt").write_text("", encoding="utf-8")

        self.assertEqual(len(self.source.load("enable")), 0)

    def test_path_for(self):
        self.assertEqual(self.source.path_for("enable"), self.directory / "enable.txt")
