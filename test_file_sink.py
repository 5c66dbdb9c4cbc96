#!/usr/bin/env python3
"""Unit tests for writing generated units to disk."""

import tempfile
import unittest
from pathlib import Path

from ds2poco_lib.errors import OutputWriteError
from ds2poco_lib.file_sink import write_unit
from ds2poco_lib.models import EmittedUnit


class TestWriteUnit(unittest.TestCase):
    """Test directory creation, line endings and path containment."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.out = self.tmp / "export"

    def tearDown(self):
        self._tmp.cleanup()

    def test_write_creates_directory(self):
        path = write_unit(EmittedUnit(class_name="Product", source="a\nb\n"), self.out)
        self.assertEqual(path, self.out / "Product.cs")
        self.assertEqual(path.read_bytes(), b"a\r\nb\r\n")

    def test_lf_line_ending(self):
        path = write_unit(EmittedUnit(class_name="Product", source="a\nb\n"), str(self.out), line_ending="\n")
        self.assertEqual(path.read_bytes(), b"a\nb\n")

    def test_relative_escape_refused(self):
        """A class name with '..' cannot write beside the export directory."""
        with self.assertRaises(OutputWriteError):
            write_unit(EmittedUnit(class_name="../escaped", source="x"), self.out)
        self.assertFalse((self.tmp / "escaped.cs").exists())

    def test_absolute_name_refused(self):
        target = self.tmp / "elsewhere" / "absolute"
        with self.assertRaises(OutputWriteError):
            write_unit(EmittedUnit(class_name=str(target), source="x"), self.out)
        self.assertFalse(target.with_suffix(".cs").exists())

    def test_subdirectory_refused(self):
        with self.assertRaises(OutputWriteError):
            write_unit(EmittedUnit(class_name="nested/Product", source="x"), self.out)
        self.assertFalse((self.out / "nested").exists())


if __name__ == "__main__":
    unittest.main()
