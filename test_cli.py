#!/usr/bin/env python3
"""Tests for the ds2poco command-line entry point."""

import os
import tempfile
import unittest
from io import StringIO
from pathlib import Path
from unittest.mock import patch

from ds2poco import join_usings, main

METADATA = """<edmx:Edmx xmlns:edmx="http://schemas.microsoft.com/ado/2007/06/edmx">
  <edmx:DataServices>
    <Schema Namespace="Demo" xmlns="http://schemas.microsoft.com/ado/2008/09/edm">
      <EntityType Name="Customer">
        <Property Name="CustomerID" Type="Edm.Guid" />
        <Property Name="Name" Type="Edm.String" />
      </EntityType>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>"""

CLEAN_ENV = {key: "" for key in [
    "DS2POCO_URI", "DS2POCO_OUTPUT_DIR", "DS2POCO_NAMESPACE", "DS2POCO_BASE_CLASS",
    "DS2POCO_USINGS", "DS2POCO_USER", "DS2POCO_PASSWORD"]}


class TestJoinUsings(unittest.TestCase):

    def test_join_usings(self):
        self.assertIsNone(join_usings(None))
        self.assertIsNone(join_usings([""]))
        self.assertEqual(join_usings(["System.IO;System.Linq", "System.IO"]), "System.IO\nSystem.Linq\nSystem.IO")
        self.assertEqual(join_usings(["System.Text\nSystem.Xml"]), "System.Text\nSystem.Xml")


class TestMain(unittest.TestCase):
    """Test argument and environment handling of main()."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.metadata = self.tmp / "metadata.xml"
        self.metadata.write_text(METADATA, encoding="utf-8")
        self.out = self.tmp / "out"

    def tearDown(self):
        self._tmp.cleanup()

    @patch.dict(os.environ, CLEAN_ENV)
    @patch('sys.stdout', new_callable=StringIO)
    def test_flags(self, mock_stdout):
        code = main([str(self.metadata), "-o", str(self.out), "-n", "Demo.Proxy",
                     "-b", "ModelBase", "--using", "System.ComponentModel", "--lf"])
        self.assertEqual(code, 0)
        source = (self.out / "Customer.cs").read_bytes().decode("utf-8")
        self.assertTrue(source.startswith("using System;\nusing System.ComponentModel;\n\nnamespace Demo.Proxy\n"))
        self.assertIn("public class Customer : ModelBase", source)
        self.assertIn("Processing done", mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=StringIO)
    def test_environment(self, mock_stdout):
        env = dict(CLEAN_ENV, DS2POCO_URI=str(self.metadata), DS2POCO_OUTPUT_DIR=str(self.out),
                   DS2POCO_NAMESPACE="FromEnv", DS2POCO_USINGS="System.Linq;System.Text")
        with patch.dict(os.environ, env):
            code = main([])
        self.assertEqual(code, 0)
        source = (self.out / "Customer.cs").read_text(encoding="utf-8")
        self.assertIn("namespace FromEnv", source)
        self.assertIn("using System.Linq;", source)
        self.assertIn("using System.Text;", source)

    @patch.dict(os.environ, CLEAN_ENV)
    @patch('sys.stderr', new_callable=StringIO)
    def test_missing_required(self, mock_stderr):
        self.assertEqual(main([]), 2)
        self.assertIn("Metadata URI is required", mock_stderr.getvalue())
        self.assertEqual(main([str(self.metadata)]), 2)
        self.assertIn("Export directory is required", mock_stderr.getvalue())

    @patch.dict(os.environ, CLEAN_ENV)
    @patch('sys.stderr', new_callable=StringIO)
    @patch('sys.stdout', new_callable=StringIO)
    def test_failure_exit_code(self, mock_stdout, mock_stderr):
        code = main([str(self.tmp / "missing.xml"), "-o", str(self.out)])
        self.assertEqual(code, 1)
        self.assertIn("An error occured while processing", mock_stdout.getvalue())
        self.assertIn("ERROR: load:", mock_stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
