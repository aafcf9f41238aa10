from __future__ import annotations

import unittest

from rwbin.adapters.filenames import (
    check_filename,
    is_valid_filename,
    resolve_filename,
    with_default_suffix,
)
from rwbin.core.domain.errors import InvalidFilename


class TestFilenames(unittest.TestCase):
    def test_forbidden_characters(self) -> None:
        for name in ("a<b", "a>b", "a:b.bin", "a;b", "a,b", "a?b", 'a"b', "a*b", "a|b", "dir/file.bin"):
            with self.subTest(name=name):
                self.assertFalse(is_valid_filename(name))
                with self.assertRaises(InvalidFilename):
                    resolve_filename(name)

    def test_nul_byte_is_rejected(self) -> None:
        self.assertFalse(is_valid_filename("a\x00b"))
        with self.assertRaises(InvalidFilename):
            resolve_filename("a\x00b.bin")

    def test_bare_name_gets_bin_suffix(self) -> None:
        self.assertEqual(resolve_filename("report"), "report.bin")
        self.assertTrue(is_valid_filename("report.bin"))

    def test_existing_suffix_is_kept(self) -> None:
        self.assertEqual(resolve_filename("dec.bin"), "dec.bin")
        self.assertEqual(resolve_filename("dump.dat"), "dump.dat")
        self.assertEqual(with_default_suffix("archive.tar.gz"), "archive.tar.gz")

    def test_empty_names_are_rejected(self) -> None:
        for name in ("", "   "):
            with self.assertRaises(InvalidFilename):
                resolve_filename(name)
        self.assertFalse(is_valid_filename(""))

    def test_check_filename_does_not_add_suffix(self) -> None:
        self.assertEqual(check_filename("report"), "report")


if __name__ == "__main__":
    unittest.main()
