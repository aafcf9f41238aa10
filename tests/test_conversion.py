from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from rwbin.core.codec import render
from rwbin.core.config import AppSettings
from rwbin.core.domain.errors import FileNotFound, InvalidFilename, InvalidLiteral
from rwbin.core.domain.formats import DumpFormat, LiteralFormat
from rwbin.core.services.conversion import read_file, write_literal


class MemoryStore:
    def __init__(self) -> None:
        self.files: dict[Path, bytes] = {}
        self.writes = 0

    def write(self, path: Path, data: bytes) -> int:
        self.writes += 1
        self.files[path] = bytes(data)
        return len(data)

    def read(self, path: Path) -> bytes:
        if path not in self.files:
            raise FileNotFound(f"Cannot open {path}: no such file")
        return self.files[path]

    def exists(self, path: Path) -> bool:
        return path in self.files


def _settings(**overrides) -> AppSettings:
    return AppSettings(_env_file=None, **overrides)


class TestWriteLiteral(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryStore()
        self.settings = _settings()

    def test_writes_encoded_bytes(self) -> None:
        result = write_literal("0xFAB0", "hex.bin", settings=self.settings, store=self.store)
        self.assertEqual(result.path, Path("hex.bin"))
        self.assertEqual(result.data, b"\xfa\xb0")
        self.assertEqual(result.literal.format, LiteralFormat.HEXADECIMAL)
        self.assertEqual(self.store.files[Path("hex.bin")], b"\xfa\xb0")

    def test_trace_fields(self) -> None:
        result = write_literal("d'10", "dec.bin", settings=self.settings, store=self.store)
        self.assertEqual(result.bits, "1010")
        self.assertEqual(result.padded_bits, "00001010")
        self.assertEqual(result.padding, 4)

    def test_bare_filename_gets_suffix(self) -> None:
        result = write_literal("1", "report", settings=self.settings, store=self.store)
        self.assertEqual(result.path, Path("report.bin"))

    def test_default_output(self) -> None:
        result = write_literal("1", settings=self.settings, store=self.store)
        self.assertEqual(result.path, Path("out.bin"))
        custom = _settings(default_output="fallback")
        self.assertEqual(write_literal("1", settings=custom, store=self.store).path, Path("fallback.bin"))

    def test_output_dir(self) -> None:
        settings = _settings(output_dir=Path("/data/out"))
        result = write_literal("255", "a.bin", settings=settings, store=self.store)
        self.assertEqual(result.path, Path("/data/out/a.bin"))

    def test_invalid_literal_never_touches_store(self) -> None:
        for token in ("b'012", "h'12G4", "-5", "", str(2**64)):
            with self.subTest(token=token):
                with self.assertRaises(InvalidLiteral):
                    write_literal(token, "x.bin", settings=self.settings, store=self.store)
        self.assertEqual(self.store.writes, 0)

    def test_invalid_filename_never_touches_store(self) -> None:
        with self.assertRaises(InvalidFilename):
            write_literal("1", "a:b.bin", settings=self.settings, store=self.store)
        with self.assertRaises(InvalidFilename):
            write_literal("1", "", settings=self.settings, store=self.store)
        self.assertEqual(self.store.writes, 0)

    def test_decimal_width_comes_from_settings(self) -> None:
        narrow = _settings(max_decimal_bits=8)
        self.assertEqual(write_literal("255", "a.bin", settings=narrow, store=self.store).data, b"\xff")
        with self.assertRaises(InvalidLiteral):
            write_literal("256", "a.bin", settings=narrow, store=self.store)


class TestReadFile(unittest.TestCase):
    def setUp(self) -> None:
        self.store = MemoryStore()
        self.settings = _settings()

    def test_reads_requested_path(self) -> None:
        self.store.files[Path("dec.bin")] = b"\x00\xff"
        dump = read_file("dec.bin", settings=self.settings, store=self.store)
        self.assertEqual(dump.path, Path("dec.bin"))
        self.assertEqual(dump.data, b"\x00\xff")
        self.assertEqual(dump.size, 2)

    def test_bare_name_falls_back_to_bin(self) -> None:
        self.store.files[Path("report.bin")] = b"\x01"
        dump = read_file("report", settings=self.settings, store=self.store)
        self.assertEqual(dump.path, Path("report.bin"))

    def test_exact_name_wins_over_fallback(self) -> None:
        self.store.files[Path("report")] = b"\x02"
        self.store.files[Path("report.bin")] = b"\x01"
        self.assertEqual(read_file("report", settings=self.settings, store=self.store).data, b"\x02")

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFound):
            read_file("missing.bin", settings=self.settings, store=self.store)

    def test_rejects_forbidden_characters(self) -> None:
        with self.assertRaises(InvalidFilename):
            read_file("a|b", settings=self.settings, store=self.store)

    def test_json_dump_omits_raw_bytes(self) -> None:
        self.store.files[Path("v.bin")] = b"\x01\x00"
        dump = read_file("v.bin", settings=self.settings, store=self.store)
        self.assertEqual(
            dump.model_dump(mode="json"),
            {"path": "v.bin", "size": 2, "hex": "0100", "value": 256},
        )


class TestRoundTripOnDisk(unittest.TestCase):
    def test_write_then_read_is_byte_exact(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = _settings(output_dir=Path(tmp))
            for token in ("0", "65535", "0xFAB", "b'1", "h'00000001"):
                with self.subTest(token=token):
                    written = write_literal(token, "value.bin", settings=settings)
                    dump = read_file("value.bin", settings=settings)
                    self.assertEqual(dump.data, written.data)
                    self.assertEqual((Path(tmp) / "value.bin").read_bytes(), written.data)

    def test_literal_dump_rewrites_identical_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = _settings(output_dir=Path(tmp))
            first = write_literal("b'1000000000", "first.bin", settings=settings)
            literal = render(read_file("first.bin", settings=settings).data, DumpFormat.LITERAL)
            second = write_literal(literal, "second.bin", settings=settings)
            self.assertEqual(literal, "h'0200")
            self.assertEqual(second.data, first.data)

    def test_invalid_literal_creates_no_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = _settings(output_dir=Path(tmp))
            with self.assertRaises(InvalidLiteral):
                write_literal("h'XYZ", "bad.bin", settings=settings)
            self.assertFalse((Path(tmp) / "bad.bin").exists())


if __name__ == "__main__":
    unittest.main()
