"""Tests for encoding resolution of files."""

import codecs

import pytest

from strict_line_io.character.encoding import (
    BOMDetector,
    DetectionMethod,
    EncodingResult,
    resolve_encoding,
    validate_encoding,
)
from strict_line_io.shared.config import FileConfig


class TestBOMDetector:
    """Test suite for BOM detection functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = BOMDetector()

    def test_utf8_bom_detection(self):
        """Test UTF-8 BOM detection."""
        result = self.detector.detect(codecs.BOM_UTF8 + b"abc")

        assert result is not None
        assert result.encoding == "utf-8-sig"
        assert result.method == DetectionMethod.BOM

    def test_utf16_bom_detection(self):
        """Test UTF-16 BOM detection in both byte orders."""
        for bom in (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE):
            result = self.detector.detect(bom + b"a\x00")

            assert result.encoding == "utf-16"

    def test_utf32_le_bom_preferred_over_utf16(self):
        """Test the longer UTF-32 LE mark wins over its UTF-16 LE prefix."""
        result = self.detector.detect(codecs.BOM_UTF32_LE)

        assert result.encoding == "utf-32"

    def test_utf32_be_bom_detection(self):
        """Test UTF-32 BE BOM detection."""
        result = self.detector.detect(codecs.BOM_UTF32_BE)

        assert result.encoding == "utf-32"

    def test_no_bom_detection(self):
        """Test data without BOM."""
        assert self.detector.detect(b"abc\n") is None

    def test_empty_data(self):
        """Test empty data."""
        assert self.detector.detect(b"") is None


class TestValidateEncoding:
    """Test codec validation."""

    def test_known_encoding(self):
        """Test known encodings are returned unchanged."""
        assert validate_encoding("latin-1") == "latin-1"

    def test_unknown_encoding(self):
        """Test unknown encodings raise LookupError."""
        with pytest.raises(LookupError):
            validate_encoding("no-such-codec")


class TestResolveEncoding:
    """Test choosing the codec of a file."""

    def test_explicit_encoding_wins(self, tmp_path):
        """Test an explicit encoding is used even when a BOM is present."""
        path = tmp_path / "bom.txt"
        path.write_bytes(codecs.BOM_UTF8 + b"abc")

        result = resolve_encoding(path, "latin-1")

        assert result == EncodingResult("latin-1", DetectionMethod.EXPLICIT)

    def test_explicit_encoding_does_not_open_file(self, tmp_path):
        """Test an explicit encoding needs no sniffing."""
        result = resolve_encoding(tmp_path / "missing.txt", "utf-8")

        assert result.method == DetectionMethod.EXPLICIT

    def test_bom_detected(self, tmp_path):
        """Test the BOM selects the codec."""
        path = tmp_path / "utf16.txt"
        path.write_bytes("abc".encode("utf-16"))

        result = resolve_encoding(str(path))

        assert result.encoding == "utf-16"
        assert result.method == DetectionMethod.BOM

    def test_fallback_without_bom(self, tmp_path):
        """Test files without BOM use the fallback encoding."""
        path = tmp_path / "plain.txt"
        path.write_bytes(b"abc")

        result = resolve_encoding(path, config=FileConfig(fallback_encoding="cp1252"))

        assert result.encoding == "cp1252"
        assert result.method == DetectionMethod.FALLBACK
        assert len(result.issues) == 1

    def test_bom_sniffing_disabled(self, tmp_path):
        """Test BOMs are ignored when sniffing is disabled."""
        path = tmp_path / "bom.txt"
        path.write_bytes(codecs.BOM_UTF8 + b"abc")

        result = resolve_encoding(path, config=FileConfig(detect_bom=False))

        assert result.encoding == "utf-8"
        assert result.method == DetectionMethod.FALLBACK
        assert result.issues == []

    def test_missing_file_raises(self, tmp_path):
        """Test sniffing a missing file raises."""
        with pytest.raises(FileNotFoundError):
            resolve_encoding(tmp_path / "missing.txt")
