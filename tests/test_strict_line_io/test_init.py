"""Tests for the package entry point."""

import io

import strict_line_io
from strict_line_io import (
    CountLineReader,
    LineIOConfig,
    LineReader,
    LineSeparator,
    LineWriter,
    RangeLineWriter,
)


class TestPackageExports:
    """Test the public API of the package."""

    def test_version_info(self):
        """Test package metadata."""
        assert strict_line_io.__version__ == "0.1.0"
        assert strict_line_io.__author__

    def test_all_exports_exist(self):
        """Test every name in __all__ is importable."""
        for name in strict_line_io.__all__:
            assert hasattr(strict_line_io, name), name


class TestProgressiveDisclosure:
    """Test the documented usage levels end to end."""

    def test_level_one_files(self, tmp_path):
        """Test copying a file while keeping its separator."""
        # Arrange
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        source.write_bytes(b"a\rb\rc\r")

        # Act
        separator = LineSeparator.detect_path(source)
        with LineReader.from_path(source) as reader, \
                LineWriter.from_path(target, separator=separator, config=LineIOConfig.posix()) as writer:
            copied = reader.transfer_to(writer)

        # Assert
        assert separator is LineSeparator.CR
        assert copied == 3
        assert target.read_bytes() == b"a\rb\rc\r"

    def test_level_three_decorators(self):
        """Test stacking decorators over streams."""
        # Arrange
        sink = io.StringIO()
        reader = CountLineReader(LineReader(io.StringIO("h\n1\n2\n3"), LineSeparator.LF))
        writer = RangeLineWriter(LineWriter(sink, LineSeparator.CR_LF), 1, 3)

        # Act
        reader.transfer_to(writer)

        # Assert
        assert reader.count == 4
        assert sink.getvalue() == "1\r\n2\r\n3"
