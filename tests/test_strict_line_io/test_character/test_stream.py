"""Tests for the mark-capable character source."""

import io
from unittest.mock import Mock

import pytest

from strict_line_io.character.stream import (
    END_OF_SOURCE,
    CharacterSource,
    as_character_source,
)


def _drain(source: CharacterSource) -> str:
    return "".join(iter(source.read, END_OF_SOURCE))


class TestCharacterSourceReading:
    """Test sequential reading and peeking."""

    def test_read_characters_in_order(self):
        """Test characters come back one at a time then END_OF_SOURCE."""
        source = CharacterSource.from_string("ab")

        assert source.read() == "a"
        assert source.read() == "b"
        assert source.read() == END_OF_SOURCE
        assert source.read() == END_OF_SOURCE

    def test_separators_untouched(self):
        """Test CR and CR LF are not translated by in-memory sources."""
        source = CharacterSource.from_string("a\r\nb\rc")

        assert _drain(source) == "a\r\nb\rc"

    def test_peek_does_not_consume(self):
        """Test peek() returns the next character without advancing."""
        source = CharacterSource.from_string("ab")

        assert source.peek() == "a"
        assert source.peek() == "a"
        assert source.read() == "a"
        assert source.peek() == "b"
        source.read()
        assert source.peek() == END_OF_SOURCE

    def test_small_buffer(self):
        """Test reading across many buffer fills."""
        text = "0123456789" * 5
        source = CharacterSource.from_string(text, buffer_size=3)

        assert _drain(source) == text

    def test_reads_in_chunks(self):
        """Test the wrapped stream is read buffer_size characters at a time."""
        # Arrange
        stream = Mock()
        stream.read.side_effect = ["abcd", ""]
        source = CharacterSource(stream, buffer_size=4)

        # Act
        text = _drain(source)

        # Assert
        assert text == "abcd"
        stream.read.assert_called_with(4)
        assert stream.read.call_count == 2

    def test_invalid_construction_raises(self):
        """Test a missing stream or a non-positive buffer is rejected."""
        with pytest.raises(TypeError):
            CharacterSource(None)
        with pytest.raises(ValueError, match="buffer_size must be > 0"):
            CharacterSource(io.StringIO(""), buffer_size=0)

    def test_stream_errors_propagate(self):
        """Test failures of the wrapped stream surface from read()."""
        stream = Mock()
        stream.read.side_effect = OSError("broken pipe")
        source = CharacterSource(stream)

        with pytest.raises(OSError, match="broken pipe"):
            source.read()


class TestCharacterSourceMarkReset:
    """Test mark and reset."""

    def test_reset_rewinds_to_mark(self):
        """Test characters read after the mark are read again."""
        # Arrange
        source = CharacterSource.from_string("abcdef")
        source.read()
        source.mark(10)

        # Act
        source.read()
        source.read()
        source.reset()

        # Assert
        assert _drain(source) == "bcdef"

    def test_reset_across_buffer_fills(self):
        """Test rewinding over characters from several buffer fills."""
        source = CharacterSource.from_string("abcdefghij", buffer_size=2)
        source.mark(8)

        for _ in range(7):
            source.read()
        source.reset()

        assert _drain(source) == "abcdefghij"

    def test_reset_after_end_of_source(self):
        """Test rewinding after reaching the end of the stream."""
        source = CharacterSource.from_string("abc")
        source.mark(5)

        _drain(source)
        source.reset()

        assert _drain(source) == "abc"

    def test_mark_survives_reset(self):
        """Test the mark stays in place after a reset."""
        source = CharacterSource.from_string("abc")
        source.mark(5)

        source.read()
        source.reset()
        source.read()
        source.read()
        source.reset()

        assert _drain(source) == "abc"

    def test_reading_up_to_limit_keeps_mark(self):
        """Test exactly read_ahead_limit characters may be read."""
        source = CharacterSource.from_string("abcdef")
        source.mark(3)

        for _ in range(3):
            source.read()
        source.reset()

        assert source.read() == "a"

    def test_reading_past_limit_invalidates_mark(self):
        """Test reset fails once the read-ahead limit is exceeded."""
        source = CharacterSource.from_string("abcdef")
        source.mark(2)

        for _ in range(3):
            source.read()

        with pytest.raises(OSError, match="not marked"):
            source.reset()

    def test_reset_without_mark_raises(self):
        """Test reset needs a previous mark."""
        source = CharacterSource.from_string("abc")

        with pytest.raises(OSError):
            source.reset()

    def test_negative_limit_raises(self):
        """Test the read-ahead limit cannot be negative."""
        source = CharacterSource.from_string("abc")

        with pytest.raises(ValueError):
            source.mark(-1)

    def test_unsupported_mark(self):
        """Test sources created without mark support refuse mark/reset."""
        source = CharacterSource.from_string("abc", mark_supported=False)

        assert source.mark_supported is False
        with pytest.raises(io.UnsupportedOperation):
            source.mark(1)
        with pytest.raises(io.UnsupportedOperation):
            source.reset()


class TestCharacterSourceClose:
    """Test closing sources."""

    def test_close_closes_stream(self):
        """Test the source owns its stream."""
        stream = io.StringIO("abc")
        source = CharacterSource(stream)

        source.close()

        assert source.closed
        assert stream.closed

    def test_read_after_close_raises(self):
        """Test closed sources cannot be read."""
        source = CharacterSource.from_string("abc")
        source.close()

        with pytest.raises(ValueError, match="closed"):
            source.read()
        with pytest.raises(ValueError):
            source.peek()

    def test_context_manager(self):
        """Test leaving the with block closes the source."""
        with CharacterSource.from_string("abc") as source:
            assert source.read() == "a"

        assert source.closed


class TestAsCharacterSource:
    """Test wrapping inputs as character sources."""

    def test_source_passed_through(self):
        """Test an existing source is returned unchanged."""
        source = CharacterSource.from_string("abc")

        assert as_character_source(source) is source

    def test_text_stream_wrapped(self):
        """Test text streams are wrapped with mark support."""
        source = as_character_source(io.StringIO("abc"), buffer_size=2)

        assert isinstance(source, CharacterSource)
        assert source.mark_supported is True
        assert source.buffer_size == 2
        assert _drain(source) == "abc"

    def test_invalid_inputs_raise(self):
        """Test inputs that are not text streams are rejected."""
        with pytest.raises(TypeError):
            as_character_source(None)
        with pytest.raises(TypeError, match="from_string"):
            as_character_source("abc")
        with pytest.raises(TypeError):
            as_character_source(b"abc")
        with pytest.raises(TypeError, match="Unsupported source type"):
            as_character_source(42)
