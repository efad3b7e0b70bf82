"""Line reader and writer decorators.

Decorators wrap any BaseLineReader or BaseLineWriter, including other
decorators, and only adjust counters or guards; separator handling stays in
the wrapped object.
"""

from typing import Optional

from .base import BaseLineReader, BaseLineWriter


def _ensure_window(from_index: int, to_index: int) -> None:
    if from_index < 0:
        raise ValueError(
            f"Invalid from index: {from_index} (greater than or equal to 0 expected)"
        )
    if to_index < from_index:
        raise ValueError(
            f"Invalid to index: {to_index} (greater than or equal to {from_index} expected)"
        )


def _ensure_skip_number(number: int) -> None:
    if number < 0:
        raise ValueError(f"Invalid number: {number} (greater than or equal to 0 expected)")


class FilterLineReader(BaseLineReader):
    """Line reader forwarding every call to a wrapped reader."""

    def __init__(self, line_reader: BaseLineReader) -> None:
        if line_reader is None:
            raise TypeError("Invalid line reader (not None expected)")
        self.line_reader = line_reader

    def read_line(self) -> Optional[str]:
        return self.line_reader.read_line()

    def skip(self, number: int) -> int:
        return self.line_reader.skip(number)

    def close(self) -> None:
        self.line_reader.close()


class FilterLineWriter(BaseLineWriter):
    """Line writer forwarding every call to a wrapped writer."""

    def __init__(self, line_writer: BaseLineWriter) -> None:
        if line_writer is None:
            raise TypeError("Invalid line writer (not None expected)")
        self.line_writer = line_writer

    def write_line(self, line: str) -> None:
        self.line_writer.write_line(line)

    def new_line(self) -> None:
        self.line_writer.new_line()

    def flush(self) -> None:
        self.line_writer.flush()

    def close(self) -> None:
        self.line_writer.close()


class CountLineReader(FilterLineReader):
    """Line reader counting the lines read or skipped through it."""

    def __init__(self, line_reader: BaseLineReader) -> None:
        super().__init__(line_reader)
        self._count = 0

    @property
    def count(self) -> int:
        """Number of lines read or skipped so far."""
        return self._count

    def read_line(self) -> Optional[str]:
        line = super().read_line()
        if line is not None:
            self._count += 1
        return line

    def skip(self, number: int) -> int:
        _ensure_skip_number(number)
        if number == 0:
            return 0
        actual = super().skip(number)
        self._count += actual
        return actual


class CountLineWriter(FilterLineWriter):
    """Line writer counting the lines and separators written through it."""

    def __init__(self, line_writer: BaseLineWriter) -> None:
        super().__init__(line_writer)
        self._count = 0

    @property
    def count(self) -> int:
        """Number of write_line() and new_line() calls forwarded so far."""
        return self._count

    def write_line(self, line: str) -> None:
        super().write_line(line)
        self._count += 1

    def new_line(self) -> None:
        super().new_line()
        self._count += 1


class RangeLineReader(FilterLineReader):
    """Line reader returning only the lines within an inclusive index window.

    Indices are relative to the position of the wrapped reader when the
    decorator was created. Lines before the window are skipped on the first
    access; nothing past the window is ever read.
    """

    def __init__(self, line_reader: BaseLineReader, from_index: int, to_index: int) -> None:
        """Initialize the range reader.

        Args:
            line_reader: Reader to decorate
            from_index: Inclusive index of the first line to read
            to_index: Inclusive index of the last line to read

        Raises:
            TypeError: If the reader is None
            ValueError: If from_index is negative or greater than to_index
        """
        super().__init__(line_reader)
        _ensure_window(from_index, to_index)
        self._from_index = from_index
        self._to_index = to_index
        self._index = 0

    @property
    def from_index(self) -> int:
        """Inclusive index of the first line to read."""
        return self._from_index

    @property
    def to_index(self) -> int:
        """Inclusive index of the last line to read."""
        return self._to_index

    def read_line(self) -> Optional[str]:
        self._catch_up()
        if self._index > self._to_index:
            return None
        line = super().read_line()
        if line is not None:
            self._index += 1
        return line

    def skip(self, number: int) -> int:
        _ensure_skip_number(number)
        if number == 0 or self._index > self._to_index:
            return 0
        self._catch_up()
        actual = super().skip(min(number, self._to_index - self._index + 1))
        self._index += actual
        return actual

    def _catch_up(self) -> None:
        if self._index < self._from_index:
            self._index += super().skip(self._from_index - self._index)


class RangeLineWriter(FilterLineWriter):
    """Line writer forwarding only the calls within an inclusive index window.

    Every write_line() and new_line() call advances the index, whether or
    not it was forwarded.
    """

    def __init__(self, line_writer: BaseLineWriter, from_index: int, to_index: int) -> None:
        """Initialize the range writer.

        Args:
            line_writer: Writer to decorate
            from_index: Inclusive index of the first call to forward
            to_index: Inclusive index of the last call to forward

        Raises:
            TypeError: If the writer is None
            ValueError: If from_index is negative or greater than to_index
        """
        super().__init__(line_writer)
        _ensure_window(from_index, to_index)
        self._from_index = from_index
        self._to_index = to_index
        self._index = 0

    @property
    def from_index(self) -> int:
        """Inclusive index of the first call to forward."""
        return self._from_index

    @property
    def to_index(self) -> int:
        """Inclusive index of the last call to forward."""
        return self._to_index

    def write_line(self, line: str) -> None:
        if self._in_window():
            super().write_line(line)
        self._index += 1

    def new_line(self) -> None:
        if self._in_window():
            super().new_line()
        self._index += 1

    def _in_window(self) -> bool:
        return self._from_index <= self._index <= self._to_index
