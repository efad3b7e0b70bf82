"""Abstract line reader and writer interfaces.

Concrete readers and writers, and the decorators layered over them, all
implement these interfaces, so a decorator can wrap any of them.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional


class BaseLineReader(ABC):
    """Interface of anything that reads lines sequentially."""

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """Read the next line.

        Returns:
            The line without its separator, or None when there is no more line

        Raises:
            OSError: If the underlying stream fails
        """

    @abstractmethod
    def skip(self, number: int) -> int:
        """Skip up to the given number of lines.

        Args:
            number: Number of lines to attempt to skip

        Returns:
            The actual number of lines skipped

        Raises:
            ValueError: If the number is negative
        """

    @abstractmethod
    def close(self) -> None:
        """Close the reader and its underlying stream."""

    def transfer_to(self, writer: "BaseLineWriter") -> int:
        """Write every remaining line to the given writer.

        Never returns if the reader does not end.

        Args:
            writer: Writer receiving the lines

        Returns:
            The number of lines transferred

        Raises:
            TypeError: If the writer is None
        """
        if writer is None:
            raise TypeError("Invalid writer (not None expected)")
        number = 0
        line = self.read_line()
        while line is not None:
            writer.write_line(line)
            number += 1
            line = self.read_line()
        return number

    def read_lines(self) -> List[str]:
        """Read every remaining line into a list."""
        return list(self)

    def __iter__(self) -> Iterator[str]:
        line = self.read_line()
        while line is not None:
            yield line
            line = self.read_line()

    def __enter__(self) -> "BaseLineReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class BaseLineWriter(ABC):
    """Interface of anything that writes lines sequentially."""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write a line, preceded by a separator unless it is the first one.

        Raises:
            TypeError: If the line is None
            OSError: If the underlying stream fails
        """

    @abstractmethod
    def new_line(self) -> None:
        """Write a separator, independently of the first line state."""

    @abstractmethod
    def flush(self) -> None:
        """Flush the underlying stream."""

    @abstractmethod
    def close(self) -> None:
        """Close the writer and its underlying stream."""

    def write_lines(self, lines: Iterable[str]) -> int:
        """Write every line of an iterable, returning how many were written."""
        number = 0
        for line in lines:
            self.write_line(line)
            number += 1
        return number

    def __enter__(self) -> "BaseLineWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
