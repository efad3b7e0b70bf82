"""Line separator strategies and separator detection.

Each separator knows how to consume one line and its terminator from a
character source, and how to render itself when writing. Detection samples
the start of a mark-capable source and takes a majority vote between LF,
CR LF and CR terminators.
"""

import io
from enum import Enum
from typing import Dict, List, Optional

from ..character.encoding import PathInput
from ..character.files import open_source
from ..character.stream import END_OF_SOURCE, CharacterSource
from ..shared.config import DEFAULT_SAMPLE_LIMIT, PLATFORM_LINE_SEPARATOR, LineIOConfig
from ..shared.logging import get_logger
from ..shared.result import DetectionResult

LF_CHAR = "\n"
CR_CHAR = "\r"


class LineSeparator(Enum):
    """Line separator conventions used by line readers and writers.

    ``DEFAULT`` reads lines ended by either LF or CR, and writes the platform
    separator. Enum values are identifiers only, since ``DEFAULT`` shares its
    literal with another member on most platforms; use ``str()`` or
    ``render()`` to obtain the characters written.
    """

    LF = "lf"
    CR_LF = "cr_lf"
    CR = "cr"
    DEFAULT = "default"

    @property
    def literal(self) -> str:
        """Characters written for this separator, platform default for DEFAULT."""
        return _LITERALS[self]

    def render(self, platform_separator: str = PLATFORM_LINE_SEPARATOR) -> str:
        """Characters written for this separator.

        Args:
            platform_separator: Literal substituted for DEFAULT

        Returns:
            The separator text
        """
        if self is LineSeparator.DEFAULT:
            return platform_separator
        return _LITERALS[self]

    def __str__(self) -> str:
        return _LITERALS[self]

    def consume_line(self, source: CharacterSource, accumulator: List[str]) -> str:
        """Read one line from the source, appending its content to the accumulator.

        Args:
            source: Character source positioned at the start of a line
            accumulator: List receiving the line characters, terminator excluded

        Returns:
            The last terminator character consumed, or END_OF_SOURCE if the
            source ended before a terminator
        """
        if self is LineSeparator.LF:
            return _consume_until(source, accumulator, LF_CHAR)
        if self is LineSeparator.CR:
            return _consume_until(source, accumulator, CR_CHAR)
        if self is LineSeparator.CR_LF:
            return _consume_crlf(source, accumulator)
        return _consume_any(source, accumulator)

    @classmethod
    def analyze(
        cls,
        source: CharacterSource,
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
        correlation_id: Optional[str] = None,
    ) -> DetectionResult:
        """Count separators over a sample of the source and pick the majority.

        The source is marked before sampling and reset afterwards, so it is
        left positioned as if detection never happened.

        Args:
            source: Mark-capable character source
            sample_limit: Maximum number of read steps, a CR LF pair being one
            correlation_id: Optional correlation ID for logging

        Returns:
            DetectionResult with the vote counts and the chosen separator

        Raises:
            TypeError: If the source is None
            ValueError: If the sample limit is not positive
            io.UnsupportedOperation: If the source does not support marking
            OSError: If the underlying stream fails
        """
        if source is None:
            raise TypeError("Invalid source (not None expected)")
        if sample_limit <= 0:
            raise ValueError(f"sample_limit must be > 0, got {sample_limit}")
        if not getattr(source, "mark_supported", False):
            raise io.UnsupportedOperation(
                "Invalid source (mark support expected for separator detection)"
            )

        # A step may consume two characters when a CR is followed by another one
        source.mark(2 * sample_limit)
        lf_count = crlf_count = cr_count = 0
        steps = 0
        while True:
            char = source.read()
            if char == END_OF_SOURCE:
                break
            if char == LF_CHAR:
                lf_count += 1
            elif char == CR_CHAR:
                following = source.read()
                if following == LF_CHAR:
                    crlf_count += 1
                else:
                    cr_count += 1
                    if following == CR_CHAR:
                        cr_count += 1
            steps += 1
            if steps >= sample_limit:
                break
        source.reset()

        result = DetectionResult(
            separator=_vote(lf_count, crlf_count, cr_count),
            lf_count=lf_count,
            crlf_count=crlf_count,
            cr_count=cr_count,
            characters_scanned=steps,
            sample_limit=sample_limit,
        )
        get_logger(__name__, correlation_id, "separator_detection").debug(
            "Detected line separator",
            extra={
                "separator": result.separator.name,
                "counts": result.counts,
                "characters_scanned": steps,
                "truncated": result.truncated,
            },
        )
        return result

    @classmethod
    def detect(
        cls,
        source: CharacterSource,
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
        correlation_id: Optional[str] = None,
    ) -> "LineSeparator":
        """Detect the separator of a mark-capable source.

        Returns DEFAULT when all three counts are equal, zero included.
        Otherwise the separator with the most occurrences wins, ties for the
        maximum being broken in the order LF, CR_LF, CR.
        """
        return cls.analyze(source, sample_limit, correlation_id).separator

    @classmethod
    def detect_path(
        cls,
        path: PathInput,
        encoding: Optional[str] = None,
        config: Optional[LineIOConfig] = None,
    ) -> "LineSeparator":
        """Detect the separator of a file, closing it afterwards.

        Args:
            path: File to analyze
            encoding: Explicit encoding; sniffed from the BOM when omitted
            config: Configuration providing the sample limit and file settings

        Returns:
            The detected separator
        """
        config = config or LineIOConfig()
        with open_source(path, encoding, config) as source:
            return cls.detect(source, config.detection.sample_limit)


_LITERALS: Dict[LineSeparator, str] = {
    LineSeparator.LF: "\n",
    LineSeparator.CR_LF: "\r\n",
    LineSeparator.CR: "\r",
    LineSeparator.DEFAULT: PLATFORM_LINE_SEPARATOR,
}


def _vote(lf_count: int, crlf_count: int, cr_count: int) -> LineSeparator:
    if lf_count == crlf_count == cr_count:
        return LineSeparator.DEFAULT
    maximum = max(lf_count, crlf_count, cr_count)
    if maximum == lf_count:
        return LineSeparator.LF
    if maximum == crlf_count:
        return LineSeparator.CR_LF
    return LineSeparator.CR


def _consume_until(source: CharacterSource, accumulator: List[str], terminator: str) -> str:
    while True:
        char = source.read()
        if char == END_OF_SOURCE or char == terminator:
            return char
        accumulator.append(char)


def _consume_crlf(source: CharacterSource, accumulator: List[str]) -> str:
    while True:
        char = source.read()
        if char == END_OF_SOURCE:
            return char
        if char == CR_CHAR and source.peek() == LF_CHAR:
            return source.read()
        # A lone CR is content; the character after it is scanned normally
        accumulator.append(char)


def _consume_any(source: CharacterSource, accumulator: List[str]) -> str:
    while True:
        char = source.read()
        if char == END_OF_SOURCE or char == LF_CHAR or char == CR_CHAR:
            return char
        accumulator.append(char)
