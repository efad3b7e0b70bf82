"""Result objects for line separator detection.

This module defines the detailed outcome of a separator detection pass: the
winning separator together with the vote counts it was chosen from.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from ..lines.separator import LineSeparator


@dataclass
class DetectionResult:
    """Outcome of a separator detection pass over a character sample.

    Attributes:
        separator: Separator chosen by the majority vote
        lf_count: Number of lone LF terminators seen
        crlf_count: Number of CR LF pairs seen
        cr_count: Number of lone CR terminators seen
        characters_scanned: Number of read steps taken over the sample
        sample_limit: Maximum number of read steps allowed
    """
    separator: "LineSeparator"
    lf_count: int = 0
    crlf_count: int = 0
    cr_count: int = 0
    characters_scanned: int = 0
    sample_limit: int = 0

    def __post_init__(self) -> None:
        """Validate counters."""
        for name in ("lf_count", "crlf_count", "cr_count", "characters_scanned"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

    @property
    def counts(self) -> Dict[str, int]:
        """Vote counts keyed by separator name, in tie-break priority order."""
        return {
            "LF": self.lf_count,
            "CR_LF": self.crlf_count,
            "CR": self.cr_count,
        }

    @property
    def total_separators(self) -> int:
        """Total number of terminators seen in the sample."""
        return self.lf_count + self.crlf_count + self.cr_count

    @property
    def is_tie(self) -> bool:
        """Whether all three counts are equal, zero included."""
        return self.lf_count == self.crlf_count == self.cr_count

    @property
    def truncated(self) -> bool:
        """Whether scanning stopped on the sample limit rather than end of stream."""
        return 0 < self.sample_limit <= self.characters_scanned
