"""Encoding resolution for files opened as character streams.

An explicitly requested encoding always wins. Otherwise a byte order mark at
the start of the file selects the matching codec, and files without one are
decoded with the configured fallback encoding.
"""

import codecs
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar, Dict, List, Optional, Union

from ..shared.config import FileConfig

PathInput = Union[str, Path]

# Longest BOM pattern, UTF-32
BOM_SNIFF_SIZE = 4


class DetectionMethod(Enum):
    """How the encoding of a file was chosen."""
    EXPLICIT = "explicit"
    BOM = "bom"
    FALLBACK = "fallback"


@dataclass
class EncodingResult:
    """Resolved encoding of a file.

    Attributes:
        encoding: Codec name to pass to open(); BOM-aware codecs strip the mark
        method: How the encoding was chosen
        issues: Notes gathered while resolving
    """
    encoding: str
    method: DetectionMethod
    issues: List[str] = field(default_factory=list)


class BOMDetector:
    """Byte Order Mark (BOM) detection for UTF-8, UTF-16 and UTF-32."""

    # Codecs chosen so that decoding consumes the BOM itself
    BOM_PATTERNS: ClassVar[Dict[bytes, str]] = {
        codecs.BOM_UTF8: "utf-8-sig",
        codecs.BOM_UTF16_LE: "utf-16",
        codecs.BOM_UTF16_BE: "utf-16",
        codecs.BOM_UTF32_LE: "utf-32",
        codecs.BOM_UTF32_BE: "utf-32",
    }

    def detect(self, data: bytes) -> Optional[EncodingResult]:
        """Detect encoding based on BOM.

        Args:
            data: Leading bytes of the file

        Returns:
            EncodingResult if BOM detected, None otherwise
        """
        if not data:
            return None

        # UTF-32 LE starts with the UTF-16 LE mark, so try longer patterns first
        for bom_bytes, encoding in sorted(
            self.BOM_PATTERNS.items(), key=lambda x: len(x[0]), reverse=True
        ):
            if data.startswith(bom_bytes):
                return EncodingResult(encoding=encoding, method=DetectionMethod.BOM)

        return None


def validate_encoding(encoding: str) -> str:
    """Return the encoding unchanged, raising LookupError if Python lacks it."""
    codecs.lookup(encoding)
    return encoding


def resolve_encoding(
    path: PathInput,
    encoding: Optional[str] = None,
    config: Optional[FileConfig] = None,
) -> EncodingResult:
    """Choose the codec used to read a file.

    Args:
        path: File to read
        encoding: Explicit encoding, used as-is when given
        config: File configuration providing BOM sniffing and the fallback

    Returns:
        EncodingResult describing the chosen codec

    Raises:
        LookupError: If the explicit encoding is unknown
        OSError: If the file cannot be opened for sniffing
    """
    if encoding is not None:
        return EncodingResult(
            encoding=validate_encoding(encoding), method=DetectionMethod.EXPLICIT
        )

    config = config or FileConfig()
    if config.detect_bom:
        with Path(path).open("rb") as handle:
            head = handle.read(BOM_SNIFF_SIZE)
        result = BOMDetector().detect(head)
        if result is not None:
            return result

    return EncodingResult(
        encoding=config.fallback_encoding,
        method=DetectionMethod.FALLBACK,
        issues=["No byte order mark found, using fallback encoding"]
        if config.detect_bom else [],
    )
