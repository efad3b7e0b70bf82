"""Configuration classes for strict line I/O.

This module provides configuration objects for separator detection, line
reading, line writing and file opening, together with an immutable aggregate
and presets for common platforms.
"""

import codecs
import json
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

# Native separator of the host, sourced once at import time
PLATFORM_LINE_SEPARATOR = os.linesep

VALID_LINE_SEPARATORS = ("\n", "\r\n", "\r")

# Number of read steps sampled while detecting the separator of a stream
DEFAULT_SAMPLE_LIMIT = 8000

DEFAULT_BUFFER_SIZE = 8192

DEFAULT_FALLBACK_ENCODING = "utf-8"

_COMPONENTS = ("detection", "reader", "writer", "files")


@dataclass
class DetectionConfig:
    """Configuration for line separator detection."""

    sample_limit: int = DEFAULT_SAMPLE_LIMIT

    def __post_init__(self) -> None:
        """Validate detection configuration."""
        if self.sample_limit <= 0:
            raise ValueError("sample_limit must be > 0")


@dataclass
class ReaderConfig:
    """Configuration for line reading."""

    ignore_trailing_empty_line: bool = True
    buffer_size: int = DEFAULT_BUFFER_SIZE

    def __post_init__(self) -> None:
        """Validate reader configuration."""
        if self.buffer_size <= 0:
            raise ValueError("buffer_size must be > 0")


@dataclass
class WriterConfig:
    """Configuration for line writing."""

    append_trailing_separator_on_close: bool = False
    platform_separator: str = PLATFORM_LINE_SEPARATOR

    def __post_init__(self) -> None:
        """Validate writer configuration."""
        if self.platform_separator not in VALID_LINE_SEPARATORS:
            raise ValueError(
                f"platform_separator must be one of {list(VALID_LINE_SEPARATORS)!r}"
            )


@dataclass
class FileConfig:
    """Configuration for opening files as character streams."""

    fallback_encoding: str = DEFAULT_FALLBACK_ENCODING
    detect_bom: bool = True

    def __post_init__(self) -> None:
        """Validate file configuration."""
        try:
            codecs.lookup(self.fallback_encoding)
        except LookupError as e:
            raise ValueError(
                f"fallback_encoding is not a known codec: {self.fallback_encoding}"
            ) from e


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class LineIOConfig:
    """Configuration for every strict line I/O component.

    Immutable, so a single instance can be shared by any number of readers
    and writers.
    """

    detection: DetectionConfig = field(default_factory=DetectionConfig)
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    writer: WriterConfig = field(default_factory=WriterConfig)
    files: FileConfig = field(default_factory=FileConfig)

    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Re-validate nested components, which stay mutable after creation."""
        try:
            for component in _COMPONENTS:
                getattr(self, component).__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def override(self, **kwargs: Any) -> "LineIOConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Fields to override, nested fields as ``component__field``

        Returns:
            New LineIOConfig instance with overrides applied

        Example:
            >>> config = LineIOConfig()
            >>> new_config = config.override(
            ...     reader__ignore_trailing_empty_line=False,
            ...     writer__platform_separator="\\r\\n",
            ... )
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=list(_COMPONENTS),
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        new_fields: Dict[str, Any] = {}
        try:
            for component in _COMPONENTS:
                current = getattr(self, component)
                if component in nested_overrides:
                    new_fields[component] = replace(
                        current, **nested_overrides[component]
                    )
                else:
                    new_fields[component] = current
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        new_fields.update(top_level)
        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {}
        for component in _COMPONENTS:
            value = getattr(self, component)
            result[component] = {
                name: getattr(value, name) for name in value.__dataclass_fields__
            }
        result["name"] = self.name
        result["description"] = self.description
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineIOConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary containing configuration data, missing keys keep
                their defaults

        Returns:
            LineIOConfig instance created from dictionary
        """
        component_types = {
            "detection": DetectionConfig,
            "reader": ReaderConfig,
            "writer": WriterConfig,
            "files": FileConfig,
        }
        field_values: Dict[str, Any] = {}
        try:
            for component, component_type in component_types.items():
                if component in data:
                    field_values[component] = component_type(**data[component])
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e), field_name=component) from e

        for key in ("name", "description"):
            if key in data:
                field_values[key] = data[key]

        return cls(**field_values)

    @classmethod
    def from_json(cls, json_str: str) -> "LineIOConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods
    @classmethod
    def posix(cls) -> "LineIOConfig":
        """Create preset for POSIX text files, which end with a newline."""
        return cls(
            writer=WriterConfig(
                append_trailing_separator_on_close=True,
                platform_separator="\n",
            ),
            name="posix",
            description="LF separated text files terminated by a final newline",
        )

    @classmethod
    def windows(cls) -> "LineIOConfig":
        """Create preset for Windows text files."""
        return cls(
            writer=WriterConfig(platform_separator="\r\n"),
            name="windows",
            description="CRLF separated text files without a final separator",
        )

    @classmethod
    def strict_terminators(cls) -> "LineIOConfig":
        """Create preset reporting one line per separator, plus the last one."""
        return cls(
            reader=ReaderConfig(ignore_trailing_empty_line=False),
            writer=WriterConfig(append_trailing_separator_on_close=True),
            name="strict_terminators",
            description=(
                "Every separator is significant on read and every file is "
                "terminated on write"
            ),
        )
