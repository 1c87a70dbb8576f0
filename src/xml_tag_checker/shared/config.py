"""Configuration for tag checking.

``CheckerConfig`` is an immutable dataclass that controls token skipping,
file decoding, logging and output. The default preset reproduces the
reference checking behaviour exactly.
"""

import codecs
import io
import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .logging import LOG_LEVELS

OUTPUT_FORMATS = ("text", "json")
DECODE_ERROR_MODES = ("strict", "replace", "ignore")


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
class CheckerConfig:
    """Configuration for checking one or more documents.

    Thread-safe due to frozen dataclass implementation.
    """

    # Token handling
    skip_declarations: bool = True
    skip_self_closing: bool = True

    # File reading
    encoding: str = "utf-8"
    decode_errors: str = "strict"

    # Logging and output
    logging_level: str = "WARNING"
    output_format: str = "text"
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate checker configuration."""
        for name in ("skip_declarations", "skip_self_closing"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigValidationError(
                    f"{name} must be a boolean",
                    field_name=name,
                    suggestions=["true", "false"],
                )
        for name in ("encoding", "decode_errors", "logging_level", "output_format"):
            if not isinstance(getattr(self, name), str):
                raise ConfigValidationError(f"{name} must be a string", field_name=name)
        if self.correlation_id is not None and not isinstance(self.correlation_id, str):
            raise ConfigValidationError(
                "correlation_id must be a string or null", field_name="correlation_id"
            )

        # TextIOWrapper rejects binary codecs such as "hex"
        try:
            codecs.lookup(self.encoding)
            io.TextIOWrapper(io.BytesIO(), encoding=self.encoding)
        except LookupError as e:
            raise ConfigValidationError(
                f"Unknown or non-text encoding: {self.encoding}",
                field_name="encoding",
                suggestions=["Use a codec name such as 'utf-8' or 'latin-1'"],
            ) from e

        if self.decode_errors not in DECODE_ERROR_MODES:
            raise ConfigValidationError(
                f"decode_errors must be one of {list(DECODE_ERROR_MODES)}",
                field_name="decode_errors",
                suggestions=list(DECODE_ERROR_MODES),
            )
        if self.logging_level not in LOG_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {list(LOG_LEVELS)}",
                field_name="logging_level",
                suggestions=list(LOG_LEVELS),
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigValidationError(
                f"output_format must be one of {list(OUTPUT_FORMATS)}",
                field_name="output_format",
                suggestions=list(OUTPUT_FORMATS),
            )

    def override(self, **kwargs: Any) -> "CheckerConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = CheckerConfig().override(encoding="latin-1")
            >>> config.encoding
            'latin-1'
        """
        unknown = set(kwargs) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                field_name=sorted(unknown)[0],
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CheckerConfig":
        """Create configuration from dictionary.

        Raises:
            ConfigValidationError: If ``data`` names unknown fields or holds
                invalid values
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration data must be a JSON object")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                field_name=sorted(unknown)[0],
                suggestions=sorted(known),
            )
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "CheckerConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CheckerConfig":
        """Load configuration from a JSON file.

        Raises:
            ConfigError: If the file cannot be read
            ConfigValidationError: If its contents are invalid
        """
        config_path = Path(path)
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e
        return cls.from_json(text)

    # Preset factory methods
    @classmethod
    def default(cls) -> "CheckerConfig":
        """Skip declaration lines and self-closing tags; strict decoding."""
        return cls()

    @classmethod
    def lenient(cls) -> "CheckerConfig":
        """Like the default, but undecodable bytes are replaced instead of failing."""
        return cls(decode_errors="replace")

    @classmethod
    def tokens_only(cls) -> "CheckerConfig":
        """Process every scanned token; self-closing tags count as opening tags."""
        return cls(skip_declarations=False, skip_self_closing=False)
