"""
Configuration handling for linesort
"""

import codecs
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

# Size of the fixed per-line buffer used by the legacy reader
LEGACY_LINE_BUFFER_SIZE = 128


@dataclass
class Config:
    """Settings for a single sort run"""

    # Text encoding for both input and output files
    encoding: str = "utf-8"

    # Maximum characters per read including the terminator; None reads lines of any length
    line_buffer_size: int | None = None

    # Reject input that has more data lines than the header declares
    strict: bool = False

    # Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str | None = None

    # Print the sorted record set to stdout after writing it
    show_records: bool = False

    def __post_init__(self):
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError) as e:
            raise ValueError(f"Unknown encoding {self.encoding!r}") from e
        if self.line_buffer_size is not None:
            self.line_buffer_size = int(self.line_buffer_size)
            if self.line_buffer_size < 2:
                raise ValueError(
                    f"line_buffer_size must be at least 2, got {self.line_buffer_size}"
                )
        if self.log_level is not None:
            self.log_level = str(self.log_level).upper()

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file"""
        with open(path) as f:
            config_dict = yaml.safe_load(f)
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ValueError(
                f"Configuration file {path} must contain a mapping, "
                f"got {type(config_dict).__name__}"
            )
        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary, ignoring unknown keys"""
        known = {k: v for k, v in config_dict.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file"""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file or use defaults"""
    if config_path and os.path.exists(config_path):
        return Config.from_yaml(config_path)

    # Use environment variables if available
    overrides: dict[str, Any] = {}

    encoding = os.environ.get("LINESORT_ENCODING")
    if encoding:
        overrides["encoding"] = encoding

    line_buffer = os.environ.get("LINESORT_LINE_BUFFER")
    if line_buffer:
        overrides["line_buffer_size"] = line_buffer

    log_level = os.environ.get("LINESORT_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level

    return Config(**overrides)
