"""Comparison configuration dataclass with validation."""

from __future__ import annotations

__all__ = ["CompareConfig", "ConfigError"]

import json
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Union

from ..constants import CONTEXT_SIZE, DEFAULT_CBOR_PATTERN, DEFAULT_HASH_PATTERN, PREVIEW_LENGTH

PatternLike = Union[str, re.Pattern]


class ConfigError(Exception):
    """Raised when comparison configuration is invalid."""

    def __init__(self, errors: list[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Compare configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


@dataclass
class CompareConfig:
    """Masking and reporting options for one comparison run."""

    ignore_hash: bool = False
    ignore_cbor: bool = False
    hash_pattern: PatternLike = DEFAULT_HASH_PATTERN
    cbor_pattern: PatternLike = DEFAULT_CBOR_PATTERN
    context_size: int = CONTEXT_SIZE
    preview_length: int = PREVIEW_LENGTH

    def _validate_flags(self) -> list[str]:
        """Validate the masking switches are booleans."""
        errors: list[str] = []

        for name in ("ignore_hash", "ignore_cbor"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                errors.append(
                    f"compare.{name} must be a boolean "
                    f"(found: {type(value).__name__} = {value!r}, "
                    f"expected: true or false)"
                )

        return errors

    def _validate_patterns(self) -> list[str]:
        """Validate patterns are non-empty strings or compiled regexes."""
        errors: list[str] = []

        for name in ("hash_pattern", "cbor_pattern"):
            value = getattr(self, name)
            if isinstance(value, re.Pattern):
                continue
            if not isinstance(value, str) or not value:
                errors.append(
                    f"compare.{name} must be a non-empty string "
                    f"(found: {type(value).__name__} = {value!r}, "
                    f"expected: regular expression or compiled pattern)"
                )

        return errors

    def _validate_widths(self) -> list[str]:
        """Validate context and preview widths are non-negative integers."""
        errors: list[str] = []

        for name in ("context_size", "preview_length"):
            value = getattr(self, name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(
                    f"compare.{name} must be a non-negative integer "
                    f"(found: {type(value).__name__} = {value!r}, "
                    f"expected: integer >= 0)"
                )

        return errors

    def __post_init__(self):
        """Validate configuration after initialization.

        Collects all validation errors and raises a single ConfigError
        with all errors, so the user can see everything that needs fixing.
        """
        errors: list[str] = []
        errors.extend(self._validate_flags())
        errors.extend(self._validate_patterns())
        errors.extend(self._validate_widths())

        if errors:
            raise ConfigError(errors)

    @property
    def options_summary(self) -> str:
        """Human-readable list of enabled masks."""
        enabled = []
        if self.ignore_hash:
            enabled.append("Ignoring bytecode hash")
        if self.ignore_cbor:
            enabled.append("Ignoring CBOR metadata")
        return ", ".join(enabled)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-compatible values."""
        data: dict[str, Any] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            data[field.name] = value.pattern if isinstance(value, re.Pattern) else value
        return data

    @classmethod
    def from_config_dict(cls, config: dict) -> CompareConfig:
        """Load compare config from a config dict.

        Args:
            config: Full configuration dictionary; the ``compare`` section is optional

        Returns:
            CompareConfig instance

        Raises:
            ConfigError: If the section is malformed or field values are invalid
        """
        section = config.get("compare", {})
        if not isinstance(section, dict):
            raise ConfigError(
                [f"compare section must be a dict (found: {type(section).__name__}, expected: dict of options)"]
            )

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise ConfigError(
                [f"compare.{key} is not a recognized option (expected one of: {', '.join(sorted(known))})" for key in unknown]
            )

        return cls(**section)

    @classmethod
    def load(cls, path: Path) -> CompareConfig:
        """Load and validate config from a JSON file.

        Raises:
            ConfigError: If the file cannot be read, is not valid JSON, or fails validation
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except FileNotFoundError as e:
            raise ConfigError([f"Configuration file not found at {path}"]) from e
        except json.JSONDecodeError as e:
            raise ConfigError([f"Invalid JSON in config file {path}: {e}"]) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError([f"Cannot read config file {path}: {e}"]) from e

        if not isinstance(raw, dict):
            raise ConfigError([f"Config file {path} must contain a JSON object (found: {type(raw).__name__})"])

        return cls.from_config_dict(raw)
