"""Compare controller with business logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import CompareConfig
from .masking import MaskedRegion, MaskRule, build_mask_rules, mask_bytecode, normalize_bytecode
from .runs import ComparisonResult, compare_masked

logger = logging.getLogger(__name__)


class BytecodeReadError(Exception):
    """Raised when a bytecode file cannot be read."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read bytecode file {path}: {cause}")


@dataclass(frozen=True)
class MaskedFile:
    """One input after normalization and masking."""

    path: Path
    normalized_length: int
    masked_text: str
    regions: tuple[MaskedRegion, ...]

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "normalized_length": self.normalized_length,
            "masked_length": len(self.masked_text),
            "regions": [region.to_dict() for region in self.regions],
        }


@dataclass(frozen=True)
class BytecodeComparison:
    """Everything one invocation produces."""

    file1: MaskedFile
    file2: MaskedFile
    config: CompareConfig
    result: ComparisonResult

    @property
    def identical(self) -> bool:
        return self.result.identical

    def to_dict(self) -> dict:
        return {
            "options": self.config.to_dict(),
            "file1": self.file1.to_dict(),
            "file2": self.file2.to_dict(),
            "result": self.result.to_dict(),
        }


class CompareController:
    """Business logic for bytecode comparison."""

    def __init__(self, config: Optional[CompareConfig] = None):
        """Initialize compare controller.

        Args:
            config: Masking and reporting options; defaults mask nothing.

        Raises:
            re.error: If a configured pattern is not a valid regular expression
        """
        self.config = config or CompareConfig()
        self.rules: list[MaskRule] = build_mask_rules(self.config)

    def compare(self, path1: Path, path2: Path) -> BytecodeComparison:
        """Read, normalize, mask and diff two bytecode files.

        Args:
            path1: First bytecode file
            path2: Second bytecode file

        Returns:
            BytecodeComparison with per-file masking details and the diff result

        Raises:
            BytecodeReadError: If either file cannot be read
        """
        file1 = self.prepare(Path(path1))
        file2 = self.prepare(Path(path2))

        result = compare_masked(file1.masked_text, file2.masked_text)
        if result.identical:
            logger.info("Bytecodes identical after masking")
        else:
            logger.info(
                "Found %d difference run(s) covering %d chars", len(result.runs), result.total_different_chars
            )

        return BytecodeComparison(file1=file1, file2=file2, config=self.config, result=result)

    def prepare(self, path: Path) -> MaskedFile:
        """Read one file, strip whitespace and apply the masking rules."""
        normalized = normalize_bytecode(self._read(path))
        masked = mask_bytecode(normalized, self.rules)
        logger.debug(
            "%s: %d chars normalized, %d region(s) masked", path, len(normalized), len(masked.regions)
        )
        return MaskedFile(
            path=path,
            normalized_length=len(normalized),
            masked_text=masked.text,
            regions=masked.regions,
        )

    def _read(self, path: Path) -> str:
        try:
            with path.open("r", encoding="utf-8") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise BytecodeReadError(path, exc) from exc
