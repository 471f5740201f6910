"""Whitespace normalization and masking of volatile bytecode regions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ..constants import BYTECODE_HASH_PLACEHOLDER, CBOR_METADATA_PLACEHOLDER
from .config import CompareConfig, PatternLike

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class RegionKind(str, Enum):
    """Kinds of volatile region that can be masked."""

    BYTECODE_HASH = "Bytecode Hash"
    CBOR_METADATA = "CBOR Metadata"


@dataclass(frozen=True)
class MaskedRegion:
    """A region replaced by a placeholder before comparison."""

    kind: RegionKind
    position: int
    length: int
    original_content: str

    @property
    def end(self) -> int:
        """Inclusive end offset."""
        return self.position + self.length - 1

    def preview(self, limit: int) -> str:
        """Return the original content truncated to ``limit`` characters."""
        if len(self.original_content) > limit:
            return self.original_content[:limit] + "..."
        return self.original_content

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "position": self.position,
            "length": self.length,
            "original_content": self.original_content,
        }


@dataclass(frozen=True)
class MaskRule:
    """One masking stage: regions matching ``pattern`` become ``placeholder``."""

    kind: RegionKind
    pattern: re.Pattern
    placeholder: str


@dataclass(frozen=True)
class MaskResult:
    """Masked text plus the regions that were replaced, in discovery order."""

    text: str
    regions: tuple[MaskedRegion, ...]


def normalize_bytecode(raw: str) -> str:
    """Delete every whitespace character so line wrapping cannot matter."""
    return _WHITESPACE.sub("", raw)


def compile_pattern(pattern: PatternLike) -> re.Pattern:
    """Compile a pattern string as written; compiled patterns pass through.

    Raises:
        re.error: If the pattern is not a valid regular expression
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def build_mask_rules(config: CompareConfig) -> list[MaskRule]:
    """Build the enabled masking stages, hash before CBOR metadata."""
    rules: list[MaskRule] = []
    if config.ignore_hash:
        rules.append(
            MaskRule(RegionKind.BYTECODE_HASH, compile_pattern(config.hash_pattern), BYTECODE_HASH_PLACEHOLDER)
        )
    if config.ignore_cbor:
        rules.append(
            MaskRule(RegionKind.CBOR_METADATA, compile_pattern(config.cbor_pattern), CBOR_METADATA_PLACEHOLDER)
        )
    return rules


def apply_mask_rule(text: str, rule: MaskRule) -> MaskResult:
    """Record every match of ``rule`` in ``text`` and replace it with the placeholder.

    Offsets refer to ``text`` as passed in, before any replacement by this rule.
    Each call scans with a fresh ``finditer`` so nothing carries over between inputs.
    """
    regions = tuple(
        MaskedRegion(
            kind=rule.kind,
            position=match.start(),
            length=match.end() - match.start(),
            original_content=match.group(0),
        )
        for match in rule.pattern.finditer(text)
    )
    if not regions:
        return MaskResult(text=text, regions=())

    masked = rule.pattern.sub(lambda _match: rule.placeholder, text)
    logger.debug("Masked %d %s region(s)", len(regions), rule.kind.value)
    return MaskResult(text=masked, regions=regions)


def mask_bytecode(text: str, rules: list[MaskRule]) -> MaskResult:
    """Apply masking stages in order, each on the previous stage's output."""
    regions: list[MaskedRegion] = []
    for rule in rules:
        stage = apply_mask_rule(text, rule)
        text = stage.text
        regions.extend(stage.regions)
    return MaskResult(text=text, regions=tuple(regions))
