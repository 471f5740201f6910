"""Compare module - masking and positional diff of hex bytecode."""

from .config import CompareConfig, ConfigError
from .controller import BytecodeComparison, BytecodeReadError, CompareController, MaskedFile
from .masking import MaskedRegion, MaskRule, RegionKind, build_mask_rules, mask_bytecode, normalize_bytecode
from .runs import ComparisonResult, DifferenceRun, compare_masked, context_window, find_difference_runs

__all__ = [
    "BytecodeComparison",
    "BytecodeReadError",
    "CompareConfig",
    "CompareController",
    "ComparisonResult",
    "ConfigError",
    "DifferenceRun",
    "MaskRule",
    "MaskedFile",
    "MaskedRegion",
    "RegionKind",
    "build_mask_rules",
    "compare_masked",
    "context_window",
    "find_difference_runs",
    "mask_bytecode",
    "normalize_bytecode",
]
