"""bytecmp - compare hex bytecode files while masking volatile metadata."""

from .compare import BytecodeComparison, CompareConfig, CompareController

__all__ = ["BytecodeComparison", "CompareConfig", "CompareController"]
