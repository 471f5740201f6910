"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

HASH_PREFIX = "a264697066735822"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests driving the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Bytecode Helpers
# =============================================================================


@pytest.fixture
def hash_section():
    """Build a hash prefix followed by 68 hex digits repeated from ``fill``."""

    def _section(fill: str = "11") -> str:
        return HASH_PREFIX + fill * (68 // len(fill))

    return _section


@pytest.fixture
def write_hex(tmp_path):
    """Write hex text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
