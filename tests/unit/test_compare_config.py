"""Tests for CompareConfig validation and loading."""

import dataclasses
import json
import re

import pytest

from bytecmp.compare.config import CompareConfig, ConfigError
from bytecmp.constants import DEFAULT_CBOR_PATTERN, DEFAULT_HASH_PATTERN


class TestCompareConfig:
    """Test construction and validation."""

    def test_defaults(self):
        """Nothing is masked and default patterns are used."""
        config = CompareConfig()

        assert config.ignore_hash is False
        assert config.ignore_cbor is False
        assert config.hash_pattern == DEFAULT_HASH_PATTERN
        assert config.cbor_pattern == DEFAULT_CBOR_PATTERN
        assert config.context_size == 16
        assert config.preview_length == 30

    def test_collects_all_errors(self):
        """Every invalid field is reported in one exception."""
        with pytest.raises(ConfigError) as exc_info:
            CompareConfig(ignore_hash="yes", context_size=-1, cbor_pattern="")

        errors = exc_info.value.errors
        assert len(errors) == 3
        assert any("ignore_hash must be a boolean" in e for e in errors)
        assert any("context_size must be a non-negative integer" in e for e in errors)
        assert any("cbor_pattern must be a non-empty string" in e for e in errors)

    def test_bool_width_rejected(self):
        """True is not accepted as a width."""
        with pytest.raises(ConfigError, match="preview_length"):
            CompareConfig(preview_length=True)

    def test_compiled_pattern_accepted(self):
        """Precompiled patterns are valid."""
        config = CompareConfig(hash_pattern=re.compile("dead"))

        assert config.to_dict()["hash_pattern"] == "dead"

    def test_replace_revalidates(self):
        """dataclasses.replace runs validation again."""
        with pytest.raises(ConfigError):
            dataclasses.replace(CompareConfig(), context_size="wide")

    def test_error_message_lists_errors(self):
        """The exception message includes each problem."""
        error = ConfigError("single problem")

        assert error.errors == ["single problem"]
        assert "  - single problem" in str(error)

    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({}, ""),
            ({"ignore_hash": True}, "Ignoring bytecode hash"),
            ({"ignore_cbor": True}, "Ignoring CBOR metadata"),
            ({"ignore_hash": True, "ignore_cbor": True}, "Ignoring bytecode hash, Ignoring CBOR metadata"),
        ],
    )
    def test_options_summary(self, kwargs, expected):
        """Enabled masks are listed in order."""
        assert CompareConfig(**kwargs).options_summary == expected


class TestFromConfigDict:
    """Test dict loading."""

    def test_missing_section_uses_defaults(self):
        """A dict without a compare section gives defaults."""
        assert CompareConfig.from_config_dict({}) == CompareConfig()

    def test_reads_section(self):
        """Known keys populate the config."""
        config = CompareConfig.from_config_dict({"compare": {"ignore_cbor": True, "context_size": 8}})

        assert config.ignore_cbor is True
        assert config.context_size == 8

    def test_unknown_key(self):
        """Unrecognized options are errors."""
        with pytest.raises(ConfigError, match="compare.ignore_everything is not a recognized option"):
            CompareConfig.from_config_dict({"compare": {"ignore_everything": True}})

    def test_section_not_dict(self):
        """The compare section must be an object."""
        with pytest.raises(ConfigError, match="compare section must be a dict"):
            CompareConfig.from_config_dict({"compare": ["ignore_hash"]})


class TestLoad:
    """Test JSON file loading."""

    def test_load_file(self, tmp_path):
        """A valid file is loaded and validated."""
        path = tmp_path / "bytecmp.json"
        path.write_text(json.dumps({"compare": {"ignore_hash": True}}))

        config = CompareConfig.load(path)

        assert config.ignore_hash is True

    def test_missing_file(self, tmp_path):
        """A missing file is a ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            CompareConfig.load(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Malformed JSON is a ConfigError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            CompareConfig.load(path)

    def test_non_object(self, tmp_path):
        """The top level must be a JSON object."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigError, match="must contain a JSON object"):
            CompareConfig.load(path)

    def test_directory(self, tmp_path):
        """A directory path is a ConfigError, not an OSError."""
        with pytest.raises(ConfigError, match="Cannot read config file"):
            CompareConfig.load(tmp_path)

    def test_not_utf8(self, tmp_path):
        """Undecodable bytes are a ConfigError."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(ConfigError, match="Cannot read config file"):
            CompareConfig.load(path)
