"""Tests for configuration loading."""

import logging
import tempfile
from pathlib import Path

import pytest
import yaml

from roster.config import DEFAULT_CAPACITY, ConfigError, RosterConfig, load_config


def _write_config(tmpdir: str, data) -> str:
    path = Path(tmpdir) / "roster.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return str(path)


def test_defaults_without_file_or_env():
    config = load_config(environ={})
    assert config == RosterConfig()
    assert config.capacity == DEFAULT_CAPACITY == 100
    assert config.pause is True
    assert config.log_level_number == logging.WARNING


def test_load_from_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"capacity": 5, "pause": False, "log_level": "debug"})
        config = load_config(path, environ={})
        assert config.capacity == 5
        assert config.pause is False
        assert config.log_level == "DEBUG"


def test_config_path_from_env():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"capacity": 12})
        config = load_config(environ={"ROSTER_CONFIG": path})
        assert config.capacity == 12


def test_env_capacity_overrides_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"capacity": 12})
        config = load_config(path, environ={"ROSTER_CAPACITY": "3"})
        assert config.capacity == 3


def test_empty_file_keeps_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "empty.yaml"
        path.write_text("")
        assert load_config(path, environ={}) == RosterConfig()


def test_missing_file():
    with pytest.raises(ConfigError, match="not found"):
        load_config("/nonexistent/roster.yaml", environ={})


def test_non_mapping_document():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, [1, 2, 3])
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path, environ={})


def test_unknown_keys():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"capacity": 3, "persist": True})
        with pytest.raises(ConfigError, match="persist"):
            load_config(path, environ={})


@pytest.mark.parametrize("capacity", [-1, "lots", 2.5, True])
def test_bad_capacity_in_file(capacity):
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"capacity": capacity})
        with pytest.raises(ConfigError):
            load_config(path, environ={})


def test_bad_capacity_in_env():
    with pytest.raises(ConfigError, match="ROSTER_CAPACITY"):
        load_config(environ={"ROSTER_CAPACITY": "many"})


def test_bad_pause_and_log_level():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"pause": "yes please"})
        with pytest.raises(ConfigError, match="pause"):
            load_config(path, environ={})

        path = _write_config(tmpdir, {"log_level": "loud"})
        with pytest.raises(ConfigError, match="log_level"):
            load_config(path, environ={})


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


@pytest.mark.parametrize("raw", ["1_000", "٣", "9" * 5000, " 4.0 "])
def test_env_capacity_uses_strict_integer_parsing(raw):
    with pytest.raises(ConfigError, match="ROSTER_CAPACITY"):
        load_config(environ={"ROSTER_CAPACITY": raw})


def test_quoted_capacity_in_file_uses_strict_integer_parsing():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write_config(tmpdir, {"capacity": "1_000"})
        with pytest.raises(ConfigError, match="capacity"):
            load_config(path, environ={})

        path = _write_config(tmpdir, {"capacity": " 7 "})
        assert load_config(path, environ={}).capacity == 7


def test_config_path_is_a_directory():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(environ={"ROSTER_CONFIG": tmpdir})


def test_config_file_not_utf8():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "roster.yaml"
        path.write_bytes(b"capacity: \xff\xfe\x00\x81\n")
        with pytest.raises(ConfigError):
            load_config(path, environ={})
