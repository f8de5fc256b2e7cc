"""Tests for environment-driven settings."""

import pytest

from lshw_parser import ConfigError, ParserSettings
from lshw_parser.config import DEFAULT_LSHW_BIN, DEFAULT_TIMEOUT


def test_defaults_without_environment():
    settings = ParserSettings.from_env({})

    assert settings.skip_hubs is False
    assert settings.lshw_bin == DEFAULT_LSHW_BIN
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.sanitize is False


def test_values_from_environment():
    settings = ParserSettings.from_env(
        {
            "LSHW_PARSER_SKIP_HUBS": "Yes",
            "LSHW_PARSER_LSHW_BIN": "/usr/sbin/lshw",
            "LSHW_PARSER_TIMEOUT": "5",
            "LSHW_PARSER_SANITIZE": "on",
        }
    )

    assert settings.skip_hubs is True
    assert settings.lshw_bin == "/usr/sbin/lshw"
    assert settings.timeout == 5.0
    assert settings.sanitize is True


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("LSHW_PARSER_SKIP_HUBS", "1")

    assert ParserSettings.from_env().skip_hubs is True


@pytest.mark.parametrize(
    "env",
    [
        {"LSHW_PARSER_SKIP_HUBS": "maybe"},
        {"LSHW_PARSER_TIMEOUT": "soon"},
        {"LSHW_PARSER_TIMEOUT": "-1"},
        {"LSHW_PARSER_SANITIZE": "sometimes"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ConfigError):
        ParserSettings.from_env(env)


def test_invalid_timeout_chains_value_error():
    with pytest.raises(ConfigError) as excinfo:
        ParserSettings.from_env({"LSHW_PARSER_TIMEOUT": "soon"})

    assert isinstance(excinfo.value.__cause__, ValueError)
