"""Tests for run configuration loading."""

import logging

import pytest

from suite_runtime import ConfigError, RunConfig, configure_logging, load_config


def test_defaults():
    config = RunConfig()

    assert config.suites == []
    assert config.exclude == []
    assert config.fail_fast is False
    assert config.log_level == "INFO"


def test_load_full_config(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text(
        "suites:\n"
        "  - Math\n"
        "  - Strings\n"
        "exclude: [Slow]\n"
        "fail_fast: true\n"
        "log_level: debug\n"
    )

    config = load_config(path)

    assert config == RunConfig(
        suites=["Math", "Strings"],
        exclude=["Slow"],
        fail_fast=True,
        log_level="DEBUG",
    )


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("")

    assert load_config(path) == RunConfig()


def test_include_is_relative_to_including_file(tmp_path):
    nested = tmp_path / "conf"
    nested.mkdir()
    (nested / "suites.yaml").write_text("- Math\n- Strings\n")
    path = nested / "run.yaml"
    path.write_text("suites: !include suites.yaml\n")

    config = load_config(str(path))

    assert config.suites == ["Math", "Strings"]


def test_missing_include(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("suites: !include nope.yaml\n")

    with pytest.raises(ConfigError, match="nope.yaml"):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read config"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("suites: [Math\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(path)


@pytest.mark.parametrize(
    "data, message",
    [
        (["Math"], "must be a mapping"),
        ({"suite": ["Math"]}, "Unknown config key"),
        ({"suites": "Math"}, "list of suite names"),
        ({"exclude": [1, 2]}, "list of suite names"),
        ({"fail_fast": "yes"}, "boolean"),
        ({"log_level": "LOUD"}, "Invalid log level"),
    ],
)
def test_from_dict_rejects_bad_values(data, message):
    with pytest.raises(ConfigError, match=message):
        RunConfig.from_dict(data)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        RunConfig.from_dict({"fail_fast": 1})


def test_configure_logging_sets_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("debug")

    assert calls[0]["level"] == "DEBUG"
