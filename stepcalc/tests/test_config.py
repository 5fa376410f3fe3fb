"""Tests for Settings and environment loading."""

import pytest

from stepcalc.config import DEFAULT_PROMPT, Settings, load_settings


def test_defaults():
    s = load_settings({})
    assert s == Settings()
    assert s.precision == 2
    assert s.show_steps is True
    assert s.log_level == "WARNING"
    assert s.prompt == DEFAULT_PROMPT


def test_env_values():
    s = load_settings({
        "STEPCALC_PRECISION": "4",
        "STEPCALC_SHOW_STEPS": "off",
        "STEPCALC_LOG_LEVEL": "debug",
        "STEPCALC_PROMPT": "> ",
    })
    assert s.precision == 4
    assert s.show_steps is False
    assert s.log_level == "DEBUG"
    assert s.prompt == "> "


@pytest.mark.parametrize("raw, expected", [("1", True), ("Yes", True), ("false", False), ("0", False)])
def test_show_steps_parsing(raw, expected):
    assert load_settings({"STEPCALC_SHOW_STEPS": raw}).show_steps is expected


@pytest.mark.parametrize("env", [
    {"STEPCALC_PRECISION": "two"},
    {"STEPCALC_PRECISION": "-1"},
    {"STEPCALC_SHOW_STEPS": "maybe"},
    {"STEPCALC_LOG_LEVEL": "LOUD"},
])
def test_invalid_env(env):
    with pytest.raises(ValueError):
        load_settings(env)


def test_override_ignores_none():
    s = Settings(precision=3).override(precision=None, show_steps=False)
    assert s.precision == 3
    assert s.show_steps is False


def test_override_validates():
    with pytest.raises(ValueError):
        Settings().override(precision=-2)


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("STEPCALC_PRECISION", "5")
    assert load_settings().precision == 5
