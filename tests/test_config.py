import pytest

from indent_stat.config import MAX_DEPTH_ENV, ConfigError, load_config


def test_default_depth(monkeypatch):
    monkeypatch.delenv(MAX_DEPTH_ENV, raising=False)
    config = load_config()
    assert config.max_depth == 24
    assert not config.inline
    assert not config.totals_only


def test_env_depth(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV, "16")
    assert load_config().max_depth == 16


def test_explicit_depth_wins_over_env(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV, "16")
    assert load_config(max_depth=8).max_depth == 8


def test_bad_env_depth(monkeypatch):
    monkeypatch.setenv(MAX_DEPTH_ENV, "deep")
    with pytest.raises(ConfigError):
        load_config()


def test_negative_depth_rejected():
    with pytest.raises(ConfigError):
        load_config(max_depth=-1)
