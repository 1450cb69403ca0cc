"""Tests for centralized Config class."""
import importlib
import warnings

import pytest

from src.tagmarshal import config as config_module
from src.tagmarshal.config import Config

ENV_KEYS = (
    "TAGMARSHAL_TARGET_TAG",
    "TAGMARSHAL_IGNORE_VALUE",
    "TAGMARSHAL_PROFILES_PATH",
    "TAGMARSHAL_LOG_LEVEL",
)


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module under a patched environment, restoring it afterwards."""

    def _reload(**env):
        for key in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config_module).Config

    yield _reload

    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    importlib.reload(config_module)


def test_config_defaults(reload_config):
    """Verify default configuration values."""
    cfg = reload_config()

    assert cfg.TARGET_TAG == "json"
    assert cfg.IGNORE_VALUE == "-"
    assert cfg.PROFILES_PATH == "./config/profiles.yaml"
    assert cfg.LOG_LEVEL == "WARNING"


def test_config_env_overrides(reload_config):
    cfg = reload_config(
        TAGMARSHAL_TARGET_TAG="custom",
        TAGMARSHAL_IGNORE_VALUE="omit",
        TAGMARSHAL_PROFILES_PATH="/tmp/p.yaml",
        TAGMARSHAL_LOG_LEVEL="debug",
    )

    assert cfg.TARGET_TAG == "custom"
    assert cfg.IGNORE_VALUE == "omit"
    assert cfg.PROFILES_PATH == "/tmp/p.yaml"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_config_validation_passes_on_defaults(reload_config):
    cfg = reload_config()

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert cfg.validate() is True


def test_config_validation_fails_on_bad_log_level(monkeypatch):
    """Config.validate() should fail on a level loguru does not know."""
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="LOG_LEVEL must be one of"):
        Config.validate()


def test_config_warns_on_empty_target_tag(monkeypatch):
    monkeypatch.setattr(Config, "TARGET_TAG", "")

    with pytest.warns(UserWarning, match="TARGET_TAG is empty"):
        assert Config.validate() is True


def test_config_warns_on_empty_ignore_value(monkeypatch):
    monkeypatch.setattr(Config, "IGNORE_VALUE", "")

    with pytest.warns(UserWarning, match="IGNORE_VALUE is empty"):
        assert Config.validate() is True
