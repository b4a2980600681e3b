import importlib

from share_recovery.config import DEFAULT_MAX_EXPONENT, RecoveryConfig, load_config

_VARIABLES = (
    "SHARE_RECOVERY_MAX_EXPONENT",
    "SHARE_RECOVERY_TIE_BREAK",
    "SHARE_RECOVERY_LOG_LEVEL",
)


def test_config_defaults(monkeypatch):
    for name in _VARIABLES:
        monkeypatch.delenv(name, raising=False)

    cfg = load_config()
    assert cfg == RecoveryConfig()
    assert cfg.max_exponent == DEFAULT_MAX_EXPONENT == 2**31 - 1
    assert cfg.tie_break == "smallest"
    assert cfg.log_level == "WARNING"


def test_config_env_overrides(monkeypatch):
    monkeypatch.setenv("SHARE_RECOVERY_MAX_EXPONENT", "512")
    monkeypatch.setenv("SHARE_RECOVERY_TIE_BREAK", "First")
    monkeypatch.setenv("SHARE_RECOVERY_LOG_LEVEL", "debug")

    cfg = load_config()
    assert cfg.max_exponent == 512
    assert cfg.tie_break == "first"
    assert cfg.log_level == "DEBUG"


def test_importing_does_not_read_environment(monkeypatch):
    monkeypatch.setenv("SHARE_RECOVERY_TIE_BREAK", "first")
    config_module = importlib.reload(importlib.import_module("share_recovery.config"))
    assert not hasattr(config_module, "config")
    assert config_module.RecoveryConfig().tie_break == "smallest"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("SHARE_RECOVERY_MAX_EXPONENT", "lots")
    monkeypatch.setenv("SHARE_RECOVERY_TIE_BREAK", "coin-flip")
    monkeypatch.setenv("SHARE_RECOVERY_LOG_LEVEL", "LOUD")

    cfg = load_config()
    assert cfg.max_exponent == 2**31 - 1
    assert cfg.tie_break == "smallest"
    assert cfg.log_level == "WARNING"

    monkeypatch.setenv("SHARE_RECOVERY_MAX_EXPONENT", "-3")
    assert load_config().max_exponent == 2**31 - 1
