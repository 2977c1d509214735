"""Tests for configuration schemas."""
import pytest
from pydantic import ValidationError

from approval_chain.config import AppConfig, ChainConfig, HandlerConfig, LoggingConfig


class TestChainConfig:
    def test_default_chain(self):
        config = ChainConfig()

        assert [(h.name, h.threshold, h.terminal, h.level) for h in config.handlers] == [
            ("Manager", 1, False, "low"),
            ("Director", 3, False, "mid"),
            ("CEO", 7, True, "high"),
        ]

    def test_empty_chain_rejected(self):
        with pytest.raises(ValidationError, match="At least one handler"):
            ChainConfig(handlers=[])

    def test_missing_terminal_rejected(self):
        with pytest.raises(ValidationError, match="terminal"):
            ChainConfig(handlers=[HandlerConfig(name="A", threshold=1)])

    def test_terminal_not_last_rejected(self):
        with pytest.raises(ValidationError, match="terminal"):
            ChainConfig(
                handlers=[
                    HandlerConfig(name="A", threshold=1, terminal=True),
                    HandlerConfig(name="B", threshold=2, terminal=True),
                ]
            )

    def test_descending_thresholds_rejected(self):
        with pytest.raises(ValidationError, match="ascending"):
            ChainConfig(
                handlers=[
                    HandlerConfig(name="A", threshold=3),
                    HandlerConfig(name="B", threshold=1, terminal=True),
                ]
            )

    @pytest.mark.parametrize("threshold", ["nan", float("nan"), float("inf"), "-inf"])
    def test_non_finite_threshold_rejected(self, threshold):
        with pytest.raises(ValidationError):
            ChainConfig(
                handlers=[
                    HandlerConfig(name="A", threshold=1),
                    HandlerConfig(name="B", threshold=threshold, terminal=True),
                ]
            )

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            HandlerConfig(name="A", threshold=1, level="supreme")

    def test_unknown_handler_field_rejected(self):
        with pytest.raises(ValidationError):
            HandlerConfig(name="A", threshold=1, budget=100)


class TestLoggingConfig:
    def test_level_is_normalised(self):
        assert LoggingConfig(level="info").level == "INFO"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_invalid_destination(self):
        with pytest.raises(ValidationError):
            LoggingConfig(destination="syslog")

    def test_backup_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            LoggingConfig(backup_count=0)


def test_app_config_defaults():
    config = AppConfig()

    assert set(AppConfig.model_fields) == {"chain", "logging"}
    assert config.logging.destination == "console"
    assert len(config.chain.handlers) == 3


def test_app_config_rejects_unknown_sections():
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"server": {}})
