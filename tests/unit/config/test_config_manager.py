"""Tests for configuration loading."""
import json
import os
from unittest.mock import patch

import pytest
import yaml

from approval_chain.config.manager import ConfigurationManager
from approval_chain.domain.base.exceptions import ConfigurationError


CUSTOM_CHAIN = {
    "chain": {
        "handlers": [
            {"name": "Lead", "threshold": 2, "level": "low"},
            {"name": "VP", "threshold": 10, "terminal": True, "level": "high"},
        ]
    },
    "logging": {"level": "debug", "destination": "none"},
}


class TestConfigurationManager:
    def test_defaults_without_file(self):
        manager = ConfigurationManager()

        config = manager.app_config

        assert [h.name for h in config.chain.handlers] == ["Manager", "Director", "CEO"]
        assert config.logging.level == "WARNING"

    def test_load_yaml(self, config_dir):
        path = config_dir / "chain.yml"
        path.write_text(yaml.safe_dump(CUSTOM_CHAIN))

        manager = ConfigurationManager(str(path))

        assert [h.name for h in manager.get_chain_config().handlers] == ["Lead", "VP"]
        assert manager.get_logging_config().level == "DEBUG"
        assert manager.get_logging_config().destination == "none"

    def test_load_json(self, config_dir):
        path = config_dir / "chain.json"
        path.write_text(json.dumps(CUSTOM_CHAIN))

        manager = ConfigurationManager(str(path))

        assert manager.get_chain_config().handlers[-1].terminal is True

    def test_empty_yaml_uses_defaults(self, config_dir):
        path = config_dir / "empty.yaml"
        path.write_text("")

        config = ConfigurationManager(str(path)).app_config

        assert len(config.chain.handlers) == 3

    def test_config_path_from_environment(self, config_dir):
        path = config_dir / "chain.json"
        path.write_text(json.dumps(CUSTOM_CHAIN))

        with patch.dict(os.environ, {"APPROVAL_CHAIN_CONFIG": str(path)}):
            manager = ConfigurationManager()

        assert manager.config_file == str(path)
        assert manager.get_chain_config().handlers[0].name == "Lead"

    def test_log_level_environment_override(self, config_dir):
        path = config_dir / "chain.json"
        path.write_text(json.dumps(CUSTOM_CHAIN))

        with patch.dict(os.environ, {"APPROVAL_CHAIN_LOG_LEVEL": "error"}):
            config = ConfigurationManager(str(path)).app_config

        assert config.logging.level == "ERROR"

    def test_log_level_override_without_logging_section(self, config_dir):
        path = config_dir / "chain.yml"
        path.write_text(yaml.safe_dump({"chain": CUSTOM_CHAIN["chain"]}))

        with patch.dict(os.environ, {"APPROVAL_CHAIN_LOG_LEVEL": "info"}):
            config = ConfigurationManager(str(path)).app_config

        assert config.logging.level == "INFO"
        assert config.logging.destination == "console"

    @pytest.mark.parametrize("section", ["logging:\n", "logging: loud\n", "logging: [1, 2]\n"])
    def test_log_level_override_with_malformed_logging_section(self, config_dir, section):
        path = config_dir / "chain.yml"
        path.write_text(section)

        with patch.dict(os.environ, {"APPROVAL_CHAIN_LOG_LEVEL": "DEBUG"}):
            manager = ConfigurationManager(str(path))
            with pytest.raises(ConfigurationError, match="Invalid configuration"):
                manager.app_config

    def test_missing_file(self, config_dir):
        manager = ConfigurationManager(str(config_dir / "missing.yml"))

        with pytest.raises(ConfigurationError, match="not found"):
            manager.app_config

    def test_unparseable_file(self, config_dir):
        path = config_dir / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigurationManager(str(path)).app_config

    def test_non_mapping_file(self, config_dir):
        path = config_dir / "list.yml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigurationManager(str(path)).app_config

    def test_invalid_chain(self, config_dir):
        path = config_dir / "bad.json"
        path.write_text(
            json.dumps(
                {
                    "chain": {
                        "handlers": [
                            {"name": "A", "threshold": 5},
                            {"name": "B", "threshold": 3, "terminal": True},
                        ]
                    }
                }
            )
        )

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(str(path)).app_config

        assert exc_info.value.error_code == "CONFIGURATION_ERROR"
        assert exc_info.value.details["file"] == str(path)

    def test_config_is_cached_until_reload(self, config_dir):
        path = config_dir / "chain.json"
        path.write_text(json.dumps(CUSTOM_CHAIN))
        manager = ConfigurationManager(str(path))

        first = manager.app_config
        assert manager.app_config is first

        path.write_text(json.dumps({"logging": {"level": "INFO"}}))
        reloaded = manager.reload()

        assert reloaded is not first
        assert reloaded.logging.level == "INFO"
