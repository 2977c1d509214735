"""Configuration management for the approval chain."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from approval_chain.config.schemas import AppConfig, ChainConfig, LoggingConfig
from approval_chain.domain.base.exceptions import ConfigurationError

CONFIG_ENV_VAR = "APPROVAL_CHAIN_CONFIG"
LOG_LEVEL_ENV_VAR = "APPROVAL_CHAIN_LOG_LEVEL"

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is read lazily on first access from, in order of
    precedence:
    - the file passed to the constructor
    - the file named by APPROVAL_CHAIN_CONFIG
    - built-in defaults
    APPROVAL_CHAIN_LOG_LEVEL then overrides the logging level.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_ENV_VAR)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_chain_config(self) -> ChainConfig:
        return self.app_config.chain

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        data: Dict[str, Any] = {}
        if self._config_file:
            data = self._read_file(Path(self._config_file))

        log_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if log_level:
            logging_section = data.get("logging", {})
            # A malformed section is left for schema validation to report
            if isinstance(logging_section, dict):
                data["logging"] = {**logging_section, "level": log_level}

        try:
            config = AppConfig.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Invalid configuration in {self._config_file or 'defaults'}: {e}")
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} error(s)",
                {"file": self._config_file, "errors": e.errors(include_url=False)},
            ) from e

        logger.debug(f"Configuration loaded from {self._config_file or 'defaults'}")
        return config

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        if not path.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {path}", {"file": str(path)}
            )

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error(f"Failed to parse configuration file {path}: {e}")
            raise ConfigurationError(
                f"Failed to parse configuration file {path}: {e}", {"file": str(path)}
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping", {"file": str(path)}
            )
        return data
