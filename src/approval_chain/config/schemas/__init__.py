"""Configuration schemas."""

from .app_schema import AppConfig
from .chain_schema import ChainConfig, HandlerConfig
from .logging_schema import LoggingConfig

__all__ = ["AppConfig", "ChainConfig", "HandlerConfig", "LoggingConfig"]
