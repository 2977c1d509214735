"""Configuration package - schemas and loading."""

from .schemas import AppConfig, ChainConfig, HandlerConfig, LoggingConfig

__all__ = ["AppConfig", "ChainConfig", "HandlerConfig", "LoggingConfig"]
