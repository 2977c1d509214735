"""Domain base package - shared exceptions."""

from .exceptions import ConfigurationError, DomainException, ValidationError

__all__ = ["DomainException", "ValidationError", "ConfigurationError"]
