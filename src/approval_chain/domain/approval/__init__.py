"""Approval domain - handlers, chain assembly and value objects."""

from .chain import ApprovalChain, ChainBuilder, HandlerSpec, default_chain, validate_handlers
from .exceptions import ChainConfigurationError, InvalidLeaveRequestError, MissingSuccessorError
from .handlers import (
    ApprovalHandler,
    ForwardingHandler,
    HighAuthorityHandler,
    LowAuthorityHandler,
    MidAuthorityHandler,
    TerminalHandler,
    stdout_sink,
)
from .value_objects import ApprovalOutcome, AuthorityLevel, Decision, DecisionStep, LeaveRequest

__all__ = [
    # Chain
    "ApprovalChain",
    "ChainBuilder",
    "HandlerSpec",
    "default_chain",
    "validate_handlers",
    # Handlers
    "ApprovalHandler",
    "ForwardingHandler",
    "TerminalHandler",
    "LowAuthorityHandler",
    "MidAuthorityHandler",
    "HighAuthorityHandler",
    "stdout_sink",
    # Value objects
    "ApprovalOutcome",
    "AuthorityLevel",
    "Decision",
    "DecisionStep",
    "LeaveRequest",
    # Exceptions
    "ChainConfigurationError",
    "MissingSuccessorError",
    "InvalidLeaveRequestError",
]
