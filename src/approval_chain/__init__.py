"""Approval Chain - Root Package.

A leave-approval chain built on the Chain of Responsibility pattern. A
request for some number of days starts at the head handler; each handler
approves it if the request is within its authority or forwards it to the
next one. The terminal handler rejects whatever it cannot approve.

Key Components:
    - domain: handlers, chain assembly and value objects
    - application: the approval service used by callers
    - config: pydantic configuration schemas and loading
    - infrastructure: structured logging
    - cli: the approval-chain command line interface

Usage:
    >>> from approval_chain import default_chain
    >>> outcome = default_chain().submit(2)
    Manager (low authority) cannot approve 2 day(s); forwarding to Director.
    Director (mid authority) approved 2 day(s) of leave.
"""

from ._version import __version__
from .application import ApprovalService
from .domain.approval import (
    ApprovalChain,
    ApprovalOutcome,
    ChainBuilder,
    Decision,
    LeaveRequest,
    default_chain,
)

__all__ = [
    "__version__",
    "ApprovalService",
    "ApprovalChain",
    "ApprovalOutcome",
    "ChainBuilder",
    "Decision",
    "LeaveRequest",
    "default_chain",
]
