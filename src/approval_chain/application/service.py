"""Approval application service - entry point for submitting leave requests."""
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional

from approval_chain.config.schemas import AppConfig, ChainConfig
from approval_chain.domain.approval import (
    ApprovalChain,
    ApprovalOutcome,
    AuthorityLevel,
    ChainBuilder,
    HandlerSpec,
    LeaveRequest,
)
from approval_chain.domain.approval.handlers import RequestLike, TraceSink
from approval_chain.infrastructure.logging.logger import get_logger


def build_chain(config: ChainConfig, sink: Optional[TraceSink] = None) -> ApprovalChain:
    """Build an approval chain from its configuration."""
    builder = ChainBuilder(sink=sink)
    for handler in config.handlers:
        builder.add_spec(
            HandlerSpec(
                name=handler.name,
                threshold=handler.threshold,
                terminal=handler.terminal,
                level=AuthorityLevel(handler.level) if handler.level else None,
            )
        )
    return builder.build()


class ApprovalService:
    """Runs leave requests through an approval chain."""

    def __init__(self, chain: ApprovalChain):
        self._chain = chain
        self._logger = get_logger(__name__)

    @classmethod
    def from_config(cls, config: AppConfig, sink: Optional[TraceSink] = None) -> "ApprovalService":
        return cls(build_chain(config.chain, sink))

    @property
    def chain(self) -> ApprovalChain:
        return self._chain

    def submit(self, days: RequestLike) -> ApprovalOutcome:
        """Submit one request and return every decision made on it."""
        request = LeaveRequest.of(days)
        outcome = self._chain.submit(request)
        self._logger.info(
            "Leave request decided",
            days=request.days,
            decision=outcome.final_decision.value,
            decided_by=outcome.decided_by,
            forward_count=outcome.forward_count,
        )
        return outcome

    def submit_many(
        self, requests: Iterable[RequestLike], max_workers: Optional[int] = None
    ) -> List[ApprovalOutcome]:
        """
        Submit independent requests concurrently.

        Handlers keep no per-request state, so traversals need no
        coordination. Outcomes are returned in input order; trace lines of
        different requests may interleave on the sink.
        """
        leave_requests = [LeaveRequest.of(r) for r in requests]
        if not leave_requests:
            return []

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.submit, leave_requests))

    def describe_chain(self) -> List[Dict[str, Any]]:
        return self._chain.describe()
