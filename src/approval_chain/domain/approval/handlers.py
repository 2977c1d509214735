"""Approval handlers.

Each handler holds an authority threshold and an optional link to the next
handler. A request within the threshold is approved on the spot; anything
larger is forwarded to the successor, or rejected outright by a terminal
handler.
"""
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Optional, Union

from approval_chain.infrastructure.logging.logger import get_logger

from .exceptions import ChainConfigurationError, MissingSuccessorError
from .value_objects import ApprovalOutcome, AuthorityLevel, Decision, DecisionStep, LeaveRequest

TraceSink = Callable[[str], None]
RequestLike = Union[LeaveRequest, float, int]

logger = get_logger(__name__)


def stdout_sink(line: str) -> None:
    """Write a trace line to standard output."""
    print(line)


class ApprovalHandler(ABC):
    """Base class for all handlers in an approval chain."""

    terminal: ClassVar[bool] = False

    def __init__(
        self,
        name: str,
        threshold: float,
        level: Optional[AuthorityLevel] = None,
        sink: Optional[TraceSink] = None,
    ):
        self.name = name
        self.threshold = float(threshold)
        self.level = level
        self.sink = sink or stdout_sink
        self._successor: Optional["ApprovalHandler"] = None

    @property
    def successor(self) -> Optional["ApprovalHandler"]:
        return self._successor

    def set_successor(self, successor: Optional["ApprovalHandler"]) -> Optional["ApprovalHandler"]:
        """Link the next handler and return it so links can be chained."""
        self._successor = successor
        return successor

    @property
    def label(self) -> str:
        if self.level is None:
            return self.name
        return f"{self.name} ({self.level.value} authority)"

    def can_approve(self, days: float) -> bool:
        return days <= self.threshold

    def handle_request(
        self, request: RequestLike, outcome: Optional[ApprovalOutcome] = None
    ) -> ApprovalOutcome:
        """Approve the request if within authority, otherwise pass it on.

        Args:
            request: A LeaveRequest or a raw number of days
            outcome: Steps recorded so far by earlier handlers

        Returns:
            The outcome holding every decision step of this traversal
        """
        leave = LeaveRequest.of(request)
        if outcome is None:
            outcome = ApprovalOutcome(request=leave)

        if self.can_approve(leave.days):
            self._decide(
                outcome,
                leave,
                Decision.APPROVED,
                f"{self.label} approved {leave} of leave.",
            )
            return outcome

        return self._handle_exceeded(leave, outcome)

    @abstractmethod
    def _handle_exceeded(self, leave: LeaveRequest, outcome: ApprovalOutcome) -> ApprovalOutcome:
        """Handle a request above this handler's threshold."""

    def _decide(
        self, outcome: ApprovalOutcome, leave: LeaveRequest, decision: Decision, message: str
    ) -> None:
        step = DecisionStep(
            handler=self.name,
            level=self.level,
            threshold=self.threshold,
            decision=decision,
            days=leave.days,
            message=message,
        )
        outcome.record(step)
        logger.debug(
            "Handler decision",
            handler=self.name,
            decision=decision.value,
            days=leave.days,
            threshold=self.threshold,
        )
        self.sink(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, threshold={self.threshold:g})"


class ForwardingHandler(ApprovalHandler):
    """Non-terminal handler: forwards requests it cannot approve."""

    def _handle_exceeded(self, leave: LeaveRequest, outcome: ApprovalOutcome) -> ApprovalOutcome:
        successor = self._successor
        if successor is None:
            logger.error("Forward with no successor", handler=self.name, days=leave.days)
            raise MissingSuccessorError(self.name, leave.days)

        self._decide(
            outcome,
            leave,
            Decision.FORWARDED,
            f"{self.label} cannot approve {leave}; forwarding to {successor.name}.",
        )
        return successor.handle_request(leave, outcome)


class TerminalHandler(ApprovalHandler):
    """Last handler in a chain: rejects what it cannot approve."""

    terminal = True

    def set_successor(self, successor: Optional[ApprovalHandler]) -> Optional[ApprovalHandler]:
        if successor is not None:
            raise ChainConfigurationError(
                f"Terminal handler '{self.name}' cannot have a successor",
                handler=self.name,
                successor=successor.name,
            )
        return super().set_successor(successor)

    def _handle_exceeded(self, leave: LeaveRequest, outcome: ApprovalOutcome) -> ApprovalOutcome:
        self._decide(
            outcome,
            leave,
            Decision.REJECTED,
            f"{self.label} rejected {leave} of leave: no one can approve that much. "
            f"Please resubmit later.",
        )
        return outcome


class LowAuthorityHandler(ForwardingHandler):
    """Approves up to 1 day."""

    def __init__(self, name: str = "Manager", threshold: float = 1, sink: Optional[TraceSink] = None):
        super().__init__(name, threshold, AuthorityLevel.LOW, sink)


class MidAuthorityHandler(ForwardingHandler):
    """Approves up to 3 days."""

    def __init__(self, name: str = "Director", threshold: float = 3, sink: Optional[TraceSink] = None):
        super().__init__(name, threshold, AuthorityLevel.MID, sink)


class HighAuthorityHandler(TerminalHandler):
    """Approves up to 7 days and rejects anything longer."""

    def __init__(self, name: str = "CEO", threshold: float = 7, sink: Optional[TraceSink] = None):
        super().__init__(name, threshold, AuthorityLevel.HIGH, sink)
