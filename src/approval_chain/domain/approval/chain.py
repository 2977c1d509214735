"""Approval chain assembly.

The chain owns its handlers in an ordered list and links each one to the
next. Validation happens once, at build time, so a built chain is always
fully linked and ends in a terminal handler.
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from approval_chain.infrastructure.logging.logger import get_logger

from .exceptions import ChainConfigurationError
from .handlers import (
    ApprovalHandler,
    ForwardingHandler,
    HighAuthorityHandler,
    LowAuthorityHandler,
    MidAuthorityHandler,
    RequestLike,
    TerminalHandler,
    TraceSink,
)
from .value_objects import ApprovalOutcome, AuthorityLevel

logger = get_logger(__name__)


@dataclass(frozen=True)
class HandlerSpec:
    """One entry of a chain definition."""

    name: str
    threshold: float
    terminal: bool = False
    level: Optional[AuthorityLevel] = None

    def create(self, sink: Optional[TraceSink] = None) -> ApprovalHandler:
        handler_cls = TerminalHandler if self.terminal else ForwardingHandler
        return handler_cls(self.name, self.threshold, self.level, sink)


def validate_handlers(handlers: Sequence[ApprovalHandler]) -> None:
    """Check that handlers form a usable chain, in order."""
    if not handlers:
        raise ChainConfigurationError("Approval chain needs at least one handler")

    if len({id(h) for h in handlers}) != len(handlers):
        raise ChainConfigurationError("A handler may appear only once in a chain")

    for handler in handlers:
        if not math.isfinite(handler.threshold):
            raise ChainConfigurationError(
                f"Handler '{handler.name}' needs a finite threshold, got {handler.threshold}",
                handler=handler.name,
                threshold=handler.threshold,
            )

    *body, last = handlers
    if not last.terminal:
        raise ChainConfigurationError(
            f"Last handler '{last.name}' must be terminal", handler=last.name
        )
    for handler in body:
        if handler.terminal:
            raise ChainConfigurationError(
                f"Terminal handler '{handler.name}' must be last in the chain",
                handler=handler.name,
            )

    for previous, current in zip(handlers, handlers[1:]):
        if current.threshold <= previous.threshold:
            raise ChainConfigurationError(
                f"Thresholds must be ascending: '{current.name}' ({current.threshold:g}) "
                f"follows '{previous.name}' ({previous.threshold:g})",
                handler=current.name,
                threshold=current.threshold,
                previous_threshold=previous.threshold,
            )

    # Relinking a handler owned by another chain would reroute that chain too
    for current, following in zip(handlers, handlers[1:]):
        if current.successor is not None and current.successor is not following:
            raise ChainConfigurationError(
                f"Handler '{current.name}' is already linked to '{current.successor.name}'",
                handler=current.name,
                successor=current.successor.name,
            )


class ApprovalChain:
    """An ordered, fully linked sequence of approval handlers."""

    def __init__(self, handlers: Sequence[ApprovalHandler]):
        handlers = list(handlers)
        validate_handlers(handlers)
        for current, following in zip(handlers, handlers[1:]):
            current.set_successor(following)
        self._handlers = handlers
        logger.debug(
            "Approval chain assembled",
            handlers=[h.name for h in handlers],
            thresholds=[h.threshold for h in handlers],
        )

    @property
    def head(self) -> ApprovalHandler:
        return self._handlers[0]

    @property
    def terminal(self) -> ApprovalHandler:
        return self._handlers[-1]

    @property
    def handlers(self) -> List[ApprovalHandler]:
        return list(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[ApprovalHandler]:
        return iter(self._handlers)

    def submit(self, request: RequestLike) -> ApprovalOutcome:
        """Run a request through the chain starting at the head."""
        return self.head.handle_request(request)

    def describe(self) -> List[Dict[str, Any]]:
        return [
            {
                "position": position,
                "name": handler.name,
                "level": handler.level.value if handler.level else None,
                "threshold": handler.threshold,
                "terminal": handler.terminal,
            }
            for position, handler in enumerate(self._handlers, start=1)
        ]


class ChainBuilder:
    """Collects handler specs in order and builds a validated chain.

    Example:
        chain = (
            ChainBuilder()
            .add("Manager", 1)
            .add("Director", 3)
            .add("CEO", 7, terminal=True)
            .build()
        )
    """

    def __init__(self, sink: Optional[TraceSink] = None):
        self._sink = sink
        self._specs: List[HandlerSpec] = []

    def add(
        self,
        name: str,
        threshold: float,
        terminal: bool = False,
        level: Optional[AuthorityLevel] = None,
    ) -> "ChainBuilder":
        return self.add_spec(HandlerSpec(name, threshold, terminal, level))

    def add_spec(self, spec: HandlerSpec) -> "ChainBuilder":
        self._specs.append(spec)
        return self

    @property
    def specs(self) -> List[HandlerSpec]:
        return list(self._specs)

    def build(self) -> ApprovalChain:
        return ApprovalChain([spec.create(self._sink) for spec in self._specs])


def default_chain(sink: Optional[TraceSink] = None) -> ApprovalChain:
    """Build the standard Manager (1) -> Director (3) -> CEO (7) chain."""
    return ApprovalChain(
        [
            LowAuthorityHandler(sink=sink),
            MidAuthorityHandler(sink=sink),
            HighAuthorityHandler(sink=sink),
        ]
    )
