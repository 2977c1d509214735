"""Approval value objects.

This module holds the data that flows through an approval chain:
- LeaveRequest: the immutable magnitude being evaluated
- Decision / AuthorityLevel: closed enumerations of outcomes and handler ranks
- DecisionStep: one handler's action on a request
- ApprovalOutcome: the ordered steps of a single traversal
"""
import math
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import InvalidLeaveRequestError


class Decision(str, Enum):
    """What a handler did with a request."""

    APPROVED = "approved"
    FORWARDED = "forwarded"
    REJECTED = "rejected"


class AuthorityLevel(str, Enum):
    """Authority rank of a handler."""

    LOW = "low"
    MID = "mid"
    HIGH = "high"


class LeaveRequest(BaseModel):
    """A request for a number of days of leave."""

    model_config = ConfigDict(frozen=True)

    days: float = Field(..., description="Number of days requested")

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: float) -> float:
        """Reject NaN; zero and negative values pass through unchanged."""
        if math.isnan(v):
            raise ValueError("days must be a number")
        return v

    @classmethod
    def of(cls, value: Union["LeaveRequest", float, int, str]) -> "LeaveRequest":
        """Coerce a raw magnitude into a LeaveRequest."""
        if isinstance(value, LeaveRequest):
            return value
        try:
            return cls(days=value)
        except ValidationError as e:
            raise InvalidLeaveRequestError(value) from e

    def __str__(self) -> str:
        return f"{self.days:g} day(s)"


class DecisionStep(BaseModel):
    """One handler's decision on a request."""

    model_config = ConfigDict(frozen=True)

    handler: str
    level: Optional[AuthorityLevel] = None
    threshold: float
    decision: Decision
    days: float
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return self.model_dump(mode="json")


class ApprovalOutcome(BaseModel):
    """Ordered decision steps produced by one pass through a chain."""

    request: LeaveRequest
    steps: List[DecisionStep] = Field(default_factory=list)

    def record(self, step: DecisionStep) -> None:
        """Append a decision step."""
        self.steps.append(step)

    @property
    def final_step(self) -> Optional[DecisionStep]:
        return self.steps[-1] if self.steps else None

    @property
    def final_decision(self) -> Optional[Decision]:
        step = self.final_step
        return step.decision if step else None

    @property
    def decided_by(self) -> Optional[str]:
        step = self.final_step
        return step.handler if step else None

    @property
    def forward_count(self) -> int:
        return sum(1 for s in self.steps if s.decision == Decision.FORWARDED)

    @property
    def approved(self) -> bool:
        return self.final_decision == Decision.APPROVED

    def decisions(self) -> List[Decision]:
        """Decision sequence, head handler first."""
        return [s.decision for s in self.steps]

    def lines(self) -> List[str]:
        """Human-readable trace, one line per step."""
        return [s.message for s in self.steps]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for output formatting."""
        return {
            "days": self.request.days,
            "decision": self.final_decision.value if self.final_decision else None,
            "decided_by": self.decided_by,
            "forward_count": self.forward_count,
            "steps": [s.to_dict() for s in self.steps],
        }
