"""Approval chain configuration schema."""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HandlerConfig(BaseModel):
    """A single handler in the chain."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Handler display name")
    threshold: float = Field(
        ..., allow_inf_nan=False, description="Maximum number of days this handler may approve"
    )
    terminal: bool = Field(False, description="Rejects instead of forwarding when exceeded")
    level: Optional[Literal["low", "mid", "high"]] = Field(None, description="Authority level")


def _default_handlers() -> List[HandlerConfig]:
    return [
        HandlerConfig(name="Manager", threshold=1, level="low"),
        HandlerConfig(name="Director", threshold=3, level="mid"),
        HandlerConfig(name="CEO", threshold=7, terminal=True, level="high"),
    ]


class ChainConfig(BaseModel):
    """Ordered handler definitions, head first."""

    model_config = ConfigDict(extra="forbid")

    handlers: List[HandlerConfig] = Field(default_factory=_default_handlers)

    @model_validator(mode="after")
    def validate_chain_shape(self) -> "ChainConfig":
        """Same rules the chain builder enforces, reported at load time."""
        if not self.handlers:
            raise ValueError("At least one handler is required")

        terminals = [i for i, h in enumerate(self.handlers) if h.terminal]
        if terminals != [len(self.handlers) - 1]:
            raise ValueError("Exactly one terminal handler is required and it must be last")

        thresholds = [h.threshold for h in self.handlers]
        if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError(f"Handler thresholds must be ascending, got {thresholds}")
        return self
