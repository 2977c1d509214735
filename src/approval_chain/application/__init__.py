"""Application layer - use cases over the approval domain."""

from .service import ApprovalService, build_chain

__all__ = ["ApprovalService", "build_chain"]
