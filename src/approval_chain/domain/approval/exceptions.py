"""Approval chain domain exceptions."""

from approval_chain.domain.base.exceptions import DomainException, ValidationError


class ChainConfigurationError(DomainException):
    """Raised when a chain is assembled incorrectly."""

    def __init__(self, message: str, **details):
        super().__init__(message, "CHAIN_CONFIGURATION_ERROR", details)


class MissingSuccessorError(ChainConfigurationError):
    """Raised when a non-terminal handler has nowhere to forward a request."""

    def __init__(self, handler_name: str, days: float):
        super().__init__(
            f"Handler '{handler_name}' cannot forward {days:g} day(s): no successor configured",
            handler=handler_name,
            days=days,
        )


class InvalidLeaveRequestError(ValidationError):
    """Raised when a leave request magnitude is not a usable number."""

    def __init__(self, value):
        super().__init__(
            f"Invalid number of days requested: {value!r}",
            "INVALID_LEAVE_REQUEST",
            {"value": repr(value)},
        )
