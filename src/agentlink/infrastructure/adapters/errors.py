"""Errors raised by the AgentLink API adapters."""

from dataclasses import dataclass


@dataclass
class AgentLinkApiError(Exception):
    """Unexpected response or transport failure talking to the AgentLink API.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (None for transport failures)
        response_body: Raw response body, kept for diagnostics
        trace_id: Value of the ``frontegg-trace-id`` response header, if any
        operation: Short description of the failed call (e.g. "create source")
    """

    message: str
    status_code: int | None = None
    response_body: str | None = None
    trace_id: str | None = None
    operation: str | None = None

    def __str__(self) -> str:
        if self.trace_id:
            return f"{self.message} (trace id: {self.trace_id})"
        return self.message

    @classmethod
    def unexpected_status(cls, operation: str, status_code: int, body: str, trace_id: str | None = None) -> "AgentLinkApiError":
        return cls(
            message=f"failed to {operation} with status {status_code}: {body}",
            status_code=status_code,
            response_body=body,
            trace_id=trace_id,
            operation=operation,
        )


@dataclass
class AgentLinkAuthenticationError(AgentLinkApiError):
    """Vendor authentication (``POST /auth/vendor``) failed."""
