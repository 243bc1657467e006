"""Application error types mapped to HTTP statuses by the API layer."""

from collections.abc import Mapping


class HostelMenuError(Exception):
    """Base error for failures reported back to the caller.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        http_status: status code the API layer responds with
    """

    http_status = 500

    def __init__(
        self, message: str, details: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, object]:
        """Return the JSON body for an error response."""
        payload: dict[str, object] = {"error": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class InvalidInputError(HostelMenuError):
    """Raised when a request is rejected before touching the store."""

    http_status = 400


class NotFoundError(HostelMenuError):
    """Raised when a referenced row does not exist."""

    http_status = 404


class InvalidTransitionError(HostelMenuError):
    """Raised when a session status change is not a single forward step."""

    http_status = 409


class StoreError(HostelMenuError):
    """Raised when a read or write against the backing store fails."""

    http_status = 502
