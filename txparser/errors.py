"""Error categories that decide how a failure is reported to HTTP clients."""


class ServiceError(Exception):
    """Base class for failures that map onto a client-facing category."""

    prefix = "error service"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = f"{self.prefix}: {detail}" if detail else self.prefix
        super().__init__(message)


class ConflictError(ServiceError):
    """The requested change clashes with existing state."""

    prefix = "error conflict"


class NotFoundError(ServiceError):
    """The requested resource does not exist."""

    prefix = "error not found"


class BadRequestError(ServiceError):
    """The request itself is malformed."""

    prefix = "error bad request"