"""Error taxonomy shared by the API layer and the services it calls.

Each error carries the HTTP status it is rendered with; the message is what
the caller sees, so it must never contain internal detail.
"""


class DocsumError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(DocsumError):
    """No credential, or one that fails verification."""

    status_code = 401
    default_message = "Unauthorized"


class InvalidInput(DocsumError):
    """Malformed identifier or request parameter."""

    status_code = 400
    default_message = "Invalid input"


class Forbidden(DocsumError):
    """Authenticated caller does not own the resource."""

    status_code = 403
    default_message = "Forbidden"


class NotFound(DocsumError):
    status_code = 404
    default_message = "Not found"


class PayloadTooLarge(DocsumError):
    status_code = 413
    default_message = "Upload too large"


class InternalError(DocsumError):
    """Unhandled failure; details are logged, never returned."""
