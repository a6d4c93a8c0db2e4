"""Application errors surfaced to API clients.

Every error carries the HTTP status it is rendered with and a single
user-facing message. Handlers in ``colloq.api.app`` turn them into
``{"message": ...}`` responses.
"""


class ColloqError(Exception):
    """Base exception for user-facing errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ColloqError):
    """Raised when a submitted form breaks a business rule."""

    status_code = 400


class AuthError(ColloqError):
    """Raised when a request has no valid session or bad credentials."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(ColloqError):
    """Raised when a referenced record does not exist."""

    status_code = 404


class ConflictError(ColloqError):
    """Raised when a record already exists (duplicate user or registration)."""

    status_code = 409


class CollaboratorError(ColloqError):
    """Raised when the storage backend fails; carries the backend's message."""

    status_code = 500
