class DomainError(Exception):
    """Base exception for business rule violations.

    ``status_code`` is what the HTTP layer should answer with.
    """

    status_code = 500


class BadRequestError(DomainError):
    """Raised when input data is malformed (e.g. dispatcher without area)."""

    status_code = 400


class UnauthorizedError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class NotFoundError(DomainError):
    """Raised when a user, profile image or session does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when a username is already taken."""

    status_code = 409


class InternalServerError(DomainError):
    """Raised on invariant violations and storage/codec failures."""

    status_code = 500


class RepositoryError(Exception):
    """Raised by repository implementations when storage fails."""


class DuplicateRecordError(RepositoryError):
    """Raised by repository implementations on a unique constraint violation."""


class ImageProcessingError(Exception):
    """Raised when an image cannot be decoded, resized or encoded."""
