"""Domain errors for the wine write path.

These exceptions are independent of the HTTP layer. ``main.py`` maps them
to responses using ``status_code``.
"""

from typing import Optional


class CellarError(Exception):
    """Base exception for all cellar errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(CellarError):
    """Raised when a request is missing its payload or carries invalid data."""

    status_code = 400


class NotFoundError(CellarError):
    """Raised when a wine, producer or taxonomy identifier does not resolve."""

    status_code = 404

    def __init__(self, kind: str, identifier: int):
        super().__init__(
            message=f"{kind} with id {identifier} not found",
            details={"kind": kind, "id": identifier},
        )
