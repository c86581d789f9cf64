"""
Application error types.

Raised deliberately by the data-access layer and auth dependencies; the
handlers registered in main.py translate them into HTTP responses. Anything
that is not an AppError is treated as an unexpected server error.
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": {"message": self.message, "status": self.status_code}}


class NotFoundError(AppError):
    """Target entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class BadRequestError(AppError):
    """Caller supplied invalid or empty input."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
