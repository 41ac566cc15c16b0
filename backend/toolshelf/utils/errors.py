"""Error taxonomy shared by every handler.

Each error carries the HTTP status it maps to and a client-facing message.
They are raised from handlers and dependencies and rendered into the error
envelope by the exception handler registered in ``toolshelf.main``.
"""
from typing import Optional


class ApiError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def __repr__(self):
        return f"{type(self).__name__}({self.status_code}, {self.message!r})"


#Missing or empty required fields
class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(ApiError):
    status_code = 401
    default_message = "Unauthorized"


#Caller is authenticated but lacks the privilege
class AuthzError(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


#Duplicate unique key (email)
class ConflictError(ApiError):
    status_code = 409
    default_message = "Conflict"


class InternalError(ApiError):
    status_code = 500
    default_message = "Internal server error"
