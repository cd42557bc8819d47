# helpdesk/core/exceptions.py

class AppError(Exception):
    retryable = False

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class ConflictError(AppError):
    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(message, status_code=409)


class EmailAlreadyExistsError(ConflictError):
    def __init__(self, message: str = "Email already exists.") -> None:
        super().__init__(message)


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status_code=401)


# "no such user" and "wrong password" share this message
class InvalidCredentialsError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__("Invalid credentials.")


# "unknown", "revoked" and "expired" share this message
class InvalidOrExpiredTokenError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__("Invalid or expired token.")


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, status_code=403)


class StoreUnavailableError(AppError):
    retryable = True

    def __init__(self, message: str = "Store temporarily unavailable.") -> None:
        super().__init__(message, status_code=503)
