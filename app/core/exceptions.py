"""Custom exception classes for the application."""
from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception for the application."""

    status_code: int = 400

    def __init__(self, message: str, detail: Any = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class NotFoundError(AppException):
    """Resource not found."""
    status_code = 404


class DuplicateError(AppException):
    """Duplicate resource detected."""
    status_code = 409


class DuplicateEmailError(DuplicateError):
    """E-mail already registered to another account."""

    def __init__(self, email: str):
        super().__init__("Email já está em uso.", detail={"email": email})


class InvalidCredentialsError(AppException):
    """No account matches the given e-mail and password."""
    status_code = 401

    def __init__(self, message: str = "Email ou senha inválidos."):
        super().__init__(message)


class AuthenticationRequiredError(AppException):
    """Missing, expired or malformed session token."""
    status_code = 401


class AccountBlockedError(AppException):
    """Credentials are valid but the account was blocked by an admin."""
    status_code = 403

    def __init__(self, message: str = "Sua conta foi bloqueada."):
        super().__init__(message)


class PermissionDeniedError(AppException):
    """Authenticated user is not allowed to perform the action."""
    status_code = 403


class InvalidTransitionError(AppException):
    """Listing or validation status cannot move to the requested state."""
    status_code = 409


class ValidationError(AppException):
    """Data validation error.

    ``detail`` carries every problem found as a ``{field: message}`` map,
    so a form can show them all at once.
    """
    status_code = 422

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        super().__init__(message or "Dados inválidos.", detail=dict(errors))

    @property
    def errors(self) -> Dict[str, str]:
        return self.detail
