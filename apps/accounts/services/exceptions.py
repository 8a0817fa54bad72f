"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
    ValidationFailedError,
)


class AccountsServiceError(ServiceError):
    """Base exception for accounts services."""
    pass


class DuplicateUserError(ConflictError, AccountsServiceError):
    """Raised when username or email is already taken."""
    default_detail = 'User already exists.'
    default_code = 'user_already_exists'


class InvalidCredentialsError(UnauthorizedError, AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    default_detail = 'Invalid email or password.'
    default_code = 'invalid_credentials'


class InactiveAccountError(ForbiddenError, AccountsServiceError):
    """Raised when account is deactivated."""
    default_detail = 'Account is deactivated.'
    default_code = 'account_inactive'


class UserNotFoundError(NotFoundError, AccountsServiceError):
    """Raised when user does not exist."""
    default_detail = 'User not found.'
    default_code = 'user_not_found'


class UnauthorizedUserActionError(ForbiddenError, AccountsServiceError):
    """Raised when a user tries to change an account they do not manage."""
    default_detail = 'You cannot modify this account.'
    default_code = 'user_action_forbidden'


class WrongPasswordError(ValidationFailedError, AccountsServiceError):
    """Raised when the current password given for a change is wrong."""
    default_detail = 'Current password is incorrect.'
    default_code = 'wrong_password'


class InvalidTokenError(ValidationFailedError, AccountsServiceError):
    """Raised when a verification or reset token is invalid or expired."""
    default_detail = 'Invalid or expired token.'
    default_code = 'invalid_token'
