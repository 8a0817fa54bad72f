"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DuplicateUserError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    UnauthorizedUserActionError,
    WrongPasswordError,
    InvalidTokenError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, change_password
from .email_verification import verify_email
from .password_reset import confirm_password_reset, request_password_reset
from .user_management import (
    USER_LIST_SPEC,
    list_users,
    get_user_by_id,
    update_user,
    delete_user,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DuplicateUserError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'UnauthorizedUserActionError',
    'WrongPasswordError',
    'InvalidTokenError',
    # Services
    'register_user',
    'authenticate_user',
    'change_password',
    'verify_email',
    'request_password_reset',
    'confirm_password_reset',
    'USER_LIST_SPEC',
    'list_users',
    'get_user_by_id',
    'update_user',
    'delete_user',
]
