"""Login and password changes."""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login

from .exceptions import InactiveAccountError, InvalidCredentialsError, WrongPasswordError

User = get_user_model()

logger = logging.getLogger(__name__)


def authenticate_user(*, email: str, password: str) -> User:
    """
    Check an email/password pair and stamp ``last_login``.

    Email matching is case-insensitive (see ``UserManager.get_by_natural_key``).

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Correct credentials on a deactivated account
    """
    try:
        user = User.objects.get_by_natural_key(email)
    except User.DoesNotExist:
        # Hash anyway so unknown emails take as long as wrong passwords
        User().set_password(password)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.check_password(password):
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    update_last_login(None, user)
    return user


def change_password(*, user: User, current_password: str, new_password: str) -> User:
    """
    Raises:
        WrongPasswordError: If ``current_password`` does not match
    """
    if not user.check_password(current_password):
        raise WrongPasswordError("Current password is incorrect")

    user.set_password(new_password)
    user.save(update_fields=['password'])

    logger.info("Password changed for user %s", user.id)
    return user
