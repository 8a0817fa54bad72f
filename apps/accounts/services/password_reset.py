"""Password reset service."""

import hashlib
import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from ..emails import send_password_reset_email
from .exceptions import InvalidTokenError, UserNotFoundError

User = get_user_model()

logger = logging.getLogger(__name__)


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


@transaction.atomic
def request_password_reset(*, email: str) -> str:
    """
    Issue a reset token for the active user with ``email``.

    Only the SHA-256 of the token is stored. The raw token is emailed once
    the transaction commits and is also returned to the caller.

    Raises:
        UserNotFoundError: If no active user has this email
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email__iexact=email, is_active=True)
        )
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    token = secrets.token_hex(20)
    user.password_reset_token = hash_reset_token(token)
    user.password_reset_expires = timezone.now() + timedelta(minutes=settings.PASSWORD_RESET_TIMEOUT_MINUTES)
    user.save(update_fields=['password_reset_token', 'password_reset_expires'])

    transaction.on_commit(lambda: send_password_reset_email(user, token))
    logger.info("Password reset requested for user %s", user.id)
    return token


@transaction.atomic
def confirm_password_reset(*, token: str, new_password: str) -> User:
    """
    Set a new password using an unexpired reset token.

    Raises:
        InvalidTokenError: If the token is unknown or expired
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(
                password_reset_token=hash_reset_token(token),
                password_reset_expires__gt=timezone.now(),
                is_active=True,
            )
        )
    except User.DoesNotExist:
        raise InvalidTokenError("Invalid or expired reset token")

    user.set_password(new_password)
    user.password_reset_token = None
    user.password_reset_expires = None
    user.save(update_fields=['password', 'password_reset_token', 'password_reset_expires'])

    logger.info("Password reset for user %s", user.id)
    return user
