"""Account emails: verification and password reset."""

import logging

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


def send_verification_email(user) -> None:
    send_mail(
        subject='Verify your Beat Report account',
        message=(
            f"Hi {user.username},\n\n"
            f"Use this token to verify your email address:\n\n{user.verification_token}\n"
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[user.email],
    )
    logger.info("Sent verification email to user %s", user.id)


def send_password_reset_email(user, token: str) -> None:
    """``token`` is the raw token; only its hash is stored on the user."""
    send_mail(
        subject='Reset your Beat Report password',
        message=(
            f"Hi {user.username},\n\n"
            f"Use this token to reset your password. It expires in "
            f"{settings.PASSWORD_RESET_TIMEOUT_MINUTES} minutes:\n\n{token}\n"
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[user.email],
    )
    logger.info("Sent password reset email to user %s", user.id)
