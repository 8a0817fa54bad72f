"""Email verification service."""

import logging
import secrets

from django.contrib.auth import get_user_model
from django.db import transaction

from .exceptions import InvalidTokenError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def verify_email(*, user: User, token: str) -> User:
    """
    Mark ``user`` verified if ``token`` matches the one issued at registration.

    The token is single-use; it is cleared on success.

    Raises:
        InvalidTokenError: If no token is pending or it does not match
    """
    user = User.objects.select_for_update().get(id=user.id)

    expected = (user.verification_token or '').encode()
    if not expected or not secrets.compare_digest(expected, (token or '').encode()):
        raise InvalidTokenError("Invalid verification token")

    user.is_verified = True
    user.verification_token = None
    user.save(update_fields=['is_verified', 'verification_token'])

    logger.info("Verified email for user %s", user.id)
    return user
