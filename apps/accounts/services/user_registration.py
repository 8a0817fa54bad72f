"""User registration service."""

import logging
import secrets

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Q

from ..emails import send_verification_email
from .exceptions import DuplicateUserError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    username: str,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = ""
) -> User:
    """
    Register a new user and email them a verification token.

    New accounts always get the ordinary ``user`` role.

    Args:
        username: Unique public handle
        email: User's email address (login)
        password: User's password (will be hashed)
        first_name: Optional first name
        last_name: Optional last name

    Returns:
        Created User instance

    Raises:
        DuplicateUserError: If username or email is taken
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(Q(email__iexact=email) | Q(username__iexact=username)).exists():
        raise DuplicateUserError("A user with this username or email already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            username=username,
            first_name=first_name,
            last_name=last_name,
        )
    except IntegrityError:
        raise DuplicateUserError("A user with this username or email already exists")

    user.verification_token = secrets.token_urlsafe(32)
    user.save(update_fields=['verification_token'])
    transaction.on_commit(lambda: send_verification_email(user))

    logger.info("Registered user %s", user.id)
    return user
