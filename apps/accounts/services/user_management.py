"""User management service - listing, profile updates, removal."""

import logging
from typing import Any, Mapping, Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Q

from apps.albums.services.rating_aggregation import recompute_album_rating
from apps.core.pagination import ListSpec, PaginationRequest, PaginationResult, paginate_queryset
from apps.reviews.models import Review
from ..roles import Capability, Role, has_capability
from .exceptions import (
    DuplicateUserError,
    UnauthorizedUserActionError,
    UserNotFoundError,
)

User = get_user_model()

logger = logging.getLogger(__name__)

USER_LIST_SPEC = ListSpec(
    sort_fields={
        'created_at': 'created_at',
        'updated_at': 'updated_at',
        'username': 'username',
        'email': 'email',
        'first_name': 'first_name',
        'last_name': 'last_name',
    },
    exact_fields={'role': 'role'},
    boolean_fields={'is_verified': 'is_verified'},
    search_fields=('username', 'email', 'first_name', 'last_name'),
)

PROFILE_FIELDS = (
    'username',
    'email',
    'first_name',
    'last_name',
    'avatar',
    'bio',
    'social_links',
)


def list_users(
    *,
    filters: Mapping[str, Any],
    pagination: PaginationRequest
) -> PaginationResult:
    """
    Paginated user listing.

    Filters:
    - search: username, email, first/last name (case-insensitive)
    - role: exact role
    - is_verified: true/false
    """
    queryset = User.objects.filter(is_active=True)
    return paginate_queryset(
        queryset,
        spec=USER_LIST_SPEC,
        filters=filters,
        pagination=pagination,
    )


def get_user_by_id(*, user_id: UUID) -> User:
    """
    Raises:
        UserNotFoundError: If user doesn't exist or is inactive
    """
    try:
        return User.objects.get(id=user_id, is_active=True)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


@transaction.atomic
def update_user(
    *,
    user_id: UUID,
    actor: User,
    role: Optional[str] = None,
    is_verified: Optional[bool] = None,
    **profile: Any
) -> User:
    """
    Update a user's profile.

    Users may edit their own profile; user managers (admins) may edit anyone
    and are the only ones who may change ``role`` or ``is_verified``.

    Args:
        user_id: UUID of user to update
        actor: User performing the change
        role: New role (admin only)
        is_verified: New verification flag (admin only)
        **profile: Any of PROFILE_FIELDS

    Raises:
        UserNotFoundError: If user doesn't exist
        UnauthorizedUserActionError: If actor may not make this change
        DuplicateUserError: If the new username/email is taken
    """
    try:
        user = User.objects.select_for_update().get(id=user_id, is_active=True)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    is_manager = has_capability(actor, Capability.MANAGE_USERS)

    if user != actor and not is_manager:
        raise UnauthorizedUserActionError("You can only update your own profile")

    if (role is not None or is_verified is not None) and not is_manager:
        raise UnauthorizedUserActionError("Only admins can change roles or verification")

    username = profile.get('username')
    email = profile.get('email')
    clash = Q()
    if username and username != user.username:
        clash |= Q(username__iexact=username)
    if email and email != user.email:
        clash |= Q(email__iexact=email)
    if clash and User.objects.filter(clash).exclude(id=user.id).exists():
        raise DuplicateUserError("A user with this username or email already exists")

    for field_name in PROFILE_FIELDS:
        if profile.get(field_name) is not None:
            setattr(user, field_name, profile[field_name])

    if role is not None:
        user.role = Role(role)
    if is_verified is not None:
        user.is_verified = is_verified

    try:
        user.save()
    except IntegrityError:
        raise DuplicateUserError("A user with this username or email already exists")

    return user


@transaction.atomic
def delete_user(*, user_id: UUID, actor: User) -> None:
    """
    Permanently delete a user and their reviews.

    Every album the user's active reviews contributed to is re-aggregated
    after the delete.

    Raises:
        UnauthorizedUserActionError: If actor is not a user manager
        UserNotFoundError: If user doesn't exist
    """
    if not has_capability(actor, Capability.MANAGE_USERS):
        raise UnauthorizedUserActionError("Only admins can delete users")

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    album_ids = set(
        Review.objects
        .filter(author=user, is_active=True)
        .values_list('album_id', flat=True)
    )

    user.delete()
    logger.info("Deleted user %s (%d albums affected)", user_id, len(album_ids))

    for album_id in album_ids:
        recompute_album_rating(album_id=album_id)
