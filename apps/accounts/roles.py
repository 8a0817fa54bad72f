"""
Roles and the capabilities they grant.

Authorization checks go through ``has_capability`` only; views and services
never compare role strings directly.
"""

from enum import Enum

from django.db import models


class Role(models.TextChoices):
    USER = 'user', 'User'
    REVIEWER = 'reviewer', 'Reviewer'
    ADMIN = 'admin', 'Admin'


class Capability(Enum):
    MODERATE_REVIEWS = 'moderate_reviews'
    MANAGE_CATALOG = 'manage_catalog'
    DELETE_CATALOG = 'delete_catalog'
    PUBLISH_NEWS = 'publish_news'
    MANAGE_USERS = 'manage_users'
    HARD_DELETE_REVIEWS = 'hard_delete_reviews'
    EDIT_ANY_NEWS = 'edit_any_news'


ROLE_CAPABILITIES = {
    Role.USER: frozenset(),
    Role.REVIEWER: frozenset({
        Capability.MODERATE_REVIEWS,
        Capability.MANAGE_CATALOG,
        Capability.PUBLISH_NEWS,
    }),
    Role.ADMIN: frozenset(Capability),
}


def capabilities_for(role) -> frozenset:
    """Capabilities granted to ``role`` (unknown roles get none)."""
    try:
        return ROLE_CAPABILITIES[Role(role)]
    except ValueError:
        return frozenset()


def has_capability(user, capability: Capability) -> bool:
    """
    Check whether ``user`` may exercise ``capability``.

    Anonymous and inactive users have no capabilities.
    """
    if user is None or not getattr(user, 'is_authenticated', False):
        return False
    if not user.is_active:
        return False
    return capability in capabilities_for(user.role)
