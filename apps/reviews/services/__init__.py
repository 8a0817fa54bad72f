"""Services for reviews business logic."""

from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    InvalidReactionError,
    UnauthorizedReviewActionError,
)
from .review_management import (
    REVIEW_LIST_SPEC,
    create_review,
    get_review_by_id,
    update_review,
    delete_review,
    list_reviews,
    get_user_reviews,
)
from .review_reactions import LIKE, DISLIKE, toggle_reaction
from .statistics import get_album_review_summary

__all__ = [
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'DuplicateReviewError',
    'InvalidRatingError',
    'InvalidReactionError',
    'UnauthorizedReviewActionError',
    # Review management
    'REVIEW_LIST_SPEC',
    'create_review',
    'get_review_by_id',
    'update_review',
    'delete_review',
    'list_reviews',
    'get_user_reviews',
    # Reactions
    'LIKE',
    'DISLIKE',
    'toggle_reaction',
    # Statistics
    'get_album_review_summary',
]
