from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

import pytest
from apps.albums.services import AlbumNotFoundError
from apps.reviews.models import Review
from apps.reviews.services import (
    DISLIKE,
    LIKE,
    DuplicateReviewError,
    InvalidRatingError,
    InvalidReactionError,
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
    create_review,
    delete_review,
    get_album_review_summary,
    toggle_reaction,
    update_review,
)


# =============================================================================
# Create Review Tests
# =============================================================================

@pytest.mark.django_db
class TestCreateReview:

    def test_updates_album_aggregate(self, reviewed_album, review_user):
        review = create_review(
            author=review_user,
            album_id=reviewed_album.id,
            rating=5,
            title='Perfect',
            content='word ' * 450,
            tags=['southern', 'classic'],
        )

        reviewed_album.refresh_from_db()
        assert reviewed_album.average_rating == Decimal('5.0')
        assert reviewed_album.total_reviews == 1
        assert review.read_time == 3
        assert review.tags == ['southern', 'classic']

    def test_duplicate_is_rejected_without_touching_aggregate(self, review, reviewed_album, review_user):
        with pytest.raises(DuplicateReviewError) as exc_info:
            create_review(
                author=review_user,
                album_id=reviewed_album.id,
                rating=1,
                title='Changed my mind',
                content='Actually no.',
            )

        assert exc_info.value.status_code == 409
        reviewed_album.refresh_from_db()
        assert reviewed_album.average_rating == Decimal('4.0')
        assert reviewed_album.total_reviews == 1
        assert Review.objects.filter(author=review_user).count() == 1

    def test_may_review_again_after_soft_delete(self, review, reviewed_album, review_user):
        delete_review(review_id=review.id, user=review_user)

        again = create_review(
            author=review_user,
            album_id=reviewed_album.id,
            rating=2,
            title='Second take',
            content='Grew on me less.',
        )

        assert again.id != review.id
        reviewed_album.refresh_from_db()
        assert reviewed_album.average_rating == Decimal('2.0')

    @pytest.mark.parametrize('rating', [0, 6, -1, 3.5, '4', True])
    def test_invalid_rating(self, reviewed_album, review_user, rating):
        with pytest.raises(InvalidRatingError):
            create_review(
                author=review_user,
                album_id=reviewed_album.id,
                rating=rating,
                title='Bad',
                content='Bad rating.',
            )

        assert not Review.objects.exists()

    def test_missing_album(self, review_user):
        with pytest.raises(AlbumNotFoundError):
            create_review(
                author=review_user,
                album_id=uuid4(),
                rating=3,
                title='Ghost',
                content='No such album.',
            )


# =============================================================================
# Update Review Tests
# =============================================================================

@pytest.mark.django_db
class TestUpdateReview:

    def test_author_updates_rating(self, review, reviewed_album, review_user):
        updated = update_review(review_id=review.id, user=review_user, rating=2, content='Reconsidered.')

        assert updated.rating == 2
        reviewed_album.refresh_from_db()
        assert reviewed_album.average_rating == Decimal('2.0')

    @patch('apps.reviews.services.review_management.recompute_album_rating')
    def test_non_author_is_rejected_before_recompute(self, recompute, review, review_other_user):
        with pytest.raises(UnauthorizedReviewActionError) as exc_info:
            update_review(review_id=review.id, user=review_other_user, rating=1)

        assert exc_info.value.status_code == 403
        recompute.assert_not_called()
        review.refresh_from_db()
        assert review.rating == 4

    def test_author_cannot_feature(self, review, review_user):
        with pytest.raises(UnauthorizedReviewActionError):
            update_review(review_id=review.id, user=review_user, featured=True)

    def test_moderator_can_feature_and_edit(self, review, review_moderator):
        updated = update_review(review_id=review.id, user=review_moderator, featured=True, verified=True)

        assert updated.featured is True
        assert updated.verified is True

    def test_invalid_rating(self, review, review_user):
        with pytest.raises(InvalidRatingError):
            update_review(review_id=review.id, user=review_user, rating=9)

    def test_deleted_review(self, review, review_user):
        delete_review(review_id=review.id, user=review_user)

        with pytest.raises(ReviewNotFoundError):
            update_review(review_id=review.id, user=review_user, title='Ghost edit')


# =============================================================================
# Delete Review Tests
# =============================================================================

@pytest.mark.django_db
class TestDeleteReview:

    def test_soft_delete_recomputes(self, rated_reviews, reviewed_album):
        reviews = rated_reviews([5, 3, 4])

        delete_review(review_id=reviews[1].id, user=reviews[1].author)

        reviewed_album.refresh_from_db()
        assert reviewed_album.average_rating == Decimal('4.5')
        assert reviewed_album.total_reviews == 2
        assert Review.objects.filter(id=reviews[1].id, is_active=False).exists()

    def test_other_user_cannot_delete(self, review, review_other_user):
        with pytest.raises(UnauthorizedReviewActionError):
            delete_review(review_id=review.id, user=review_other_user)

    def test_moderator_soft_deletes(self, review, review_moderator, reviewed_album):
        delete_review(review_id=review.id, user=review_moderator)

        reviewed_album.refresh_from_db()
        assert reviewed_album.total_reviews == 0
        assert reviewed_album.average_rating == Decimal('0.0')

    def test_hard_delete_requires_admin(self, review, review_moderator):
        with pytest.raises(UnauthorizedReviewActionError):
            delete_review(review_id=review.id, user=review_moderator, hard=True)

        assert Review.objects.filter(id=review.id).exists()

    def test_admin_hard_deletes(self, review, review_admin, reviewed_album):
        delete_review(review_id=review.id, user=review_admin, hard=True)

        assert not Review.objects.filter(id=review.id).exists()
        reviewed_album.refresh_from_db()
        assert reviewed_album.total_reviews == 0


# =============================================================================
# Reaction Tests
# =============================================================================

@pytest.mark.django_db
class TestToggleReaction:

    def test_like_then_unlike(self, review, review_other_user):
        first = toggle_reaction(review_id=review.id, user=review_other_user, reaction=LIKE)
        assert (first['likes'], first['liked']) == (1, True)

        second = toggle_reaction(review_id=review.id, user=review_other_user, reaction=LIKE)
        assert (second['likes'], second['liked']) == (0, False)

    def test_switching_moves_reaction(self, review, review_other_user):
        toggle_reaction(review_id=review.id, user=review_other_user, reaction=LIKE)
        result = toggle_reaction(review_id=review.id, user=review_other_user, reaction=DISLIKE)

        assert result == {
            'review_id': review.id,
            'likes': 0,
            'dislikes': 1,
            'liked': False,
            'disliked': True,
        }

    def test_counts_across_users(self, review, review_user, review_other_user, review_moderator):
        toggle_reaction(review_id=review.id, user=review_user, reaction=LIKE)
        toggle_reaction(review_id=review.id, user=review_other_user, reaction=LIKE)
        result = toggle_reaction(review_id=review.id, user=review_moderator, reaction=DISLIKE)

        assert result['likes'] == 2
        assert result['dislikes'] == 1

    def test_reactions_do_not_touch_rating(self, review, reviewed_album, review_other_user):
        toggle_reaction(review_id=review.id, user=review_other_user, reaction=LIKE)

        reviewed_album.refresh_from_db()
        assert reviewed_album.average_rating == Decimal('4.0')

    def test_unknown_reaction(self, review, review_other_user):
        with pytest.raises(InvalidReactionError):
            toggle_reaction(review_id=review.id, user=review_other_user, reaction='love')

    def test_missing_review(self, review_other_user):
        with pytest.raises(ReviewNotFoundError):
            toggle_reaction(review_id=uuid4(), user=review_other_user, reaction=LIKE)


# =============================================================================
# Statistics Tests
# =============================================================================

@pytest.mark.django_db
class TestAlbumReviewSummary:

    def test_counts_only_active_reviews(self, rated_reviews, reviewed_album):
        reviews = rated_reviews([5, 5, 2])
        delete_review(review_id=reviews[2].id, user=reviews[2].author)

        summary = get_album_review_summary(album_id=reviewed_album.id)

        assert summary['total_reviews'] == 2
        assert summary['average_rating'] == Decimal('5.0')
        assert summary['distribution'][1] == {'rating': 2, 'count': 0}
        assert summary['distribution'][4] == {'rating': 5, 'count': 2}

    def test_empty_album(self, reviewed_album):
        summary = get_album_review_summary(album_id=reviewed_album.id)

        assert summary['total_reviews'] == 0
        assert [entry['count'] for entry in summary['distribution']] == [0, 0, 0, 0, 0]
