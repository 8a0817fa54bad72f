import logging
from decimal import Decimal
from uuid import uuid4

import pytest
from apps.albums.models import Album
from apps.albums.services import (
    get_most_reviewed_albums,
    get_top_rated_albums,
    mean_rating,
    recompute_album_rating,
)


class TestMeanRating:

    @pytest.mark.parametrize('total, count, expected', [
        (0, 0, Decimal('0.0')),
        (12, 3, Decimal('4.0')),
        (17, 4, Decimal('4.3')),
        (9, 2, Decimal('4.5')),
        (10, 3, Decimal('3.3')),
        (11, 3, Decimal('3.7')),
        (5, 1, Decimal('5.0')),
    ])
    def test_rounds_half_up_to_one_decimal(self, total, count, expected):
        assert mean_rating(total, count) == expected


@pytest.mark.django_db
class TestRecomputeAlbumRating:

    def test_mean_of_active_reviews(self, album, add_reviews):
        add_reviews(album, [5, 3, 4])

        recompute_album_rating(album_id=album.id)

        album.refresh_from_db()
        assert album.average_rating == Decimal('4.0')
        assert album.total_reviews == 3

    def test_inactive_reviews_are_excluded(self, album, add_reviews):
        reviews = add_reviews(album, [5, 3, 4])
        recompute_album_rating(album_id=album.id)

        reviews[1].is_active = False
        reviews[1].save()
        recompute_album_rating(album_id=album.id)

        album.refresh_from_db()
        assert album.average_rating == Decimal('4.5')
        assert album.total_reviews == 2

    def test_no_reviews_resets_to_zero(self, album, add_reviews):
        album.average_rating = Decimal('3.0')
        album.total_reviews = 7
        album.save()

        recompute_album_rating(album_id=album.id)

        album.refresh_from_db()
        assert album.average_rating == Decimal('0.0')
        assert album.total_reviews == 0

    def test_rounding(self, album, add_reviews):
        add_reviews(album, [5, 4, 4, 4])

        recompute_album_rating(album_id=album.id)

        album.refresh_from_db()
        assert album.average_rating == Decimal('4.3')

    def test_idempotent(self, album, add_reviews):
        add_reviews(album, [2, 5])

        first = recompute_album_rating(album_id=album.id)
        second = recompute_album_rating(album_id=album.id)

        assert (first.average_rating, first.total_reviews) == (second.average_rating, second.total_reviews)
        assert second.average_rating == Decimal('3.5')

    def test_only_touches_aggregates(self, album, add_reviews):
        add_reviews(album, [4])
        Album.objects.filter(id=album.id).update(title='Renamed elsewhere')

        recompute_album_rating(album_id=album.id)

        album.refresh_from_db()
        assert album.title == 'Renamed elsewhere'
        assert album.total_reviews == 1

    def test_missing_album_logs_warning(self, db, caplog):
        missing = uuid4()

        with caplog.at_level(logging.WARNING, logger='apps.albums.services.rating_aggregation'):
            assert recompute_album_rating(album_id=missing) is None

        assert str(missing) in caplog.text


@pytest.mark.django_db
class TestCharts:

    def test_top_rated_requires_min_reviews(self, album, album_artist, add_reviews):
        popular = Album.objects.create(title='Popular', artist=album_artist)
        add_reviews(album, [5, 5])
        add_reviews(popular, [4, 4, 4])
        recompute_album_rating(album_id=album.id)
        recompute_album_rating(album_id=popular.id)

        assert [a.title for a in get_top_rated_albums(min_reviews=3)] == ['Popular']
        assert [a.title for a in get_top_rated_albums(min_reviews=1)] == ['Madvillainy', 'Popular']

    def test_most_reviewed(self, album, album_artist, add_reviews):
        quiet = Album.objects.create(title='Quiet', artist=album_artist)
        add_reviews(album, [3, 4])
        recompute_album_rating(album_id=album.id)

        assert [a.title for a in get_most_reviewed_albums(limit=1)] == ['Madvillainy']
        assert quiet in list(get_most_reviewed_albums())
