import pytest
from apps.artists.models import Artist
from apps.core.exceptions import InvalidFilterError
from apps.core.pagination import (
    ListSpec,
    PaginationRequest,
    RangeFilter,
    build_ordering,
    paginate_queryset,
    parse_bool,
    to_snake_case,
)

SPEC = ListSpec(
    sort_fields={'created_at': 'created_at', 'name': 'name', 'followers': 'followers'},
    exact_fields={'genre': 'genre'},
    boolean_fields={'featured': 'featured', 'active': 'active_to__isnull'},
    range_filters=(RangeFilter('followers', 'min_followers', 'max_followers'),),
    search_fields=('name', 'bio'),
)


class TestPaginationRequest:

    def test_defaults(self):
        request = PaginationRequest.from_params({}, spec=SPEC)
        assert request.page == 1
        assert request.limit == 10
        assert request.sort_by == 'created_at'
        assert request.sort_order == 'desc'

    @pytest.mark.parametrize('raw, expected', [
        ('0', 1),
        ('-4', 1),
        ('abc', 1),
        ('3', 3),
    ])
    def test_page_clamped(self, raw, expected):
        assert PaginationRequest.from_params({'page': raw}, spec=SPEC).page == expected

    @pytest.mark.parametrize('raw, expected', [
        ('0', 1),
        ('500', 100),
        ('nope', 10),
        ('25', 25),
    ])
    def test_limit_clamped(self, raw, expected):
        assert PaginationRequest.from_params({'limit': raw}, spec=SPEC).limit == expected

    def test_page_size_alias(self):
        assert PaginationRequest.from_params({'pageSize': '7'}, spec=SPEC).limit == 7
        assert PaginationRequest.from_params({'page_size': '8'}, spec=SPEC).limit == 8

    def test_camel_case_sort_params(self):
        request = PaginationRequest.from_params({'sortBy': 'name', 'sortOrder': 'ASC'}, spec=SPEC)
        assert request.sort_by == 'name'
        assert request.sort_order == 'asc'

    def test_unknown_sort_falls_back_to_default(self):
        request = PaginationRequest.from_params({'sort_by': 'password', 'sort_order': 'sideways'}, spec=SPEC)
        assert request.sort_by == 'created_at'
        assert request.sort_order == 'desc'

    def test_offset(self):
        assert PaginationRequest(page=3, limit=20).offset == 40


def test_to_snake_case():
    assert to_snake_case('monthlyListeners') == 'monthly_listeners'
    assert to_snake_case('name') == 'name'


def test_parse_bool_rejects_garbage():
    assert parse_bool('TRUE') is True
    assert parse_bool('0') is False
    with pytest.raises(ValueError):
        parse_bool('maybe')


def test_ordering_has_identity_tiebreak():
    request = PaginationRequest.build(spec=SPEC, sort_by='followers', sort_order='asc')
    assert build_ordering(spec=SPEC, pagination=request) == ['followers', 'id']


@pytest.mark.django_db
class TestPaginateQueryset:

    @pytest.fixture
    def artists(self, db):
        return [
            Artist.objects.create(name='Aesop Rock', followers=300, genre='Hip-Hop', bio='Definitive Jux'),
            Artist.objects.create(name='Burial', followers=500, genre='Grime', active_to=2020, active_from=2005),
            Artist.objects.create(name='Common', followers=100, genre='Hip-Hop', featured=True),
            Artist.objects.create(name='Danny Brown', followers=400, genre='Hip-Hop'),
        ]

    def _page(self, filters=None, **pagination):
        request = PaginationRequest.build(spec=SPEC, **pagination)
        return paginate_queryset(Artist.objects.all(), spec=SPEC, filters=filters or {}, pagination=request)

    def test_sorted_pages_are_disjoint(self, artists):
        first = self._page(sort_by='followers', sort_order='asc', limit=2, page=1)
        second = self._page(sort_by='followers', sort_order='asc', limit=2, page=2)

        assert [a.followers for a in first.items] == [100, 300]
        assert [a.followers for a in second.items] == [400, 500]
        assert first.to_dict() == {
            'total': 4,
            'page': 1,
            'limit': 2,
            'total_pages': 2,
            'has_next_page': True,
            'has_prev_page': False,
        }
        assert second.has_next_page is False
        assert second.has_prev_page is True

    def test_page_past_end_is_empty(self, artists):
        result = self._page(page=9, limit=2)

        assert result.items == []
        assert result.total == 4
        assert result.total_pages == 2

    def test_empty_queryset(self, db):
        result = self._page()

        assert result.items == []
        assert result.total == 0
        assert result.total_pages == 0
        assert result.has_next_page is False

    def test_exact_and_range_filters_combine(self, artists):
        result = self._page({'genre': 'Hip-Hop', 'min_followers': '200', 'max_followers': '400'})

        assert {a.name for a in result.items} == {'Aesop Rock', 'Danny Brown'}

    def test_boolean_filters(self, artists):
        assert [a.name for a in self._page({'featured': 'true'}).items] == ['Common']
        assert [a.name for a in self._page({'active': 'false'}).items] == ['Burial']

    def test_search_is_case_insensitive_across_fields(self, artists):
        assert [a.name for a in self._page({'search': 'JUX'}).items] == ['Aesop Rock']
        assert [a.name for a in self._page({'search': 'bur'}).items] == ['Burial']

    def test_unknown_filters_ignored(self, artists):
        assert self._page({'password': 'x', 'shoe_size': '9'}).total == 4

    def test_malformed_range_value(self, artists):
        with pytest.raises(InvalidFilterError):
            self._page({'min_followers': 'lots'})

    def test_malformed_boolean_value(self, artists):
        with pytest.raises(InvalidFilterError):
            self._page({'featured': 'sometimes'})

    def test_ties_are_ordered_deterministically(self, db):
        for name in ('B', 'C', 'A', 'D', 'E'):
            Artist.objects.create(name=name, followers=10)

        runs = [
            [a.id for a in self._page(sort_by='followers', limit=2, page=page).items]
            for page in (1, 2, 3)
        ]
        again = [
            [a.id for a in self._page(sort_by='followers', limit=2, page=page).items]
            for page in (1, 2, 3)
        ]

        assert runs == again
        flattened = [artist_id for page in runs for artist_id in page]
        assert len(set(flattened)) == 5
