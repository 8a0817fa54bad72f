"""
Generic filter/sort/paginate engine shared by every list endpoint.

Each entity declares a ``ListSpec`` (what may be filtered and sorted);
``paginate_queryset`` turns untyped query parameters into a bounded,
deterministic page plus pagination metadata.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Mapping, Optional, Sequence

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q, QuerySet
from django.utils.dateparse import parse_date

from .exceptions import InvalidFilterError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_SORT_FIELD = 'created_at'
SORT_ASC = 'asc'
SORT_DESC = 'desc'

SEARCH_PARAM = 'search'

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def to_snake_case(name: str) -> str:
    """Normalize ``sortBy``-style names to ``sort_by``."""
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def parse_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("Booleans are not integers")
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def parse_float(value: Any) -> float:
    return float(str(value).strip())


def parse_iso_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    parsed = parse_date(str(value).strip())
    if parsed is None:
        raise ValueError(f"Invalid date: {value!r}")
    return parsed


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ('true', '1', 'yes'):
        return True
    if text in ('false', '0', 'no'):
        return False
    raise ValueError(f"Invalid boolean: {value!r}")


@dataclass(frozen=True)
class RangeFilter:
    """Inclusive numeric/date range over one field."""
    field: str
    min_param: Optional[str] = None
    max_param: Optional[str] = None
    cast: Callable[[Any], Any] = parse_int


@dataclass(frozen=True)
class ListSpec:
    """
    Declares what a list endpoint may filter and sort by.

    Attributes:
        sort_fields: Public sort name -> ORM field (the sort allow-list)
        exact_fields: Query param -> ORM lookup for exact equality
        boolean_fields: Query param -> ORM lookup taking a parsed bool
        range_filters: Inclusive bounds
        search_fields: Fields matched case-insensitively by ``search``
        default_sort: Public sort name used when ``sort_by`` is missing or unknown
    """
    sort_fields: Mapping[str, str]
    exact_fields: Mapping[str, str] = field(default_factory=dict)
    boolean_fields: Mapping[str, str] = field(default_factory=dict)
    range_filters: Sequence[RangeFilter] = ()
    search_fields: Sequence[str] = ()
    default_sort: str = DEFAULT_SORT_FIELD

    def resolve_sort(self, sort_by: Optional[str]) -> str:
        if sort_by:
            name = to_snake_case(str(sort_by).strip())
            if name in self.sort_fields:
                return name
        return self.default_sort


def _first_param(params: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        value = params.get(name)
        if value not in (None, ''):
            return value
    return None


def _bounded_int(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        return parse_int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class PaginationRequest:
    """Page number, page size and ordering for a list query."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = DEFAULT_SORT_FIELD
    sort_order: str = SORT_DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def build(
        cls,
        *,
        spec: ListSpec,
        page: Any = None,
        limit: Any = None,
        sort_by: Any = None,
        sort_order: Any = None,
    ) -> 'PaginationRequest':
        """
        Clamp raw values into a valid request.

        page < 1 becomes 1, limit is clamped to [1, 100], unknown sort fields
        fall back to the list's default and unknown orders to descending.
        Unparsable numbers fall back to the defaults.
        """
        page = max(_bounded_int(page, DEFAULT_PAGE), DEFAULT_PAGE)
        limit = min(max(_bounded_int(limit, DEFAULT_LIMIT), MIN_LIMIT), MAX_LIMIT)

        order = str(sort_order).strip().lower() if sort_order else SORT_DESC
        if order not in (SORT_ASC, SORT_DESC):
            order = SORT_DESC

        return cls(
            page=page,
            limit=limit,
            sort_by=spec.resolve_sort(sort_by),
            sort_order=order,
        )

    @classmethod
    def from_params(cls, params: Mapping[str, Any], *, spec: ListSpec) -> 'PaginationRequest':
        """Read pagination from query parameters (snake_case or camelCase)."""
        return cls.build(
            spec=spec,
            page=_first_param(params, 'page'),
            limit=_first_param(params, 'limit', 'page_size', 'pageSize'),
            sort_by=_first_param(params, 'sort_by', 'sortBy'),
            sort_order=_first_param(params, 'sort_order', 'sortOrder'),
        )


@dataclass
class PaginationResult:
    """One page of results plus pagination metadata."""
    items: list
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1

    def to_dict(self) -> dict:
        return {
            'total': self.total,
            'page': self.page,
            'limit': self.limit,
            'total_pages': self.total_pages,
            'has_next_page': self.has_next_page,
            'has_prev_page': self.has_prev_page,
        }


def _cast(cast, value, param):
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise InvalidFilterError(f"Invalid value for '{param}': {value!r}")


def apply_filters(queryset: QuerySet, *, spec: ListSpec, filters: Mapping[str, Any]) -> QuerySet:
    """
    Apply every recognized filter in ``filters`` to ``queryset``.

    Unrecognized keys are ignored. All criteria are AND-ed together;
    ``search`` ORs across the declared search fields.
    """
    conditions = Q()

    for param, lookup in spec.exact_fields.items():
        value = filters.get(param)
        if value not in (None, ''):
            conditions &= Q(**{lookup: value})

    for param, lookup in spec.boolean_fields.items():
        value = filters.get(param)
        if value not in (None, ''):
            conditions &= Q(**{lookup: _cast(parse_bool, value, param)})

    for range_filter in spec.range_filters:
        for param, suffix in ((range_filter.min_param, 'gte'), (range_filter.max_param, 'lte')):
            if not param:
                continue
            value = filters.get(param)
            if value not in (None, ''):
                bound = _cast(range_filter.cast, value, param)
                conditions &= Q(**{f'{range_filter.field}__{suffix}': bound})

    search = filters.get(SEARCH_PARAM)
    if search and spec.search_fields:
        term = str(search).strip()
        if term:
            text_match = Q()
            for search_field in spec.search_fields:
                text_match |= Q(**{f'{search_field}__icontains': term})
            conditions &= text_match

    try:
        return queryset.filter(conditions)
    except DjangoValidationError as exc:
        # e.g. a malformed UUID for an exact-match foreign key
        raise InvalidFilterError('; '.join(exc.messages))
    except (TypeError, ValueError) as exc:
        # e.g. a non-numeric value for an exact-match integer field
        raise InvalidFilterError(str(exc))


def build_ordering(*, spec: ListSpec, pagination: PaginationRequest) -> list[str]:
    """Sort field plus an identity tie-break so ordering is total."""
    sort_field = spec.sort_fields[spec.resolve_sort(pagination.sort_by)]
    prefix = '-' if pagination.sort_order == SORT_DESC else ''
    ordering = [f'{prefix}{sort_field}']
    if sort_field not in ('id', 'pk'):
        ordering.append('id')
    return ordering


def paginate_queryset(
    queryset: QuerySet,
    *,
    spec: ListSpec,
    filters: Mapping[str, Any],
    pagination: PaginationRequest,
) -> PaginationResult:
    """
    Filter, sort and slice ``queryset``.

    A page past the end yields an empty ``items`` list with the correct
    totals; this function never raises for empty results.
    """
    queryset = apply_filters(queryset, spec=spec, filters=filters)
    total = queryset.count()

    ordered = queryset.order_by(*build_ordering(spec=spec, pagination=pagination))
    start = pagination.offset
    items = list(ordered[start:start + pagination.limit]) if start < total else []

    return PaginationResult(
        items=items,
        total=total,
        page=pagination.page,
        limit=pagination.limit,
    )
