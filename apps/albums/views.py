from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import HasCapability
from apps.accounts.roles import Capability
from apps.core.exceptions import ValidationFailedError
from apps.core.pagination import MAX_LIMIT, PaginationRequest, parse_int
from apps.core.responses import UUID_PATTERN, paginated_response, success_response
from .models import AlbumType
from .serializers import (
    AlbumListSerializer,
    AlbumReviewSummarySerializer,
    AlbumSerializer,
    SpotifyTrackSerializer,
)
from .services import (
    ALBUM_LIST_SPEC,
    create_album,
    delete_album,
    get_album_by_id,
    get_most_reviewed_albums,
    get_spotify_client,
    get_top_rated_albums,
    list_albums,
    update_album,
)


class AlbumViewSet(viewsets.ViewSet):
    """
    ViewSet for albums.

    list: Paginated albums (public)
    retrieve: Album details (public)
    create / update / partial_update: Catalog managers
    destroy: Admins
    review_summary: Rating distribution (public)
    top_rated / most_reviewed: Album charts (public)
    spotify_search / spotify_track: Spotify lookups (authenticated)
    """

    lookup_value_regex = UUID_PATTERN

    def get_permissions(self):
        if self.action in ('list', 'retrieve', 'review_summary', 'top_rated', 'most_reviewed'):
            return [AllowAny()]
        if self.action in ('spotify_search', 'spotify_track'):
            return [IsAuthenticated()]
        if self.action == 'destroy':
            return [IsAuthenticated(), HasCapability.of(Capability.DELETE_CATALOG)()]
        return [IsAuthenticated(), HasCapability.of(Capability.MANAGE_CATALOG)()]

    @extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='Search title, description, label'),
            OpenApiParameter('artist', OpenApiTypes.UUID),
            OpenApiParameter('genre', OpenApiTypes.STR),
            OpenApiParameter('album_type', OpenApiTypes.STR, enum=AlbumType.values),
            OpenApiParameter('featured', OpenApiTypes.BOOL),
            OpenApiParameter('verified', OpenApiTypes.BOOL),
            OpenApiParameter('min_rating', OpenApiTypes.NUMBER),
            OpenApiParameter('max_rating', OpenApiTypes.NUMBER),
            OpenApiParameter('released_after', OpenApiTypes.DATE),
            OpenApiParameter('released_before', OpenApiTypes.DATE),
            OpenApiParameter('page', OpenApiTypes.INT),
            OpenApiParameter('limit', OpenApiTypes.INT),
            OpenApiParameter('sort_by', OpenApiTypes.STR, enum=list(ALBUM_LIST_SPEC.sort_fields)),
            OpenApiParameter('sort_order', OpenApiTypes.STR, enum=['asc', 'desc']),
        ],
        responses={200: AlbumListSerializer(many=True)},
    )
    def list(self, request):
        pagination = PaginationRequest.from_params(request.query_params, spec=ALBUM_LIST_SPEC)
        result = list_albums(filters=request.query_params, pagination=pagination)
        return paginated_response(result, AlbumListSerializer)

    @extend_schema(responses={200: AlbumSerializer})
    def retrieve(self, request, pk=None):
        album = get_album_by_id(album_id=pk)
        return success_response(AlbumSerializer(album).data)

    @extend_schema(request=AlbumSerializer, responses={201: AlbumSerializer})
    def create(self, request):
        serializer = AlbumSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        album = create_album(**serializer.validated_data)
        return success_response(
            AlbumSerializer(album).data,
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=AlbumSerializer, responses={200: AlbumSerializer})
    def update(self, request, pk=None):
        return self._update(request, pk, partial=False)

    @extend_schema(request=AlbumSerializer, responses={200: AlbumSerializer})
    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, *, partial):
        album = get_album_by_id(album_id=pk)
        serializer = AlbumSerializer(album, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        album = update_album(album_id=pk, data=serializer.validated_data)
        return success_response(AlbumSerializer(album).data)

    @extend_schema(responses={204: None})
    def destroy(self, request, pk=None):
        delete_album(album_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: AlbumReviewSummarySerializer})
    @action(detail=True, methods=['get'], url_path='reviews/summary')
    def review_summary(self, request, pk=None):
        """Rating distribution of the album's reviews."""
        from apps.reviews.services import get_album_review_summary

        return success_response(get_album_review_summary(album_id=pk))

    @extend_schema(
        parameters=[OpenApiParameter('q', OpenApiTypes.STR, required=True, description='Track search query')],
        responses={200: SpotifyTrackSerializer},
    )
    @action(detail=False, methods=['get'], url_path='spotify/search')
    def spotify_search(self, request):
        """Best matching Spotify track for a query."""
        query = (request.query_params.get('q') or '').strip()
        if not query:
            raise ValidationFailedError("Query parameter 'q' is required")

        track = get_spotify_client().search_track(query)
        return success_response(track)

    @extend_schema(responses={200: SpotifyTrackSerializer})
    @action(detail=False, methods=['get'], url_path=r'spotify/tracks/(?P<track_id>[A-Za-z0-9]+)')
    def spotify_track(self, request, track_id=None):
        """Fetch a Spotify track by id."""
        track = get_spotify_client().get_track(track_id)
        return success_response(track)

    @extend_schema(
        parameters=[
            OpenApiParameter('limit', OpenApiTypes.INT, description='Number of albums (default 10)'),
            OpenApiParameter('min_reviews', OpenApiTypes.INT, description='Minimum review count (default 3)'),
        ],
        responses={200: AlbumListSerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def top_rated(self, request):
        """Highest rated albums with enough reviews."""
        albums = get_top_rated_albums(
            limit=_chart_param(request, 'limit', 10, upper=MAX_LIMIT),
            min_reviews=_chart_param(request, 'min_reviews', 3),
        )
        return success_response(AlbumListSerializer(albums, many=True).data)

    @extend_schema(
        parameters=[OpenApiParameter('limit', OpenApiTypes.INT, description='Number of albums (default 10)')],
        responses={200: AlbumListSerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def most_reviewed(self, request):
        """Albums with the most reviews."""
        albums = get_most_reviewed_albums(limit=_chart_param(request, 'limit', 10, upper=MAX_LIMIT))
        return success_response(AlbumListSerializer(albums, many=True).data)


def _chart_param(request, name, default, *, upper=None):
    raw = request.query_params.get(name)
    if raw in (None, ''):
        return default
    try:
        value = max(parse_int(raw), 0)
    except ValueError:
        raise ValidationFailedError(f"Query parameter '{name}' must be an integer")
    return min(value, upper) if upper is not None else value
