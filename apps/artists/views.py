from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import HasCapability
from apps.accounts.roles import Capability
from apps.core.pagination import PaginationRequest
from apps.core.responses import UUID_PATTERN, paginated_response, success_response
from .models import Genre
from .serializers import ArtistListSerializer, ArtistSerializer
from .services import (
    ARTIST_LIST_SPEC,
    create_artist,
    delete_artist,
    get_artist_albums,
    get_artist_by_id,
    list_artists,
    update_artist,
)


class ArtistViewSet(viewsets.ViewSet):
    """
    ViewSet for artists.

    list: Paginated artists (public)
    retrieve: Artist details (public)
    create / update / partial_update: Catalog managers
    destroy: Admins
    albums: Paginated albums of the artist (public)
    """

    lookup_value_regex = UUID_PATTERN

    def get_permissions(self):
        if self.action in ('list', 'retrieve', 'albums'):
            return [AllowAny()]
        if self.action == 'destroy':
            return [IsAuthenticated(), HasCapability.of(Capability.DELETE_CATALOG)()]
        return [IsAuthenticated(), HasCapability.of(Capability.MANAGE_CATALOG)()]

    @extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='Search name, stage name, bio'),
            OpenApiParameter('genre', OpenApiTypes.STR, enum=Genre.values),
            OpenApiParameter('featured', OpenApiTypes.BOOL),
            OpenApiParameter('verified', OpenApiTypes.BOOL),
            OpenApiParameter('active', OpenApiTypes.BOOL),
            OpenApiParameter('min_followers', OpenApiTypes.INT),
            OpenApiParameter('max_followers', OpenApiTypes.INT),
            OpenApiParameter('min_monthly_listeners', OpenApiTypes.INT),
            OpenApiParameter('max_monthly_listeners', OpenApiTypes.INT),
            OpenApiParameter('page', OpenApiTypes.INT),
            OpenApiParameter('limit', OpenApiTypes.INT),
            OpenApiParameter('sort_by', OpenApiTypes.STR, enum=list(ARTIST_LIST_SPEC.sort_fields)),
            OpenApiParameter('sort_order', OpenApiTypes.STR, enum=['asc', 'desc']),
        ],
        responses={200: ArtistListSerializer(many=True)},
    )
    def list(self, request):
        pagination = PaginationRequest.from_params(request.query_params, spec=ARTIST_LIST_SPEC)
        result = list_artists(filters=request.query_params, pagination=pagination)
        return paginated_response(result, ArtistListSerializer)

    @extend_schema(responses={200: ArtistSerializer})
    def retrieve(self, request, pk=None):
        artist = get_artist_by_id(artist_id=pk)
        return success_response(ArtistSerializer(artist).data)

    @extend_schema(request=ArtistSerializer, responses={201: ArtistSerializer})
    def create(self, request):
        serializer = ArtistSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        artist = create_artist(**serializer.validated_data)
        return success_response(
            ArtistSerializer(artist).data,
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=ArtistSerializer, responses={200: ArtistSerializer})
    def update(self, request, pk=None):
        return self._update(request, pk, partial=False)

    @extend_schema(request=ArtistSerializer, responses={200: ArtistSerializer})
    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, *, partial):
        artist = get_artist_by_id(artist_id=pk)
        serializer = ArtistSerializer(artist, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        artist = update_artist(artist_id=pk, data=serializer.validated_data)
        return success_response(ArtistSerializer(artist).data)

    @extend_schema(responses={204: None})
    def destroy(self, request, pk=None):
        delete_artist(artist_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('page', OpenApiTypes.INT),
            OpenApiParameter('limit', OpenApiTypes.INT),
            OpenApiParameter('sort_by', OpenApiTypes.STR),
            OpenApiParameter('sort_order', OpenApiTypes.STR, enum=['asc', 'desc']),
        ],
    )
    @action(detail=True, methods=['get'])
    def albums(self, request, pk=None):
        """Get the artist's albums."""
        from apps.albums.serializers import AlbumListSerializer
        from apps.albums.services import ALBUM_LIST_SPEC

        pagination = PaginationRequest.from_params(request.query_params, spec=ALBUM_LIST_SPEC)
        result = get_artist_albums(
            artist_id=pk,
            filters=request.query_params,
            pagination=pagination,
        )
        return paginated_response(result, AlbumListSerializer)
