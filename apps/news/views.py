from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import HasCapability
from apps.accounts.roles import Capability
from apps.core.pagination import PaginationRequest
from apps.core.responses import UUID_PATTERN, paginated_response, success_response
from .models import NewsCategory
from .serializers import NewsListSerializer, NewsSerializer
from .services import (
    NEWS_LIST_SPEC,
    create_news,
    delete_news,
    get_news_by_id,
    list_news,
    update_news,
)


class NewsViewSet(viewsets.ViewSet):
    """
    ViewSet for news articles.

    list / retrieve: Published articles (drafts too for publishers)
    create / update / partial_update / destroy: Publishers
    """

    lookup_value_regex = UUID_PATTERN

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            return [AllowAny()]
        return [IsAuthenticated(), HasCapability.of(Capability.PUBLISH_NEWS)()]

    @extend_schema(
        parameters=[
            OpenApiParameter('category', OpenApiTypes.STR, enum=NewsCategory.values),
            OpenApiParameter('featured', OpenApiTypes.BOOL),
            OpenApiParameter('search', OpenApiTypes.STR, description='Search title, excerpt, content'),
            OpenApiParameter('page', OpenApiTypes.INT),
            OpenApiParameter('limit', OpenApiTypes.INT),
            OpenApiParameter('sort_by', OpenApiTypes.STR, enum=list(NEWS_LIST_SPEC.sort_fields)),
            OpenApiParameter('sort_order', OpenApiTypes.STR, enum=['asc', 'desc']),
        ],
        responses={200: NewsListSerializer(many=True)},
    )
    def list(self, request):
        pagination = PaginationRequest.from_params(request.query_params, spec=NEWS_LIST_SPEC)
        result = list_news(filters=request.query_params, pagination=pagination, viewer=request.user)
        return paginated_response(result, NewsListSerializer)

    @extend_schema(responses={200: NewsSerializer})
    def retrieve(self, request, pk=None):
        article = get_news_by_id(news_id=pk, viewer=request.user, count_view=True)
        return success_response(NewsSerializer(article).data)

    @extend_schema(request=NewsSerializer, responses={201: NewsSerializer})
    def create(self, request):
        serializer = NewsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        article = create_news(author=request.user, **serializer.validated_data)
        return success_response(NewsSerializer(article).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=NewsSerializer, responses={200: NewsSerializer})
    def update(self, request, pk=None):
        return self._update(request, pk, partial=False)

    @extend_schema(request=NewsSerializer, responses={200: NewsSerializer})
    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, *, partial):
        serializer = NewsSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        article = update_news(news_id=pk, user=request.user, data=serializer.validated_data)
        return success_response(NewsSerializer(article).data)

    @extend_schema(responses={204: None})
    def destroy(self, request, pk=None):
        delete_news(news_id=pk, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
