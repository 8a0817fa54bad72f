from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.pagination import PaginationRequest, parse_bool
from apps.core.responses import UUID_PATTERN, paginated_response, success_response
from .serializers import (
    ReactionResponseSerializer,
    ReviewCreateSerializer,
    ReviewSerializer,
    ReviewUpdateSerializer,
)
from .services import (
    DISLIKE,
    LIKE,
    REVIEW_LIST_SPEC,
    create_review,
    delete_review,
    get_review_by_id,
    get_user_reviews,
    list_reviews,
    toggle_reaction,
    update_review,
)

LIST_PARAMETERS = [
    OpenApiParameter('album', OpenApiTypes.UUID),
    OpenApiParameter('author', OpenApiTypes.UUID),
    OpenApiParameter('rating', OpenApiTypes.INT),
    OpenApiParameter('min_rating', OpenApiTypes.INT),
    OpenApiParameter('max_rating', OpenApiTypes.INT),
    OpenApiParameter('featured', OpenApiTypes.BOOL),
    OpenApiParameter('verified', OpenApiTypes.BOOL),
    OpenApiParameter('search', OpenApiTypes.STR, description='Search title and content'),
    OpenApiParameter('page', OpenApiTypes.INT),
    OpenApiParameter('limit', OpenApiTypes.INT),
    OpenApiParameter('sort_by', OpenApiTypes.STR, enum=list(REVIEW_LIST_SPEC.sort_fields)),
    OpenApiParameter('sort_order', OpenApiTypes.STR, enum=['asc', 'desc']),
]


class ReviewViewSet(viewsets.ViewSet):
    """
    ViewSet for album reviews.

    list: Paginated active reviews (public)
    create: Review an album (recomputes the album rating)
    retrieve: Get a specific review (public)
    partial_update / update: Author or moderator
    destroy: Soft delete (author or moderator); ?hard=true for admins
    my_reviews: Current user's reviews
    like / dislike: Toggle a reaction
    """

    lookup_value_regex = UUID_PATTERN

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(parameters=LIST_PARAMETERS, responses={200: ReviewSerializer(many=True)})
    def list(self, request):
        pagination = PaginationRequest.from_params(request.query_params, spec=REVIEW_LIST_SPEC)
        result = list_reviews(filters=request.query_params, pagination=pagination)
        return paginated_response(result, ReviewSerializer)

    @extend_schema(request=ReviewCreateSerializer, responses={201: ReviewSerializer})
    def create(self, request):
        """Create a review; the album's aggregate rating is updated before responding."""
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = create_review(author=request.user, **serializer.validated_data)

        return success_response(
            ReviewSerializer(get_review_by_id(review_id=review.id)).data,
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: ReviewSerializer})
    def retrieve(self, request, pk=None):
        review = get_review_by_id(review_id=pk)
        return success_response(ReviewSerializer(review).data)

    @extend_schema(request=ReviewUpdateSerializer, responses={200: ReviewSerializer})
    def update(self, request, pk=None):
        return self.partial_update(request, pk)

    @extend_schema(request=ReviewUpdateSerializer, responses={200: ReviewSerializer})
    def partial_update(self, request, pk=None):
        serializer = ReviewUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        review = update_review(review_id=pk, user=request.user, **serializer.validated_data)
        return success_response(ReviewSerializer(review).data)

    @extend_schema(
        parameters=[OpenApiParameter('hard', OpenApiTypes.BOOL, description='Permanently delete (admin only)')],
        responses={204: None},
    )
    def destroy(self, request, pk=None):
        try:
            hard = parse_bool(request.query_params.get('hard', 'false'))
        except ValueError:
            hard = False

        delete_review(review_id=pk, user=request.user, hard=hard)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(parameters=LIST_PARAMETERS, responses={200: ReviewSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def my_reviews(self, request):
        """Get current user's reviews."""
        pagination = PaginationRequest.from_params(request.query_params, spec=REVIEW_LIST_SPEC)
        result = get_user_reviews(
            user=request.user,
            filters=request.query_params,
            pagination=pagination,
        )
        return paginated_response(result, ReviewSerializer)

    @extend_schema(request=None, responses={200: ReactionResponseSerializer})
    @action(detail=True, methods=['post'])
    def like(self, request, pk=None):
        """Like a review, or remove an existing like."""
        return success_response(toggle_reaction(review_id=pk, user=request.user, reaction=LIKE))

    @extend_schema(request=None, responses={200: ReactionResponseSerializer})
    @action(detail=True, methods=['post'])
    def dislike(self, request, pk=None):
        """Dislike a review, or remove an existing dislike."""
        return success_response(toggle_reaction(review_id=pk, user=request.user, reaction=DISLIKE))
