import logging

from rest_framework import serializers, status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.pagination import PaginationRequest
from apps.core.responses import UUID_PATTERN, paginated_response, success_response
from .permissions import HasCapability
from .roles import Capability, has_capability
from .serializers import (
    EmailVerificationSerializer,
    PasswordChangeSerializer,
    PasswordResetConfirmSerializer,
    PasswordResetRequestSerializer,
    UserLoginSerializer,
    UserPublicSerializer,
    UserRegistrationSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from .services import (
    USER_LIST_SPEC,
    UserNotFoundError,
    authenticate_user,
    change_password,
    confirm_password_reset,
    delete_user,
    get_user_by_id,
    list_users,
    register_user,
    request_password_reset,
    update_user,
    verify_email,
)


logger = logging.getLogger(__name__)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    user = UserSerializer()
    tokens = TokensResponseSerializer()


def _issue_tokens(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={201: AuthResponseSerializer},
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    user = register_user(**data)

    return success_response(
        {'user': UserSerializer(user).data, 'tokens': _issue_tokens(user)},
        message='Registration successful. Please verify your email.',
        status=status.HTTP_201_CREATED,
    )


@extend_schema(
    request=UserLoginSerializer,
    responses={200: AuthResponseSerializer},
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate_user(
        email=serializer.validated_data['email'],
        password=serializer.validated_data['password'],
    )

    return success_response(
        {'user': UserSerializer(user).data, 'tokens': _issue_tokens(user)},
        message='Login successful',
    )


@extend_schema(
    request=UserUpdateSerializer,
    responses={200: UserSerializer},
    description="Get or update the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def current_user(request):
    """Get or update the current user's profile."""
    if request.method == 'GET':
        return success_response(UserSerializer(request.user).data)

    serializer = UserUpdateSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)

    user = update_user(
        user_id=request.user.id,
        actor=request.user,
        **serializer.validated_data
    )
    return success_response(UserSerializer(user).data)


@extend_schema(
    request=PasswordChangeSerializer,
    responses={200: None},
    description="Change the current user's password. Requires the current password.",
    tags=['auth'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def password_change(request):
    """Change password for the current user."""
    serializer = PasswordChangeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    change_password(
        user=request.user,
        current_password=serializer.validated_data['current_password'],
        new_password=serializer.validated_data['new_password'],
    )
    return success_response(message='Password updated successfully')


@extend_schema(
    request=PasswordResetRequestSerializer,
    responses={200: None},
    description="Request a password reset email. Always returns success so accounts cannot be enumerated.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def password_reset_request(request):
    """Email a password reset token."""
    serializer = PasswordResetRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        request_password_reset(email=serializer.validated_data['email'])
    except UserNotFoundError:
        logger.info("Password reset requested for unknown email")

    return success_response(message='If the account exists, a password reset email has been sent')


@extend_schema(
    request=PasswordResetConfirmSerializer,
    responses={200: None},
    description="Set a new password with a reset token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def password_reset_confirm(request):
    """Confirm password reset with token."""
    serializer = PasswordResetConfirmSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    confirm_password_reset(
        token=serializer.validated_data['token'],
        new_password=serializer.validated_data['new_password'],
    )
    return success_response(message='Password reset successful')


@extend_schema(
    request=EmailVerificationSerializer,
    responses={200: UserSerializer},
    description="Verify the current user's email address with the token sent at registration.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def email_verify(request):
    """Verify email with token."""
    serializer = EmailVerificationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = verify_email(user=request.user, token=serializer.validated_data['token'])
    return success_response(UserSerializer(user).data, message='Email verified successfully')


class UserViewSet(viewsets.ViewSet):
    """
    User administration.

    list: Paginated users (admin only)
    retrieve: Public profile (full profile for self/admin)
    partial_update: Update profile (self or admin; role changes admin only)
    destroy: Delete user (admin only)
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    def get_permissions(self):
        if self.action == 'list':
            return [IsAuthenticated(), HasCapability.of(Capability.MANAGE_USERS)()]
        return super().get_permissions()

    @extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='Search username, email, first/last name'),
            OpenApiParameter('role', OpenApiTypes.STR, enum=['user', 'reviewer', 'admin']),
            OpenApiParameter('is_verified', OpenApiTypes.BOOL),
            OpenApiParameter('page', OpenApiTypes.INT),
            OpenApiParameter('limit', OpenApiTypes.INT),
            OpenApiParameter('sort_by', OpenApiTypes.STR, enum=list(USER_LIST_SPEC.sort_fields)),
            OpenApiParameter('sort_order', OpenApiTypes.STR, enum=['asc', 'desc']),
        ],
        responses={200: UserSerializer(many=True)},
        tags=['users'],
    )
    def list(self, request):
        pagination = PaginationRequest.from_params(request.query_params, spec=USER_LIST_SPEC)
        result = list_users(filters=request.query_params, pagination=pagination)
        return paginated_response(result, UserSerializer)

    @extend_schema(responses={200: UserPublicSerializer}, tags=['users'])
    def retrieve(self, request, pk=None):
        user = get_user_by_id(user_id=pk)
        if user == request.user or has_capability(request.user, Capability.MANAGE_USERS):
            return success_response(UserSerializer(user).data)
        return success_response(UserPublicSerializer(user).data)

    @extend_schema(request=UserUpdateSerializer, responses={200: UserSerializer}, tags=['users'])
    def partial_update(self, request, pk=None):
        serializer = UserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        user = update_user(user_id=pk, actor=request.user, **serializer.validated_data)
        return success_response(UserSerializer(user).data)

    @extend_schema(responses={204: None}, tags=['users'])
    def destroy(self, request, pk=None):
        delete_user(user_id=pk, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
