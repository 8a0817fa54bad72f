from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password

from .models import User
from .roles import Role


class UserSerializer(serializers.ModelSerializer):
    """Full user profile (owner or admin view). Never exposes the password hash."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'role',
            'avatar',
            'bio',
            'social_links',
            'is_verified',
            'last_login',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'role', 'is_verified', 'last_login', 'created_at', 'updated_at']


class UserUpdateSerializer(serializers.Serializer):
    """Fields accepted by PATCH /api/users/{id}/ (role/is_verified are admin only)."""

    username = serializers.CharField(max_length=50, required=False)
    email = serializers.EmailField(required=False)
    first_name = serializers.CharField(max_length=50, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=50, required=False, allow_blank=True)
    avatar = serializers.CharField(max_length=500, required=False, allow_blank=True)
    bio = serializers.CharField(max_length=500, required=False, allow_blank=True)
    social_links = serializers.DictField(child=serializers.CharField(allow_blank=True), required=False)
    role = serializers.ChoiceField(choices=Role.choices, required=False)
    is_verified = serializers.BooleanField(required=False)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    username = serializers.CharField(max_length=50)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    first_name = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    last_name = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class PasswordChangeSerializer(serializers.Serializer):
    """Serializer for changing the current user's password."""

    current_password = serializers.CharField(write_only=True, style={'input_type': 'password'})
    new_password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )


class PasswordResetRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


class PasswordResetConfirmSerializer(serializers.Serializer):
    """Serializer for setting a new password with a reset token."""

    token = serializers.CharField()
    new_password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    new_password_confirm = serializers.CharField(write_only=True, style={'input_type': 'password'})

    def validate(self, attrs):
        if attrs['new_password'] != attrs['new_password_confirm']:
            raise serializers.ValidationError({
                'new_password_confirm': 'Passwords do not match'
            })
        return attrs


class EmailVerificationSerializer(serializers.Serializer):
    token = serializers.CharField()


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying in reviews, news, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'username', 'first_name', 'last_name', 'role', 'avatar', 'bio', 'created_at']
        read_only_fields = fields


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    class Meta:
        model = User
        fields = ['id', 'username', 'avatar']
        read_only_fields = fields
