from rest_framework import serializers

from .models import Artist


class ArtistSerializer(serializers.ModelSerializer):
    """Main serializer for artists."""

    is_active = serializers.BooleanField(read_only=True)

    class Meta:
        model = Artist
        fields = [
            'id',
            'name',
            'real_name',
            'stage_name',
            'bio',
            'image',
            'genre',
            'hometown',
            'active_from',
            'active_to',
            'is_active',
            'labels',
            'social_media',
            'featured',
            'verified',
            'followers',
            'monthly_listeners',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_labels(self, value):
        if not isinstance(value, list) or not all(isinstance(label, str) for label in value):
            raise serializers.ValidationError("Labels must be a list of strings.")
        return value


class ArtistListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for artist listings."""

    class Meta:
        model = Artist
        fields = [
            'id',
            'name',
            'stage_name',
            'image',
            'genre',
            'featured',
            'verified',
            'followers',
            'monthly_listeners',
        ]


class ArtistMinimalSerializer(serializers.ModelSerializer):
    """Embedded in album payloads."""

    class Meta:
        model = Artist
        fields = ['id', 'name', 'stage_name', 'image']
