from rest_framework import serializers

from apps.artists.models import Artist
from apps.artists.serializers import ArtistMinimalSerializer
from .models import Album


class TrackSerializer(serializers.Serializer):
    """One entry of an album's track list (duration in seconds)."""

    title = serializers.CharField(max_length=200)
    duration = serializers.IntegerField(min_value=0)
    features = serializers.ListField(child=serializers.CharField(max_length=100), required=False, default=list)


class AlbumSerializer(serializers.ModelSerializer):
    """Main serializer for albums. Aggregate rating fields are read-only."""

    artist = serializers.PrimaryKeyRelatedField(queryset=Artist.objects.all())
    artist_detail = ArtistMinimalSerializer(source='artist', read_only=True)
    tracklist = TrackSerializer(many=True, required=False)
    total_duration = serializers.IntegerField(min_value=0, required=False)

    class Meta:
        model = Album
        fields = [
            'id',
            'title',
            'artist',
            'artist_detail',
            'album_type',
            'release_date',
            'genre',
            'cover_art',
            'description',
            'tracklist',
            'total_duration',
            'label',
            'producers',
            'featured',
            'verified',
            'streaming_links',
            'average_rating',
            'total_reviews',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'average_rating',
            'total_reviews',
            'created_at',
            'updated_at',
        ]


class AlbumListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for album listings."""

    artist_name = serializers.CharField(source='artist.name', read_only=True)

    class Meta:
        model = Album
        fields = [
            'id',
            'title',
            'artist',
            'artist_name',
            'album_type',
            'release_date',
            'genre',
            'cover_art',
            'featured',
            'average_rating',
            'total_reviews',
        ]


class AlbumMinimalSerializer(serializers.ModelSerializer):
    """Embedded in review payloads."""

    artist_name = serializers.CharField(source='artist.name', read_only=True)

    class Meta:
        model = Album
        fields = ['id', 'title', 'artist_name', 'cover_art', 'average_rating', 'total_reviews']


class RatingDistributionSerializer(serializers.Serializer):
    rating = serializers.IntegerField()
    count = serializers.IntegerField()


class AlbumReviewSummarySerializer(serializers.Serializer):
    """Rating distribution of an album's active reviews (documentation only)."""

    album_id = serializers.UUIDField()
    average_rating = serializers.DecimalField(max_digits=2, decimal_places=1)
    total_reviews = serializers.IntegerField()
    distribution = RatingDistributionSerializer(many=True)


class SpotifyTrackSerializer(serializers.Serializer):
    """Subset of the Spotify track object (documentation only)."""

    id = serializers.CharField()
    name = serializers.CharField()
    duration_ms = serializers.IntegerField()
    popularity = serializers.IntegerField()
    preview_url = serializers.CharField(allow_null=True)
