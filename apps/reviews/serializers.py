from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from apps.albums.serializers import AlbumMinimalSerializer
from .models import Review


def _string_list():
    return serializers.ListField(
        child=serializers.CharField(max_length=200),
        required=False,
    )


class ReviewSerializer(serializers.ModelSerializer):
    """Main serializer for reviews (read only)."""

    author = UserMinimalSerializer(read_only=True)
    album = AlbumMinimalSerializer(read_only=True)
    likes = serializers.SerializerMethodField()
    dislikes = serializers.SerializerMethodField()

    class Meta:
        model = Review
        fields = [
            'id',
            'album',
            'author',
            'rating',
            'title',
            'content',
            'pros',
            'cons',
            'highlights',
            'lowlights',
            'tags',
            'featured',
            'verified',
            'likes',
            'dislikes',
            'read_time',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_likes(self, obj) -> int:
        # Querysets from the review services annotate the counts
        if hasattr(obj, 'num_likes'):
            return obj.num_likes
        return obj.likes_count

    def get_dislikes(self, obj) -> int:
        if hasattr(obj, 'num_dislikes'):
            return obj.num_dislikes
        return obj.dislikes_count


class ReviewCreateSerializer(serializers.Serializer):
    """Input for creating a review."""

    album_id = serializers.UUIDField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    title = serializers.CharField(max_length=200)
    content = serializers.CharField(max_length=5000)
    pros = _string_list()
    cons = _string_list()
    highlights = _string_list()
    lowlights = _string_list()
    tags = _string_list()


class ReviewUpdateSerializer(serializers.Serializer):
    """Input for updating a review. Album and author cannot change."""

    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    title = serializers.CharField(max_length=200, required=False)
    content = serializers.CharField(max_length=5000, required=False)
    pros = _string_list()
    cons = _string_list()
    highlights = _string_list()
    lowlights = _string_list()
    tags = _string_list()
    featured = serializers.BooleanField(required=False)
    verified = serializers.BooleanField(required=False)


class ReactionResponseSerializer(serializers.Serializer):
    review_id = serializers.UUIDField()
    likes = serializers.IntegerField()
    dislikes = serializers.IntegerField()
    liked = serializers.BooleanField()
    disliked = serializers.BooleanField()
