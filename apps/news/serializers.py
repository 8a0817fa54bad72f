from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from .models import News


class NewsSerializer(serializers.ModelSerializer):
    """Main serializer for news articles. Slug is optional on input."""

    author = UserMinimalSerializer(read_only=True)
    slug = serializers.SlugField(max_length=220, required=False, allow_blank=True)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    images = serializers.ListField(child=serializers.CharField(max_length=500), required=False)

    class Meta:
        model = News
        fields = [
            'id',
            'title',
            'slug',
            'excerpt',
            'content',
            'author',
            'category',
            'tags',
            'featured_image',
            'images',
            'featured',
            'published',
            'publish_date',
            'read_time',
            'views',
            'likes',
            'shares',
            'seo',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'author',
            'read_time',
            'views',
            'likes',
            'shares',
            'created_at',
            'updated_at',
        ]

    def validate_seo(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("SEO must be an object.")
        if len(value.get('meta_title') or '') > 60:
            raise serializers.ValidationError("Meta title cannot be more than 60 characters.")
        if len(value.get('meta_description') or '') > 160:
            raise serializers.ValidationError("Meta description cannot be more than 160 characters.")
        return value


class NewsListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for article listings."""

    author = UserMinimalSerializer(read_only=True)

    class Meta:
        model = News
        fields = [
            'id',
            'title',
            'slug',
            'excerpt',
            'author',
            'category',
            'featured_image',
            'featured',
            'published',
            'publish_date',
            'read_time',
            'views',
        ]
