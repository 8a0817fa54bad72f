from django.db import models
from django.utils import timezone
import uuid


class NewsCategory(models.TextChoices):
    BREAKING_NEWS = 'Breaking News', 'Breaking News'
    ALBUM_RELEASES = 'Album Releases', 'Album Releases'
    ARTIST_INTERVIEWS = 'Artist Interviews', 'Artist Interviews'
    INDUSTRY_NEWS = 'Industry News', 'Industry News'
    CULTURE = 'Culture', 'Culture'
    AWARDS = 'Awards', 'Awards'
    EVENTS = 'Events', 'Events'
    TECHNOLOGY = 'Technology', 'Technology'
    POLITICS = 'Politics', 'Politics'
    SOCIAL_ISSUES = 'Social Issues', 'Social Issues'
    FASHION = 'Fashion', 'Fashion'
    SPORTS = 'Sports', 'Sports'
    OTHER = 'Other', 'Other'


class News(models.Model):
    """News article."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=220, unique=True)
    excerpt = models.CharField(max_length=300)
    content = models.TextField()
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='news_articles')
    category = models.CharField(max_length=30, choices=NewsCategory.choices, default=NewsCategory.OTHER)
    tags = models.JSONField(default=list, blank=True)
    featured_image = models.CharField(max_length=500, blank=True)
    images = models.JSONField(default=list, blank=True)
    featured = models.BooleanField(default=False)
    published = models.BooleanField(default=False)
    publish_date = models.DateTimeField(default=timezone.now)
    read_time = models.PositiveIntegerField(default=0)
    views = models.PositiveIntegerField(default=0)
    likes = models.PositiveIntegerField(default=0)
    shares = models.PositiveIntegerField(default=0)
    seo = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'news'
        verbose_name_plural = 'news'
        indexes = [
            models.Index(fields=['published', 'publish_date'], name='news_published_idx'),
            models.Index(fields=['category'], name='news_category_idx'),
        ]
        ordering = ['-publish_date']

    def __str__(self):
        return self.title
