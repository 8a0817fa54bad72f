from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class Review(models.Model):
    """
    A user's review of an album.

    Reviews are soft-deleted (``is_active=False``) so album aggregates can be
    recomputed from the remaining active set. Likes and dislikes are sets of
    users; their counts are derived.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    album = models.ForeignKey('albums.Album', on_delete=models.CASCADE, related_name='reviews')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    title = models.CharField(max_length=200)
    content = models.TextField(max_length=5000)
    pros = models.JSONField(default=list, blank=True)
    cons = models.JSONField(default=list, blank=True)
    highlights = models.JSONField(default=list, blank=True)
    lowlights = models.JSONField(default=list, blank=True)
    tags = models.JSONField(default=list, blank=True)
    featured = models.BooleanField(default=False)
    verified = models.BooleanField(default=False)
    liked_by = models.ManyToManyField('accounts.User', blank=True, related_name='liked_reviews')
    disliked_by = models.ManyToManyField('accounts.User', blank=True, related_name='disliked_reviews')
    read_time = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        constraints = [
            models.UniqueConstraint(
                fields=['album', 'author'],
                condition=models.Q(is_active=True),
                name='unique_active_review_per_album_author',
            ),
        ]
        indexes = [
            models.Index(fields=['album', 'is_active'], name='reviews_album_active_idx'),
            models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
            models.Index(fields=['rating'], name='reviews_rating_idx'),
            models.Index(fields=['created_at'], name='reviews_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.author} - {self.album.title} ({self.rating}★)"

    @property
    def likes_count(self):
        return self.liked_by.count()

    @property
    def dislikes_count(self):
        return self.disliked_by.count()
