from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid

from apps.artists.models import Genre


class AlbumType(models.TextChoices):
    ALBUM = 'album', 'Album'
    MIXTAPE = 'mixtape', 'Mixtape'
    EP = 'EP', 'EP'
    SINGLE = 'single', 'Single'


class Album(models.Model):
    """
    Release by an artist.

    ``average_rating`` and ``total_reviews`` are aggregates of the album's
    active reviews and are only ever written by the rating aggregation
    service.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200, db_index=True)
    artist = models.ForeignKey('artists.Artist', on_delete=models.CASCADE, related_name='albums')
    album_type = models.CharField(max_length=20, choices=AlbumType.choices, default=AlbumType.ALBUM)
    release_date = models.DateField(null=True, blank=True)
    genre = models.CharField(max_length=50, choices=Genre.choices, default=Genre.HIP_HOP)
    cover_art = models.CharField(max_length=500, blank=True)
    description = models.TextField(max_length=2000, blank=True)
    tracklist = models.JSONField(default=list, blank=True)
    total_duration = models.PositiveIntegerField(default=0)
    label = models.CharField(max_length=100, blank=True)
    producers = models.JSONField(default=list, blank=True)
    featured = models.BooleanField(default=False)
    verified = models.BooleanField(default=False)
    streaming_links = models.JSONField(default=dict, blank=True)
    average_rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        default=Decimal('0.0'),
        validators=[MinValueValidator(Decimal('0.0')), MaxValueValidator(Decimal('5.0'))],
    )
    total_reviews = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'albums'
        indexes = [
            models.Index(fields=['artist', 'release_date'], name='albums_artist_release_idx'),
            models.Index(fields=['average_rating'], name='albums_rating_idx'),
            models.Index(fields=['release_date'], name='albums_release_idx'),
            models.Index(fields=['created_at'], name='albums_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.artist} - {self.title}"
