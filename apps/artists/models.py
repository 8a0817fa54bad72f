from django.db import models
from django.core.validators import MinValueValidator
import uuid


class Genre(models.TextChoices):
    HIP_HOP = 'Hip-Hop', 'Hip-Hop'
    TRAP = 'Trap', 'Trap'
    CONSCIOUS_RAP = 'Conscious Rap', 'Conscious Rap'
    ALTERNATIVE_HIP_HOP = 'Alternative Hip-Hop', 'Alternative Hip-Hop'
    GANGSTA_RAP = 'Gangsta Rap', 'Gangsta Rap'
    BOOM_BAP = 'Boom Bap', 'Boom Bap'
    DRILL = 'Drill', 'Drill'
    MUMBLE_RAP = 'Mumble Rap', 'Mumble Rap'
    EXPERIMENTAL_HIP_HOP = 'Experimental Hip-Hop', 'Experimental Hip-Hop'
    JAZZ_RAP = 'Jazz Rap', 'Jazz Rap'
    POLITICAL_HIP_HOP = 'Political Hip-Hop', 'Political Hip-Hop'
    POP_RAP = 'Pop Rap', 'Pop Rap'
    RNB = 'R&B', 'R&B'
    SOUL = 'Soul', 'Soul'
    FUNK = 'Funk', 'Funk'
    REGGAE = 'Reggae', 'Reggae'
    AFROBEAT = 'Afrobeat', 'Afrobeat'
    GRIME = 'Grime', 'Grime'
    UK_DRILL = 'UK Drill', 'UK Drill'
    OTHER = 'Other', 'Other'


class Artist(models.Model):
    """Recording artist."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, db_index=True)
    real_name = models.CharField(max_length=100, blank=True)
    stage_name = models.CharField(max_length=100, blank=True)
    bio = models.TextField(max_length=2000, blank=True)
    image = models.CharField(max_length=500, blank=True)
    genre = models.CharField(max_length=50, choices=Genre.choices, default=Genre.HIP_HOP)
    hometown = models.CharField(max_length=100, blank=True)
    active_from = models.PositiveIntegerField(null=True, blank=True)
    active_to = models.PositiveIntegerField(null=True, blank=True)
    labels = models.JSONField(default=list, blank=True)
    social_media = models.JSONField(default=dict, blank=True)
    featured = models.BooleanField(default=False)
    verified = models.BooleanField(default=False)
    followers = models.PositiveIntegerField(default=0, validators=[MinValueValidator(0)])
    monthly_listeners = models.PositiveIntegerField(default=0, validators=[MinValueValidator(0)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'artists'
        indexes = [
            models.Index(fields=['genre'], name='artists_genre_idx'),
            models.Index(fields=['featured', 'created_at'], name='artists_featured_idx'),
            models.Index(fields=['followers'], name='artists_followers_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.stage_name or self.name

    @property
    def is_active(self):
        """Still releasing music (no end year recorded)."""
        return self.active_to is None
