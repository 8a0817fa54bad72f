from django.contrib import admin

from .models import Album
from .services import recompute_album_rating


@admin.register(Album)
class AlbumAdmin(admin.ModelAdmin):
    list_display = ['title', 'artist', 'album_type', 'release_date', 'average_rating', 'total_reviews', 'featured']
    list_filter = ['album_type', 'genre', 'featured', 'verified']
    search_fields = ['title', 'artist__name', 'label']
    readonly_fields = ['average_rating', 'total_reviews', 'total_duration', 'created_at', 'updated_at']
    raw_id_fields = ['artist']
    date_hierarchy = 'release_date'
    actions = ['recompute_ratings']

    @admin.action(description='Recompute ratings from active reviews')
    def recompute_ratings(self, request, queryset):
        for album_id in queryset.values_list('id', flat=True):
            recompute_album_rating(album_id=album_id)
        self.message_user(request, f'Recomputed {queryset.count()} album(s).')
