from django.contrib import admin

from apps.albums.services import recompute_album_rating
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'title',
        'get_album_title',
        'author',
        'rating',
        'is_active',
        'featured',
        'created_at',
    ]
    list_filter = ['rating', 'is_active', 'featured', 'verified', 'created_at']
    search_fields = ['title', 'content', 'album__title', 'author__username']
    readonly_fields = ['read_time', 'created_at', 'updated_at']
    raw_id_fields = ['album', 'author']
    filter_horizontal = ['liked_by', 'disliked_by']
    ordering = ['-created_at']
    actions = ['soft_delete_reviews']

    def get_album_title(self, obj):
        return obj.album.title
    get_album_title.short_description = 'Album'
    get_album_title.admin_order_field = 'album__title'

    def get_queryset(self, request):
        """Optimize query."""
        return super().get_queryset(request).select_related('album', 'author')

    @admin.action(description='Soft delete selected reviews')
    def soft_delete_reviews(self, request, queryset):
        album_ids = set(queryset.values_list('album_id', flat=True))
        count = queryset.update(is_active=False)
        # Bulk updates bypass the review services, so re-aggregate here
        for album_id in album_ids:
            recompute_album_rating(album_id=album_id)
        self.message_user(request, f'Deactivated {count} review(s).')
