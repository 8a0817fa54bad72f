from django.contrib import admin

from .models import News


@admin.register(News)
class NewsAdmin(admin.ModelAdmin):
    list_display = ['title', 'category', 'author', 'published', 'featured', 'publish_date', 'views']
    list_filter = ['category', 'published', 'featured']
    search_fields = ['title', 'excerpt', 'slug']
    readonly_fields = ['read_time', 'views', 'likes', 'shares', 'created_at', 'updated_at']
    raw_id_fields = ['author']
    date_hierarchy = 'publish_date'
    actions = ['publish', 'unpublish']

    @admin.action(description='Publish selected articles')
    def publish(self, request, queryset):
        count = queryset.update(published=True)
        self.message_user(request, f'Published {count} article(s).')

    @admin.action(description='Unpublish selected articles')
    def unpublish(self, request, queryset):
        count = queryset.update(published=False)
        self.message_user(request, f'Unpublished {count} article(s).')
