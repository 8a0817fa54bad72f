from django.contrib import admin

from .models import Artist


@admin.register(Artist)
class ArtistAdmin(admin.ModelAdmin):
    list_display = ['name', 'stage_name', 'genre', 'hometown', 'featured', 'verified', 'followers', 'created_at']
    list_filter = ['genre', 'featured', 'verified']
    search_fields = ['name', 'stage_name', 'real_name']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']
