"""
URL configuration for the Beat Report API.

Every API route lives under /api/; see /api/docs/ for the generated schema.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check

urlpatterns = [
    # Health check
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication and users
    path('api/', include('apps.accounts.urls')),

    # API endpoints
    path('api/artists/', include('apps.artists.urls')),
    path('api/albums/', include('apps.albums.urls')),
    path('api/reviews/', include('apps.reviews.urls')),
    path('api/news/', include('apps.news.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
