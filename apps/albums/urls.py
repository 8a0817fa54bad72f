from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'albums'

router = DefaultRouter()
router.register(r'', views.AlbumViewSet, basename='album')

urlpatterns = [
    # GET    /api/albums/                        - List albums
    # POST   /api/albums/                        - Create album (catalog managers)
    # GET    /api/albums/{id}/                   - Get album
    # PUT    /api/albums/{id}/                   - Update album
    # PATCH  /api/albums/{id}/                   - Partial update
    # DELETE /api/albums/{id}/                   - Delete album (admin)
    # GET    /api/albums/{id}/reviews/summary/   - Rating distribution
    # GET    /api/albums/spotify/search/?q=      - Spotify track search
    # GET    /api/albums/spotify/tracks/{id}/    - Spotify track lookup
    path('', include(router.urls)),
]
