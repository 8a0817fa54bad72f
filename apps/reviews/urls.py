from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reviews'

router = DefaultRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # Review ViewSet routes
    # GET    /api/reviews/                - List active reviews
    # POST   /api/reviews/                - Create review
    # GET    /api/reviews/{id}/           - Get review
    # PUT    /api/reviews/{id}/           - Update review
    # PATCH  /api/reviews/{id}/           - Partial update
    # DELETE /api/reviews/{id}/           - Soft delete (?hard=true for admins)

    # Custom review actions
    # GET    /api/reviews/my_reviews/     - Get current user's reviews
    # POST   /api/reviews/{id}/like/      - Toggle like
    # POST   /api/reviews/{id}/dislike/   - Toggle dislike
    path('', include(router.urls)),
]
