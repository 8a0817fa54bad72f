from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'news'

router = DefaultRouter()
router.register(r'', views.NewsViewSet, basename='news')

urlpatterns = [
    # GET    /api/news/          - List articles
    # POST   /api/news/          - Create article (publishers)
    # GET    /api/news/{id}/     - Get article (counts a view)
    # PUT    /api/news/{id}/     - Update article
    # PATCH  /api/news/{id}/     - Partial update
    # DELETE /api/news/{id}/     - Delete article
    path('', include(router.urls)),
]
