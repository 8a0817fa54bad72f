from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from . import views

app_name = 'accounts'

router = DefaultRouter()
router.register(r'users', views.UserViewSet, basename='user')

urlpatterns = [
    # Authentication
    path('auth/register/', views.register, name='register'),
    path('auth/login/', views.login, name='login'),
    path('auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('auth/me/', views.current_user, name='current-user'),
    path('auth/password/', views.password_change, name='password-change'),
    path('auth/password-reset/', views.password_reset_request, name='password-reset'),
    path('auth/password-reset/confirm/', views.password_reset_confirm, name='password-reset-confirm'),
    path('auth/verify-email/', views.email_verify, name='verify-email'),

    # User administration
    # GET    /api/users/        - List users (admin)
    # GET    /api/users/{id}/   - Get user
    # PATCH  /api/users/{id}/   - Update user (self or admin)
    # DELETE /api/users/{id}/   - Delete user (admin)
    path('', include(router.urls)),
]
