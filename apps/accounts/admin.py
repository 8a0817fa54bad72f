from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import User
from .roles import Role

ROLE_COLORS = {
    Role.USER: '#999',
    Role.REVIEWER: '#3F7CAC',
    Role.ADMIN: '#B85C5C',
}


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for site users.

    Role changes made here bypass the API, so they are the way to bootstrap
    the first reviewers and admins.
    """

    list_display = [
        'email',
        'username',
        'role_badge',
        'is_verified',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'is_active',
        'is_verified',
        'is_staff',
        'created_at',
    ]

    search_fields = ['email', 'username', 'first_name', 'last_name']

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'username', 'first_name', 'last_name', 'password')
        }),
        ('Role', {
            'fields': ('role', 'is_verified'),
        }),
        ('Profile', {
            'fields': ('avatar', 'bio', 'social_links'),
            'classes': ('collapse',),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'username', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['created_at', 'updated_at', 'last_login']

    filter_horizontal = ['groups', 'user_permissions']

    actions = ['verify_users', 'promote_to_reviewer', 'demote_to_user']

    def role_badge(self, obj):
        """Display role as colored badge."""
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            ROLE_COLORS.get(obj.role, '#999'),
            obj.get_role_display(),
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    @admin.action(description='Mark selected users as verified')
    def verify_users(self, request, queryset):
        count = queryset.update(is_verified=True, verification_token=None)
        self.message_user(request, f'Verified {count} user(s).')

    @admin.action(description='Promote selected users to reviewer')
    def promote_to_reviewer(self, request, queryset):
        count = queryset.filter(role=Role.USER).update(role=Role.REVIEWER)
        self.message_user(request, f'Promoted {count} user(s) to reviewer.')

    @admin.action(description='Demote selected reviewers to user')
    def demote_to_user(self, request, queryset):
        # Admins are left untouched
        count = queryset.filter(role=Role.REVIEWER).update(role=Role.USER)
        self.message_user(request, f'Demoted {count} reviewer(s).')
