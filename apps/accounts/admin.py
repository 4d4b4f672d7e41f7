# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """
    Operator view of accounts.

    The password digest is shown read-only and accounts cannot be added
    here, since creation has to go through the account service checks.
    """

    list_display = [
        'email',
        'nickname',
        'created_at',
        'updated_at',
    ]

    search_fields = [
        'email',
        'nickname',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'nickname')
        }),
        ('Credentials', {
            'fields': ('password',),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    readonly_fields = [
        'password',
        'created_at',
        'updated_at',
    ]

    def has_add_permission(self, request):
        return False
