from django.contrib import admin

from apps.accounts.admin import AccountAdmin
from apps.accounts.models import Account


class TestAccountAdmin:
    """Admin registration for accounts."""

    def test_registered(self):
        assert isinstance(admin.site._registry[Account], AccountAdmin)

    def test_digest_read_only(self):
        assert 'password' in AccountAdmin.readonly_fields

    def test_add_disabled(self):
        model_admin = AccountAdmin(Account, admin.site)

        assert model_admin.has_add_permission(request=None) is False
