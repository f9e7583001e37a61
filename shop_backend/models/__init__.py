"""
Models Package

Exports all models for easy importing.
"""

from shop_backend.models.enums import AccountKind, AdminRole
from shop_backend.models.admin import AdminAccount
from shop_backend.models.customer import CustomerAccount

ACCOUNT_MODELS = {
    AccountKind.ADMIN: AdminAccount,
    AccountKind.CUSTOMER: CustomerAccount,
}

__all__ = ['AccountKind', 'AdminRole', 'AdminAccount', 'CustomerAccount', 'ACCOUNT_MODELS']
