"""
Services Package

Exports all services for easy importing.
"""

from shop_backend.services.credential_store import CredentialStore, SqlAlchemyCredentialStore
from shop_backend.services.passwords import PasswordVerifier
from shop_backend.services.tokens import TokenIssuer
from shop_backend.services.login import (
    AdminMatch,
    CustomerMatch,
    CustomerDisabled,
    NoMatch,
    LoginResult,
    UnifiedLoginHandler,
    normalize_email,
)
from shop_backend.services.accounts import register_customer, seed_admin

__all__ = [
    'CredentialStore',
    'SqlAlchemyCredentialStore',
    'PasswordVerifier',
    'TokenIssuer',
    'AdminMatch',
    'CustomerMatch',
    'CustomerDisabled',
    'NoMatch',
    'LoginResult',
    'UnifiedLoginHandler',
    'normalize_email',
    'register_customer',
    'seed_admin',
]
