"""In-memory stand-in for the ORM-backed credential store."""

import itertools

from shop_backend.services import CredentialStore


class InMemoryCredentialStore(CredentialStore):

    def __init__(self):
        self.accounts = {}
        self.lookups = []
        self._ids = itertools.count(1)

    def find_by_email(self, kind, email):
        self.lookups.append((kind, email))
        for account in self.accounts.values():
            if account.account_kind is kind and account.email.lower() == email:
                return account
        return None

    def find_by_id(self, kind, account_id):
        account = self.accounts.get((kind, account_id))
        return account

    def add(self, account):
        if account.id is None:
            account.id = next(self._ids)
        if account.active is None:
            account.active = True
        self.accounts[(account.account_kind, account.id)] = account
        return account


class BrokenCredentialStore(CredentialStore):
    """Every lookup fails, like a database that is down."""

    def find_by_email(self, kind, email):
        raise RuntimeError('database unavailable')

    def find_by_id(self, kind, account_id):
        raise RuntimeError('database unavailable')

    def add(self, account):
        raise RuntimeError('database unavailable')
