"""
Credential Store

Read/write access to admin and customer accounts. Handlers receive a store
instance instead of reaching for the ORM directly, so tests can hand in an
in-memory replacement.
"""

from sqlalchemy import func, select

from shop_backend.models import ACCOUNT_MODELS


class CredentialStore:
    """Interface every account store implements."""

    def find_by_email(self, kind, email):
        """Return the account of ``kind`` whose email matches, or None.

        ``email`` is expected to be normalized already (trimmed, lowercase).
        """
        raise NotImplementedError

    def find_by_id(self, kind, account_id):
        raise NotImplementedError

    def add(self, account):
        """Persist a new account and return it with its id assigned."""
        raise NotImplementedError


class SqlAlchemyCredentialStore(CredentialStore):
    """Store backed by the Flask-SQLAlchemy session of the current app."""

    def __init__(self, db):
        self.db = db

    def find_by_email(self, kind, email):
        model = ACCOUNT_MODELS[kind]
        stmt = select(model).where(func.lower(model.email) == email)
        return self.db.session.execute(stmt).scalar_one_or_none()

    def find_by_id(self, kind, account_id):
        return self.db.session.get(ACCOUNT_MODELS[kind], account_id)

    def add(self, account):
        self.db.session.add(account)
        try:
            self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            raise
        return account
