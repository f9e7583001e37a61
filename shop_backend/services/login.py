"""
Unified Login

One endpoint serves both staff and customers. The admin table is probed
first (including the password check) and only then the customer table.

Outcomes:
- AdminMatch: active admin, password correct
- CustomerMatch: active customer, password correct
- CustomerDisabled: customer exists but is inactive (reported as 403)
- NoMatch: everything else, reported with one generic message so the
  response never reveals whether an admin record exists
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from shop_backend.errors import AccountDisabled, InvalidCredentials
from shop_backend.models import AccountKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminMatch:
    account: object


@dataclass(frozen=True)
class CustomerMatch:
    account: object


@dataclass(frozen=True)
class CustomerDisabled:
    account: object


@dataclass(frozen=True)
class NoMatch:
    pass


@dataclass(frozen=True)
class LoginResult:
    user_type: AccountKind
    redirect_to: str
    user: dict
    token: str

    def to_dict(self):
        return {
            'userType': self.user_type.value,
            'redirectTo': self.redirect_to,
            'user': self.user,
            'token': self.token,
        }


def normalize_email(email):
    return email.strip().lower()


class UnifiedLoginHandler:
    """Authenticate an email/password pair against admins, then customers."""

    def __init__(self, store, verifier, issuer,
                 admin_ttl=timedelta(days=7), customer_ttl=timedelta(days=30),
                 admin_redirect='/admin/dashboard', customer_redirect='/portal/dashboard'):
        self.store = store
        self.verifier = verifier
        self.issuer = issuer
        self.admin_ttl = admin_ttl
        self.customer_ttl = customer_ttl
        self.admin_redirect = admin_redirect
        self.customer_redirect = customer_redirect

    def resolve(self, email, password):
        """Decide which account, if any, the credentials belong to."""
        email = normalize_email(email)

        admin = self.store.find_by_email(AccountKind.ADMIN, email)
        if admin is not None and admin.active:
            if self.verifier.verify(password, admin.password_hash):
                return AdminMatch(admin)

        customer = self.store.find_by_email(AccountKind.CUSTOMER, email)
        if customer is not None:
            if not customer.active:
                return CustomerDisabled(customer)
            if self.verifier.verify(password, customer.password_hash):
                return CustomerMatch(customer)

        return NoMatch()

    def login(self, email, password):
        """Return a LoginResult or raise AccountDisabled / InvalidCredentials."""
        outcome = self.resolve(email, password)

        if isinstance(outcome, AdminMatch):
            return self._issue(outcome.account, self.admin_redirect)
        if isinstance(outcome, CustomerMatch):
            return self._issue(outcome.account, self.customer_redirect)
        if isinstance(outcome, CustomerDisabled):
            logger.info('Login rejected: customer %s is disabled', outcome.account.id)
            raise AccountDisabled()

        logger.info('Login rejected: invalid credentials')
        raise InvalidCredentials()

    def issue_token(self, account):
        """Sign a session token for ``account`` using its kind's lifetime."""
        kind = account.account_kind
        ttl = self.admin_ttl if kind is AccountKind.ADMIN else self.customer_ttl
        claims = {'id': account.id, 'email': account.email, 'type': kind.value}
        return self.issuer.issue(claims, ttl)

    def _issue(self, account, redirect_to):
        kind = account.account_kind
        token = self.issue_token(account)
        logger.info('Login succeeded for %s %s', kind.value, account.id)
        return LoginResult(
            user_type=kind,
            redirect_to=redirect_to,
            user=account.to_public(),
            token=token,
        )
