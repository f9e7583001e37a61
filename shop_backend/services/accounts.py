"""
Account creation: customer self-registration and admin seeding.
"""

import logging

from shop_backend.errors import EmailAlreadyRegistered
from shop_backend.models import AccountKind, AdminAccount, AdminRole, CustomerAccount
from shop_backend.services.login import normalize_email

logger = logging.getLogger(__name__)


def register_customer(store, verifier, email, password, first_name, last_name, phone):
    """Create an active customer; the email must not be registered yet."""
    email = normalize_email(email)
    if store.find_by_email(AccountKind.CUSTOMER, email) is not None:
        raise EmailAlreadyRegistered()

    customer = CustomerAccount(
        email=email,
        password_hash=verifier.hash(password),
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        active=True,
    )
    store.add(customer)
    logger.info('Registered customer %s', customer.id)
    return customer


def seed_admin(store, verifier, email, username, password, role=AdminRole.ADMIN):
    """Create an admin, or reset username/password/role and reactivate an existing one.

    Returns ``(admin, created)``.
    """
    email = normalize_email(email)
    role = AdminRole(role)
    admin = store.find_by_email(AccountKind.ADMIN, email)

    if admin is None:
        admin = AdminAccount(
            email=email,
            username=username,
            password_hash=verifier.hash(password),
            role=role.value,
            active=True,
        )
        store.add(admin)
        logger.info('Created %s account %s', role.value, admin.id)
        return admin, True

    admin.username = username
    admin.password_hash = verifier.hash(password)
    admin.role = role.value
    admin.active = True
    store.add(admin)
    logger.info('Updated %s account %s', role.value, admin.id)
    return admin, False
