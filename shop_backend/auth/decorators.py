"""
Token Guards

Routes are protected by the bearer token resolved through Flask-Login's
request loader. The token's ``type`` claim decides which table the account
is loaded from, so an admin token never unlocks a customer route.
"""

from functools import wraps

from flask_login import current_user

from shop_backend.errors import AuthenticationRequired, Forbidden
from shop_backend.models import AccountKind


def account_required(kind):
    """Build a decorator that admits only active accounts of ``kind``."""
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            # UserMixin ties is_authenticated to is_active, so test for anonymity
            if current_user.is_anonymous:
                raise AuthenticationRequired()
            if current_user.account_kind is not kind:
                raise Forbidden('Invalid token type')
            if not current_user.is_active:
                raise Forbidden('Account is disabled')
            return f(*args, **kwargs)
        return wrapper
    return decorator


admin_required = account_required(AccountKind.ADMIN)
customer_required = account_required(AccountKind.CUSTOMER)
