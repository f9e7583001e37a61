"""
Auth Blueprint

Unified login for admins and customers, plus customer self-registration.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from shop_backend.auth import routes  # noqa: E402, F401
