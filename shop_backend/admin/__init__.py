"""
Admin Blueprint

Admin identity is carried by an admin-typed bearer token; customer tokens
are rejected even if the ids happen to collide.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from shop_backend.admin import routes  # noqa: E402, F401
