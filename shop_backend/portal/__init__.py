"""
Customer Portal Blueprint
"""

from flask import Blueprint

portal_bp = Blueprint('portal', __name__)

from shop_backend.portal import routes  # noqa: E402, F401
