"""
Admin Routes
"""

from flask import jsonify
from flask_login import current_user

from shop_backend.admin import admin_bp
from shop_backend.auth.decorators import admin_required


@admin_bp.route('/me')
@admin_required
def me():
    """Return the authenticated admin."""
    return jsonify({
        'success': True,
        'data': {'admin': current_user.to_public()},
    })
