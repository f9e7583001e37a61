"""
Customer Portal Routes
"""

from flask import jsonify
from flask_login import current_user

from shop_backend.auth.decorators import customer_required
from shop_backend.portal import portal_bp


@portal_bp.route('/profile')
@customer_required
def profile():
    return jsonify({
        'success': True,
        'data': {'customer': current_user.to_public()},
    })
