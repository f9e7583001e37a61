"""
Auth Routes

JSON endpoints mounted under /api/auth.
"""

import logging

from flask import current_app, jsonify, request

from shop_backend.auth import auth_bp
from shop_backend.auth.schemas import LoginRequest, RegisterRequest, parse_body
from shop_backend.errors import ApiError, InternalFailure
from shop_backend.services import register_customer

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Unified login: admins first, then customers"""
    payload = parse_body(LoginRequest, request.get_json(silent=True))
    handler = current_app.extensions['login_handler']
    
    try:
        result = handler.login(payload.email, payload.password)
    except ApiError:
        raise
    except Exception:
        logger.exception('Unified login error')
        raise InternalFailure('Login failed')
    
    return jsonify({
        'success': True,
        'message': 'Login successful',
        'data': result.to_dict(),
    })


@auth_bp.route('/register', methods=['POST'])
def register():
    """Customer self-registration; responds with a customer token"""
    payload = parse_body(RegisterRequest, request.get_json(silent=True))
    handler = current_app.extensions['login_handler']
    
    try:
        customer = register_customer(
            current_app.extensions['credential_store'],
            current_app.extensions['password_verifier'],
            email=payload.email,
            password=payload.password,
            first_name=payload.first_name,
            last_name=payload.last_name,
            phone=payload.phone,
        )
        token = handler.issue_token(customer)
    except ApiError:
        raise
    except Exception:
        logger.exception('Registration error')
        raise InternalFailure('Registration failed')
    
    return jsonify({
        'success': True,
        'message': 'Registration successful',
        'data': {
            'customer': customer.to_public(),
            'token': token,
        },
    }), 201
