"""
Shop Backend - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from shop_backend.extensions import db, login_manager
from shop_backend.config import Config


def create_app(config_class=Config, credential_store=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        credential_store: Account store to use instead of the ORM-backed one

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Collaborators shared by the auth routes
    from shop_backend.services import (
        PasswordVerifier,
        SqlAlchemyCredentialStore,
        TokenIssuer,
        UnifiedLoginHandler,
    )

    store = credential_store if credential_store is not None else SqlAlchemyCredentialStore(db)
    verifier = PasswordVerifier(method=app.config['PASSWORD_HASH_METHOD'])
    issuer = TokenIssuer(app.config['JWT_SECRET_KEY'], app.config['JWT_ALGORITHM'])

    app.extensions['credential_store'] = store
    app.extensions['password_verifier'] = verifier
    app.extensions['token_issuer'] = issuer
    app.extensions['login_handler'] = UnifiedLoginHandler(
        store,
        verifier,
        issuer,
        admin_ttl=app.config['ADMIN_TOKEN_TTL'],
        customer_ttl=app.config['CUSTOMER_TOKEN_TTL'],
        admin_redirect=app.config['ADMIN_REDIRECT'],
        customer_redirect=app.config['CUSTOMER_REDIRECT'],
    )

    # Register blueprints
    from shop_backend.auth import auth_bp
    from shop_backend.admin import admin_bp
    from shop_backend.portal import portal_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(portal_bp, url_prefix='/api/customer')

    from shop_backend.errors import register_error_handlers
    from shop_backend.cli import register_commands

    register_error_handlers(app)
    register_commands(app)

    # Bearer token -> account, for every request
    @login_manager.request_loader
    def load_account_from_request(request):
        import jwt
        from flask import current_app
        from shop_backend.models import AccountKind

        header = request.headers.get('Authorization', '')
        if not header.startswith('Bearer '):
            return None

        try:
            claims = current_app.extensions['token_issuer'].decode(header[7:])
            kind = AccountKind(claims['type'])
            account_id = int(claims['id'])
        except jwt.InvalidTokenError as e:
            current_app.logger.info('Rejected bearer token: %s', e)
            return None
        except (KeyError, TypeError, ValueError):
            current_app.logger.info('Rejected bearer token: malformed claims')
            return None

        return current_app.extensions['credential_store'].find_by_id(kind, account_id)

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'] == Config.SQLALCHEMY_DATABASE_URI:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()

    return app


def _configure_logging(app):
    """Attach one stream handler to the package logger."""
    logger = logging.getLogger('shop_backend')
    logger.setLevel(app.config['LOG_LEVEL'])

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(levelname)s : %(asctime)s | %(name)s | %(message)s'
        ))
        logger.addHandler(handler)
