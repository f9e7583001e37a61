"""
Configuration settings for the shop backend
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""
    
    # Flask secret key (CHANGE THIS IN PRODUCTION!)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'shop.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Token signing (stateless, no server-side session store)
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET') or SECRET_KEY
    JWT_ALGORITHM = 'HS256'
    ADMIN_TOKEN_TTL = timedelta(days=7)
    CUSTOMER_TOKEN_TTL = timedelta(days=30)
    
    # Post-login navigation hints for the frontend
    ADMIN_REDIRECT = '/admin/dashboard'
    CUSTOMER_REDIRECT = '/portal/dashboard'
    
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256'
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET_KEY = 'test-jwt-secret'
    # Low iteration count keeps the suite fast
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
