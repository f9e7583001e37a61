"""
Flask Extensions

Accounts authenticate with bearer tokens; Flask-Login only resolves the
token on each request, it never writes the user into the session.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for bearer-token authentication
login_manager = LoginManager()
