"""
Admin Account Model
"""

from datetime import datetime

from flask_login import UserMixin

from shop_backend.extensions import db
from shop_backend.models.enums import AccountKind, AdminRole


class AdminAccount(UserMixin, db.Model):
    """Staff account; created by the seeding command, never by self-registration"""
    __tablename__ = 'admins'
    
    account_kind = AccountKind.ADMIN
    
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    # Stored lowercased; uniqueness is therefore case-insensitive
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(32), nullable=False, default=AdminRole.ADMIN.value)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    @property
    def is_active(self):
        return bool(self.active)
    
    def to_public(self):
        """Fields safe to return to the client."""
        return {
            'id': self.id,
            'email': self.email,
            'username': self.username,
            'role': self.role,
        }
    
    def __repr__(self):
        return f'<AdminAccount {self.email}>'
