"""
Customer Account Model
"""

from datetime import datetime

from flask_login import UserMixin

from shop_backend.extensions import db
from shop_backend.models.enums import AccountKind


class CustomerAccount(UserMixin, db.Model):
    """Self-registered portal customer"""
    __tablename__ = 'customers'
    
    account_kind = AccountKind.CUSTOMER
    
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(32), nullable=False)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    @property
    def is_active(self):
        return bool(self.active)
    
    def to_public(self):
        return {
            'id': self.id,
            'email': self.email,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'phone': self.phone,
        }
    
    def __repr__(self):
        return f'<CustomerAccount {self.email}>'
