"""
Models package for the MyVoice974 OTP service
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Import all models here to ensure they're registered
from models.account import Account
from models.otp import OtpRecord

__all__ = [
    'db',
    'Account',
    'OtpRecord',
]
