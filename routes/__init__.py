"""
Routes package for the MyVoice974 OTP service
"""
# Export blueprints for registration in app.py
from routes.public import public_bp
from routes.auth import auth_bp

__all__ = [
    'public_bp',
    'auth_bp',
]
