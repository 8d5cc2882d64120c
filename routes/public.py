"""
Public routes: service info and health check
"""
from datetime import datetime

from flask import Blueprint, jsonify

public_bp = Blueprint('public', __name__)


@public_bp.route('/')
def root():
    """Basic API information"""
    return jsonify({
        "message": "MyVoice974 OTP API",
        "status": "active",
        "endpoints": {
            "health": "/ping",
            "send_otp": "/sendOtp",
            "send_otp_callable": "/sendOtpCallable",
            "verify_otp_and_reset": "/verifyOtpAndReset",
        },
    })


@public_bp.route('/ping')
def ping():
    """Health check endpoint"""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "service": "myvoice974-otp",
    })
