"""
Password reset routes: send OTP by email, verify OTP and set a new password.

/sendOtp is a plain JSON endpoint (GET query or POST body). /sendOtpCallable
and /verifyOtpAndReset speak the callable protocol: the request body is
{"data": {...}} and the response is {"result": {...}} or
{"error": {"status": ..., "message": ...}}.
"""
from flask import Blueprint, current_app, jsonify, request

from models import db
from services.errors import InternalError, OtpError

auth_bp = Blueprint('auth', __name__)

INTERNAL_ERROR_PREFIX = "Erreur interne du serveur: "


def _otp_service():
    return current_app.extensions['otp_service']


def _callable_data():
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return {}
    data = payload.get('data', payload)
    return data if isinstance(data, dict) else {}


def _callable_error(e):
    if not isinstance(e, OtpError):
        current_app.logger.error(f"Unexpected error in {request.path}: {str(e)}", exc_info=True)
        db.session.rollback()
        e = InternalError(INTERNAL_ERROR_PREFIX + str(e))
    return jsonify(e.to_callable()), e.callable_http_status


@auth_bp.after_request
def allow_any_origin(response):
    response.headers['Access-Control-Allow-Origin'] = '*'
    return response


@auth_bp.route('/sendOtp', methods=['GET', 'POST', 'OPTIONS'])
def send_otp():
    """Send a reset code to the email if an account exists for it."""
    if request.method == 'OPTIONS':
        response = current_app.response_class(status=204)
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        return response

    if request.method == 'POST':
        data = request.get_json(silent=True) or request.form
    else:
        data = request.args
    if not hasattr(data, 'get'):
        data = {}
    email = data.get('email') or ''

    try:
        result = _otp_service().issue_otp(email)
        return jsonify(result), 200
    except OtpError as e:
        current_app.logger.info(f"sendOtp rejected for {email!r}: {e.message}")
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        current_app.logger.error(f"Error in sendOtp: {str(e)}", exc_info=True)
        db.session.rollback()
        return jsonify({'error': str(e) or 'Internal error'}), 500


@auth_bp.route('/sendOtpCallable', methods=['POST'])
def send_otp_callable():
    data = _callable_data()
    try:
        result = _otp_service().issue_otp(data.get('email'))
    except Exception as e:
        return _callable_error(e)
    return jsonify({'result': result})


@auth_bp.route('/verifyOtpAndReset', methods=['POST'])
def verify_otp_and_reset():
    """Verify the emailed code and replace the account password."""
    data = _callable_data()
    try:
        result = _otp_service().verify_otp_and_reset(
            data.get('email'),
            data.get('otp'),
            data.get('newPassword'),
        )
    except Exception as e:
        return _callable_error(e)
    return jsonify({'result': result})
