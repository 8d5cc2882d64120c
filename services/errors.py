"""
Error taxonomy for the OTP flow.

Each error carries the user-facing message, the HTTP status used by the plain
JSON endpoint, and the canonical status name used by the callable endpoints.
"""

# Canonical callable status -> HTTP status
CALLABLE_HTTP_STATUS = {
    'INVALID_ARGUMENT': 400,
    'FAILED_PRECONDITION': 400,
    'NOT_FOUND': 404,
    'ALREADY_EXISTS': 409,
    'DEADLINE_EXCEEDED': 504,
    'INTERNAL': 500,
}


class OtpError(Exception):
    message = 'Internal error'
    status_code = 500
    callable_status = 'INTERNAL'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'error': self.message}

    def to_callable(self):
        return {'error': {'status': self.callable_status, 'message': self.message}}

    @property
    def callable_http_status(self):
        return CALLABLE_HTTP_STATUS[self.callable_status]


class EmailRequired(OtpError):
    message = 'Email is required'
    status_code = 400
    callable_status = 'INVALID_ARGUMENT'


class MissingFields(OtpError):
    message = 'Missing required fields.'
    status_code = 400
    callable_status = 'INVALID_ARGUMENT'


class InvalidEmail(OtpError):
    message = 'Adresse email invalide.'
    status_code = 400
    callable_status = 'INVALID_ARGUMENT'


class AccountNotFound(OtpError):
    message = 'Aucun compte trouvé avec cette adresse email.'
    status_code = 404
    callable_status = 'FAILED_PRECONDITION'


class EmailAlreadyExists(OtpError):
    message = 'Cet email est déjà utilisé.'
    status_code = 409
    callable_status = 'ALREADY_EXISTS'


class InvalidOrExpiredCode(OtpError):
    message = 'Invalid or expired OTP.'
    status_code = 404
    callable_status = 'NOT_FOUND'


class CodeExpired(OtpError):
    message = 'OTP has expired.'
    status_code = 410
    callable_status = 'DEADLINE_EXCEEDED'


class InternalError(OtpError):
    """Unhandled collaborator failure (database, SMTP, ...)."""
