class APIError(Exception):
    """Base class for errors rendered as ``{"message": ...}`` responses"""

    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'message': self.message}


class BadRequest(APIError):
    status_code = 400
    message = 'Bad request'


class Unauthorized(APIError):
    status_code = 401
    message = 'Invalid credentials'


class Forbidden(APIError):
    status_code = 403
    message = 'Invalid or expired token'


class NotFound(APIError):
    status_code = 404
    message = 'Document not found'


class Conflict(APIError):
    status_code = 409
    message = 'User already exists'


class UnsupportedType(APIError):
    status_code = 415
    message = 'Invalid file type'
