"""
Data-access errors
Every failure the data layer reports to its callers is one of these
"""


class DataError(Exception):
    """Base class; carries the message shown to the user and an HTTP status"""
    status_code = 400
    default_message = 'Operation failed'

    def __init__(self, message=None, status_code=None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationFailed(DataError):
    status_code = 422
    default_message = 'Validation failed'

    def __init__(self, errors, message=None, status_code=None):
        self.errors = errors
        super().__init__(message, status_code)


class NotFound(DataError):
    status_code = 404
    default_message = 'Resource not found'


class Unauthorized(DataError):
    """No session (401) or a session without the admin role (403)"""
    status_code = 401
    default_message = 'Unauthorized'


class PolicyViolation(DataError):
    """The row policy refused a write that is otherwise allowed for the caller"""
    status_code = 403
    default_message = 'Operation not permitted by row policy'


class Conflict(DataError):
    """The request clashes with a row that already exists"""
    status_code = 409
    default_message = 'Conflict'
