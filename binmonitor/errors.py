"""
API Errors

Every failure an action can report. Each error renders the same
``{success: false, message}`` envelope; ``status_code`` is only a secondary
signal for the client, the ``success`` flag is authoritative.
"""


class ApiError(Exception):
    """Base class for errors converted into a failure envelope."""
    status_code = 200
    message = 'Request failed.'
    
    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)
    
    def to_envelope(self):
        return {'success': False, 'message': self.message}


class ValidationError(ApiError):
    """Missing, malformed or disallowed input."""
    message = 'Invalid request.'


class NotFoundError(ApiError):
    """Referenced entity is absent or in the wrong state."""
    message = 'Not found.'


class StoreOperationError(ApiError):
    """A store read or write failed (constraint violation, etc.)."""
    message = 'Database operation failed.'


class StoreConnectionError(ApiError):
    """The store could not be reached. Details are logged, never returned."""
    status_code = 500
    message = 'Database connection error.'


class UnknownActionError(ApiError):
    status_code = 400
    message = 'Invalid action specified.'
