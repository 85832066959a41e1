"""
Domain errors raised by services and repositories.

The API layer is the only place that turns these into HTTP responses
(see ``green_campus.main``); every class carries the status it maps to.
"""


class GreenCampusError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(GreenCampusError):
    status_code = 400
    default_message = "Invalid request"


class ConstraintViolation(ValidationError):
    default_message = "Constraint violation"


class InvalidCredentials(GreenCampusError):
    status_code = 401
    default_message = "Invalid credentials"


class InvalidToken(GreenCampusError):
    status_code = 401
    default_message = "Invalid token"


class Unauthenticated(GreenCampusError):
    status_code = 401
    default_message = "Authentication required"


class AccessDenied(GreenCampusError):
    status_code = 403
    default_message = "Access denied"


class NotFound(GreenCampusError):
    status_code = 404
    default_message = "Not found"


class DuplicateEmail(GreenCampusError):
    status_code = 409
    default_message = "Email already registered"


class InternalError(GreenCampusError):
    pass
