"""
Booking Errors - typed failures raised by the tool dispatcher
"""

from typing import Any, Dict


class BookingError(Exception):
    """Base class for booking tool failures"""

    status_code = 500
    error_type = "booking_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_result(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": self.message,
            "errorType": self.error_type
        }


class ValidationError(BookingError):
    """Missing or malformed required input"""

    status_code = 400
    error_type = "validation_error"


class NotFoundError(BookingError):
    """Unknown session"""

    status_code = 404
    error_type = "not_found"


class PreconditionError(BookingError):
    """Operation called out of order, e.g. a link before a selection"""

    status_code = 409
    error_type = "precondition_failed"


class InternalError(BookingError):
    """Unexpected fault converted at the dispatch boundary"""

    status_code = 500
    error_type = "internal_error"


class ConversationServiceError(Exception):
    """Outbound conversation service call failed"""

    def __init__(self, service: str, message: str, status_code: int = 502):
        super().__init__(f"{service}: {message}")
        self.service = service
        self.message = message
        self.status_code = status_code


ERROR_STATUS_CODES = {
    cls.error_type: cls.status_code
    for cls in (ValidationError, NotFoundError, PreconditionError, InternalError)
}
