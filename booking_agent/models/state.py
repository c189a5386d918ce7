"""
Booking Status Enum
"""

from enum import Enum


class BookingStatus(Enum):
    """Session statuses for the booking flow"""
    
    INITIATED = "initiated"
    RESULTS_PRESENTED = "results_presented"
    PACKAGE_SELECTED = "package_selected"
    PURL_GENERATED = "purl_generated"
    
    # Set by collaborators outside the dispatcher
    PURL_CLICKED = "purl_clicked"
    BOOKING_COMPLETED = "booking_completed"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    
    def has_selection(self) -> bool:
        """Check if a package must be selected in this status"""
        return self in (
            BookingStatus.PACKAGE_SELECTED,
            BookingStatus.PURL_GENERATED,
            BookingStatus.PURL_CLICKED,
            BookingStatus.BOOKING_COMPLETED
        )


# Reported by booking_status for unknown sessions, never stored
NOT_FOUND_STATUS = "not_found"
