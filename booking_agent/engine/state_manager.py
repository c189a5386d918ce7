"""
State Manager
Handles booking status transitions and status summaries
"""

from typing import Dict, Set
import logging

from ..config.catalog_config import STATUS_MESSAGES
from ..errors import PreconditionError
from ..models.state import BookingStatus

logger = logging.getLogger(__name__)


class StateManager:
    """Manages booking status transitions with validation"""

    def __init__(self):
        """Initialize state manager with transition rules"""

        # Valid status transitions. Re-entering a status is allowed so a
        # member can search again or ask for a fresh link.
        self.transitions: Dict[BookingStatus, Set[BookingStatus]] = {
            BookingStatus.INITIATED: {
                BookingStatus.RESULTS_PRESENTED,
                BookingStatus.PACKAGE_SELECTED
            },

            BookingStatus.RESULTS_PRESENTED: {
                BookingStatus.RESULTS_PRESENTED,
                BookingStatus.PACKAGE_SELECTED
            },

            BookingStatus.PACKAGE_SELECTED: {
                BookingStatus.RESULTS_PRESENTED,
                BookingStatus.PACKAGE_SELECTED,
                BookingStatus.PURL_GENERATED
            },

            BookingStatus.PURL_GENERATED: {
                BookingStatus.RESULTS_PRESENTED,
                BookingStatus.PACKAGE_SELECTED,
                BookingStatus.PURL_GENERATED,
                BookingStatus.PURL_CLICKED,
                BookingStatus.EXPIRED,
                BookingStatus.CANCELLED
            },

            BookingStatus.PURL_CLICKED: {
                BookingStatus.BOOKING_COMPLETED,
                BookingStatus.PURL_GENERATED,
                BookingStatus.EXPIRED,
                BookingStatus.CANCELLED
            },

            BookingStatus.BOOKING_COMPLETED: set(),
            BookingStatus.EXPIRED: set(),
            BookingStatus.CANCELLED: set()
        }

    def can_transition(self, from_status: BookingStatus, to_status: BookingStatus) -> bool:
        """
        Check if transition is valid

        Args:
            from_status: Current status
            to_status: Desired next status

        Returns:
            True if transition is valid
        """
        is_valid = to_status in self.transitions.get(from_status, set())

        if not is_valid:
            logger.debug(
                f"Invalid transition: {from_status.value} -> {to_status.value}"
            )

        return is_valid

    def ensure_transition(self, from_status: BookingStatus, to_status: BookingStatus) -> None:
        """Raise PreconditionError if the transition is not allowed"""
        if not self.can_transition(from_status, to_status):
            raise PreconditionError(
                f"Cannot move booking from {from_status.value} to {to_status.value}"
            )

    def get_status_message(self, status: BookingStatus) -> str:
        return STATUS_MESSAGES.get(status.value, f"Current status: {status.value}")
