"""
Booking Agent Module - Main Exports
"""

from .orchestrator import BookingOrchestrator
from .models.session import BookingSession
from .models.state import BookingStatus
from .models.action import ActionType, UIAction
from .api.router import create_booking_router

__version__ = "1.0.0"
__all__ = [
    "BookingOrchestrator",
    "BookingSession",
    "BookingStatus",
    "ActionType",
    "UIAction",
    "create_booking_router"
]
