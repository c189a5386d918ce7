"""
Config Package - Exports all configurations
"""

from .catalog_config import PACKAGES, STATUS_MESSAGES, NOT_FOUND_MESSAGE
from .settings import (
    BOOKING_SETTINGS,
    CONVERSATION_SETTINGS,
    RETELL_INBOUND_VARIABLES,
    RETELL_OUTBOUND_VARIABLES
)

__all__ = [
    "PACKAGES",
    "STATUS_MESSAGES",
    "NOT_FOUND_MESSAGE",
    "BOOKING_SETTINGS",
    "CONVERSATION_SETTINGS",
    "RETELL_INBOUND_VARIABLES",
    "RETELL_OUTBOUND_VARIABLES"
]
