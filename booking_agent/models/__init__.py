"""
Models Package - Exports all model classes
"""

from .state import BookingStatus, NOT_FOUND_STATUS
from .package import TravelPackage
from .session import BookingSession
from .action import ActionType, UIAction
from .tool_inputs import (
    InitiateBookingInput,
    SearchFilters,
    SearchInventoryInput,
    SelectPackageInput,
    GeneratePurlInput,
    BookingStatusInput
)
from .api_models import (
    ToolRunRequest,
    ToolCallRequest,
    ToolCallResponse,
    PollResponse,
    ConversationRequest
)

__all__ = [
    "BookingStatus",
    "NOT_FOUND_STATUS",
    "TravelPackage",
    "BookingSession",
    "ActionType",
    "UIAction",
    "InitiateBookingInput",
    "SearchFilters",
    "SearchInventoryInput",
    "SelectPackageInput",
    "GeneratePurlInput",
    "BookingStatusInput",
    "ToolRunRequest",
    "ToolCallRequest",
    "ToolCallResponse",
    "PollResponse",
    "ConversationRequest"
]
