"""
Booking Session Model
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .state import BookingStatus
from ..utils.helpers import Helpers


class BookingSession(BaseModel):
    """Server-side record of one booking conversation"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Core fields
    id: str = Field(default_factory=Helpers.generate_session_id)
    member_name: str
    member_id: Optional[str] = None

    # Requested trip
    travel_type: str
    destination: Optional[str] = None
    departure_window: Optional[str] = None
    travelers: int = 2
    budget_range: Optional[str] = None
    special_requests: Optional[str] = None

    # Links the session to an action queue bucket
    conversation_id: Optional[str] = None

    status: BookingStatus = BookingStatus.INITIATED
    selected_package_id: Optional[str] = None
    selected_package_summary: Optional[str] = None

    created_at: datetime = Field(default_factory=Helpers.utc_now)
    updated_at: datetime = Field(default_factory=Helpers.utc_now)

    def update_status(self, status: BookingStatus) -> None:
        """Update status and refresh timestamp"""
        self.status = status
        self.updated_at = Helpers.utc_now()

    def select_package(self, package_id: str, summary: str) -> None:
        """Record the selected package"""
        self.selected_package_id = package_id
        self.selected_package_summary = summary
        self.update_status(BookingStatus.PACKAGE_SELECTED)

    def clear_selection(self) -> None:
        """Drop a previous selection"""
        self.selected_package_id = None
        self.selected_package_summary = None
        self.updated_at = Helpers.utc_now()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)
