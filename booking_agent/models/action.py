"""
UI Action Model
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field

from ..utils.helpers import Helpers


class ActionType(str, Enum):
    """UI events delivered to the polling browser"""
    
    BOOKING_STARTED = "booking_started"
    SEARCH_RESULTS = "search_results"
    PACKAGE_SELECTED = "package_selected"
    PURL_READY = "purl_ready"


class UIAction(BaseModel):
    """Queued UI event"""
    
    type: ActionType
    data: Dict[str, Any] = Field(default_factory=dict)
    timestamp: int = Field(default_factory=Helpers.get_epoch_millis)
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the polling response"""
        return self.model_dump(mode="json")
