"""
Tool Input Models - one per booking tool
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ToolInput(BaseModel):
    """Base for loosely-typed camelCase tool payloads"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        extra="ignore"
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        # Agents send "" for fields they don't know
        if isinstance(v, str) and not v.strip():
            return None
        return v


class InitiateBookingInput(ToolInput):
    member_name: str
    travel_type: str
    member_id: Optional[str] = None
    destination: Optional[str] = None
    departure_window: Optional[str] = None
    travelers: Optional[int] = Field(default=None, ge=1)
    budget_range: Optional[str] = None
    special_requests: Optional[str] = None

    @field_validator("travelers", mode="before")
    @classmethod
    def falsy_travelers_use_default(cls, v: Any) -> Any:
        return v or None


class SearchFilters(ToolInput):
    destination: Optional[str] = None
    max_price: Optional[float] = Field(default=None, ge=0)
    cabin_class: Optional[str] = None
    travel_type: Optional[str] = None


class SearchInventoryInput(ToolInput):
    session_id: str
    filters: SearchFilters = Field(default_factory=SearchFilters)

    @field_validator("filters", mode="before")
    @classmethod
    def default_filters(cls, v: Any) -> Any:
        return v or {}


class SelectPackageInput(ToolInput):
    session_id: str
    package_id: str
    member_confirmed: bool = False
    package_summary: Optional[str] = None

    @field_validator("member_confirmed", mode="before")
    @classmethod
    def missing_is_unconfirmed(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return False
        return v


class GeneratePurlInput(ToolInput):
    session_id: str
    delivery_method: Optional[str] = None
    member_phone: Optional[str] = None
    member_email: Optional[str] = None

    @field_validator("delivery_method")
    @classmethod
    def normalize_method(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v


class BookingStatusInput(ToolInput):
    session_id: Optional[str] = None
