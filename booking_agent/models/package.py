"""
Travel Package Model
"""

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TravelPackage(BaseModel):
    """Immutable catalog entry"""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
    
    package_id: str
    name: str
    description: str
    travel_type: str
    destination: str
    departure_date: str
    return_date: str
    price_per_person: int
    total_price: int
    currency: str = "USD"
    cabin_class: str
    highlights: List[str] = []
    available_slots: int
    provider: str
    
    @property
    def dates(self) -> str:
        return f"{self.departure_date} to {self.return_date}"
