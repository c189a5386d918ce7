"""
Catalog Service - Read-only travel package inventory
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..config.catalog_config import PACKAGES
from ..models.package import TravelPackage
from ..models.tool_inputs import SearchFilters
from ..utils.formatters import Formatters

logger = logging.getLogger(__name__)


class CatalogService:
    """Static inventory queried by filter predicates"""

    def __init__(self, packages: Optional[Iterable[Dict[str, Any]]] = None):
        source = PACKAGES if packages is None else packages
        self.packages: List[TravelPackage] = [TravelPackage(**p) for p in source]
        self._by_id = {p.package_id: p for p in self.packages}

        logger.info(f"CatalogService loaded {len(self.packages)} packages")

    def all(self) -> List[TravelPackage]:
        return list(self.packages)

    def get(self, package_id: Optional[str]) -> Optional[TravelPackage]:
        if not package_id:
            return None
        return self._by_id.get(package_id)

    def query(self, filters: Optional[SearchFilters] = None) -> List[TravelPackage]:
        """
        Apply filters conjunctively

        Falls back to the whole catalog when nothing matches so the agent
        always has something to present.
        """
        filters = filters or SearchFilters()
        matches = [p for p in self.packages if self._matches(p, filters)]

        if not matches:
            logger.info("No packages matched filters, returning full catalog")
            return self.all()

        return matches

    def _matches(self, package: TravelPackage, filters: SearchFilters) -> bool:
        if filters.travel_type and package.travel_type != filters.travel_type:
            return False

        if filters.destination:
            needle = filters.destination.lower()
            if needle not in package.destination.lower() and needle not in package.name.lower():
                return False

        if filters.max_price and package.price_per_person > filters.max_price:
            return False

        if filters.cabin_class and filters.cabin_class != "any":
            if package.cabin_class != filters.cabin_class:
                return False

        return True

    @staticmethod
    def format_result(package: TravelPackage, option: int) -> Dict[str, Any]:
        """Search row for the agent and the browser"""
        return {
            "option": option,
            "packageId": package.package_id,
            "name": package.name,
            "description": package.description,
            "destination": package.destination,
            "dates": package.dates,
            "pricePerPerson": Formatters.format_price(package.price_per_person),
            "totalPrice": Formatters.format_price(package.total_price),
            "cabinClass": package.cabin_class,
            "highlights": list(package.highlights),
            "availableSlots": package.available_slots,
            "provider": package.provider
        }

    @staticmethod
    def format_summary(package: TravelPackage) -> Dict[str, Any]:
        """Short package card shown after selection"""
        return {
            "packageId": package.package_id,
            "name": package.name,
            "destination": package.destination,
            "pricePerPerson": Formatters.format_price(package.price_per_person),
            "cabinClass": package.cabin_class,
            "provider": package.provider
        }

    @staticmethod
    def format_details(package: TravelPackage) -> Dict[str, Any]:
        """Full package card for the booking overlay"""
        return {
            "name": package.name,
            "destination": package.destination,
            "dates": package.dates,
            "pricePerPerson": Formatters.format_price(package.price_per_person),
            "totalPrice": Formatters.format_price(package.total_price),
            "cabinClass": package.cabin_class,
            "provider": package.provider,
            "highlights": list(package.highlights)
        }
