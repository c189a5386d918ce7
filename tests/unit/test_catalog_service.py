"""Unit tests for CatalogService filtering and formatting."""

from booking_agent.models.tool_inputs import SearchFilters
from booking_agent.services.catalog_service import CatalogService


def _ids(packages):
    return [p.package_id for p in packages]


class TestQuery:
    def test_no_filters_returns_all(self):
        catalog = CatalogService()

        assert len(catalog.query()) == 3

    def test_destination_matches_destination_case_insensitively(self):
        catalog = CatalogService()

        result = catalog.query(SearchFilters(destination="CARIBBEAN"))

        assert _ids(result) == ["pkg_cruise_carib_001", "pkg_cruise_carib_002"]

    def test_destination_matches_package_name(self):
        catalog = CatalogService()

        result = catalog.query(SearchFilters(destination="inside passage"))

        assert _ids(result) == ["pkg_cruise_alaska_001"]

    def test_filters_are_conjunctive(self):
        catalog = CatalogService()

        result = catalog.query(SearchFilters(destination="caribbean", max_price=1500))

        assert _ids(result) == ["pkg_cruise_carib_001"]

    def test_cabin_class_any_is_ignored(self):
        catalog = CatalogService()

        assert len(catalog.query(SearchFilters(cabin_class="any"))) == 3

    def test_cabin_class_exact_match(self):
        catalog = CatalogService()

        result = catalog.query(SearchFilters(cabin_class="balcony"))

        assert _ids(result) == ["pkg_cruise_carib_002", "pkg_cruise_alaska_001"]

    def test_travel_type_exact_match(self):
        catalog = CatalogService(
            [
                {**CatalogService().get("pkg_cruise_carib_001").model_dump(by_alias=True)},
                {
                    **CatalogService().get("pkg_cruise_alaska_001").model_dump(by_alias=True),
                    "packageId": "pkg_tour_alaska_001",
                    "travelType": "tour",
                },
            ]
        )

        result = catalog.query(SearchFilters(travel_type="tour"))

        assert _ids(result) == ["pkg_tour_alaska_001"]

    def test_zero_matches_falls_back_to_full_catalog(self):
        catalog = CatalogService()

        result = catalog.query(SearchFilters(destination="Antarctica"))

        assert len(result) == len(catalog.all()) == 3

    def test_price_ceiling_below_everything_falls_back(self):
        catalog = CatalogService()

        assert len(catalog.query(SearchFilters(max_price=100))) == 3


class TestLookupAndFormatting:
    def test_get(self):
        catalog = CatalogService()

        assert catalog.get("pkg_cruise_alaska_001").provider == "Holland America"
        assert catalog.get("pkg_unknown") is None
        assert catalog.get(None) is None

    def test_format_result(self):
        catalog = CatalogService()
        row = CatalogService.format_result(catalog.get("pkg_cruise_carib_001"), 1)

        assert row["option"] == 1
        assert row["dates"] == "2026-04-15 to 2026-04-22"
        assert row["pricePerPerson"] == "$1,299"
        assert row["totalPrice"] == "$2,598"
        assert row["highlights"][0] == "Ocean view cabin"
