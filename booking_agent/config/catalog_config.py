"""
Mock inventory and booking status definitions
"""

# Bookable packages (read-only, loaded once)
PACKAGES = [
    {
        "packageId": "pkg_cruise_carib_001",
        "name": "7-Night Western Caribbean Cruise",
        "description": "Depart from Miami with stops in Cozumel, Grand Cayman, and Jamaica. All meals included.",
        "travelType": "cruise",
        "destination": "Western Caribbean",
        "departureDate": "2026-04-15",
        "returnDate": "2026-04-22",
        "pricePerPerson": 1299,
        "totalPrice": 2598,
        "currency": "USD",
        "cabinClass": "ocean_view",
        "highlights": ["Ocean view cabin", "All meals included", "2 shore excursions", "Complimentary spa credit"],
        "availableSlots": 12,
        "provider": "Royal Caribbean",
    },
    {
        "packageId": "pkg_cruise_carib_002",
        "name": "10-Night Eastern Caribbean Cruise",
        "description": "Roundtrip from Fort Lauderdale visiting St. Thomas, St. Maarten, and the Bahamas.",
        "travelType": "cruise",
        "destination": "Eastern Caribbean",
        "departureDate": "2026-04-20",
        "returnDate": "2026-04-30",
        "pricePerPerson": 1899,
        "totalPrice": 3798,
        "currency": "USD",
        "cabinClass": "balcony",
        "highlights": ["Private balcony cabin", "Beverage package included", "3 shore excursions", "Priority boarding"],
        "availableSlots": 5,
        "provider": "Celebrity Cruises",
    },
    {
        "packageId": "pkg_cruise_alaska_001",
        "name": "7-Night Alaska Inside Passage",
        "description": "Sail from Seattle through Juneau, Skagway, and Ketchikan with glacier viewing.",
        "travelType": "cruise",
        "destination": "Alaska",
        "departureDate": "2026-06-10",
        "returnDate": "2026-06-17",
        "pricePerPerson": 1599,
        "totalPrice": 3198,
        "currency": "USD",
        "cabinClass": "balcony",
        "highlights": ["Glacier viewing", "Balcony cabin", "Wildlife excursion", "All meals included"],
        "availableSlots": 8,
        "provider": "Holland America",
    },
]

# Human-readable summaries per session status
STATUS_MESSAGES = {
    "initiated": "Booking session is active. Ready to search for packages.",
    "results_presented": "Search results are available for review.",
    "package_selected": "Package is selected. Ready to generate a booking link.",
    "purl_generated": "Personalized booking link has been created and sent.",
    "purl_clicked": "Member opened the booking link.",
    "booking_completed": "Booking confirmed.",
    "expired": "Session expired.",
    "cancelled": "Session cancelled.",
}

NOT_FOUND_MESSAGE = "No active booking session found. Would you like to start a new booking?"
