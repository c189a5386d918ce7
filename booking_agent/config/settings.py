"""
Booking and conversation configuration settings
"""

# Booking settings
BOOKING_SETTINGS = {
    "purl_ttl_seconds": 7200,
    "default_travelers": 2,
    "default_delivery_method": "display",
    "delivery_methods": ["display", "sms", "email"],
    "signature_prefix": "demo",
    "fallback_message": "I had a small technical issue. Let me try again.",
}

# Outbound conversation service settings
CONVERSATION_SETTINGS = {
    "request_timeout": 15,
    "max_call_duration": 1200,
    "enable_recording": True,
    "enable_transcription": True,
    "language": "english",
}

# Dynamic variables passed to the Retell agents
RETELL_INBOUND_VARIABLES = {
    "member_name": "Demo User",
    "member_id": "USAA-DEMO-001",
    "member_tier": "Gold",
    "certificates_held": "1 Free 7-Night Caribbean Cruise Certificate",
    "last_booking": "None",
}

RETELL_OUTBOUND_VARIABLES = {
    "member_name": "Demo User",
    "member_id": "USAA-DEMO-001",
    "member_tier": "Gold",
    "certificate_type": "Free 7-Night Caribbean Cruise",
    "certificate_expiry": "April 30th, 2026",
    "certificate_value": "$2,400",
    "certificate_description": "7-night Caribbean cruise for two",
}
