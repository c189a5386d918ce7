from .router import create_booking_router
from .endpoints import BookingEndpoints

__all__ = ["create_booking_router", "BookingEndpoints"]
