"""
Delivery Service - Confirmation wording for booking link delivery

Nothing is actually sent; the message only tells the member where the link
went. Contact details are always masked.
"""

from typing import NamedTuple, Optional

from ..config.settings import BOOKING_SETTINGS
from ..errors import ValidationError
from ..utils.formatters import Formatters


class DeliveryNotice(NamedTuple):
    method: str
    message: str
    fallback: bool


class DeliveryNotifier:
    """Builds delivery confirmation messages"""

    def __init__(self, ttl_seconds: Optional[int] = None):
        self.ttl_seconds = ttl_seconds or BOOKING_SETTINGS["purl_ttl_seconds"]
        self.methods = BOOKING_SETTINGS["delivery_methods"]

    @property
    def validity(self) -> str:
        hours = self.ttl_seconds / 3600
        if hours.is_integer():
            unit = "hour" if hours == 1 else "hours"
            return f"{int(hours)} {unit}"
        minutes = self.ttl_seconds // 60
        return f"{minutes} minutes"

    def build_message(self, delivery_method: Optional[str], contact: Optional[str] = None) -> str:
        """(deliveryMethod, contact) -> message"""
        return self.resolve(
            delivery_method,
            phone=contact if delivery_method == "sms" else None,
            email=contact if delivery_method == "email" else None
        ).message

    def resolve(
        self,
        delivery_method: Optional[str],
        phone: Optional[str] = None,
        email: Optional[str] = None
    ) -> DeliveryNotice:
        method = delivery_method or BOOKING_SETTINGS["default_delivery_method"]
        if method not in self.methods:
            raise ValidationError(
                f"Unsupported deliveryMethod: {method} (expected one of {', '.join(self.methods)})"
            )

        if method == "sms":
            if Formatters.has_phone_digits(phone):
                masked = Formatters.mask_phone(phone)
                return DeliveryNotice(
                    "sms",
                    f"Text message sent to {masked}. The link is valid for {self.validity}.",
                    False
                )
            return DeliveryNotice(
                "display",
                f"Phone number needed for SMS. Displaying your booking link instead. It's valid for {self.validity}.",
                True
            )

        if method == "email":
            if Formatters.is_email(email):
                masked = Formatters.mask_email(email)
                return DeliveryNotice(
                    "email",
                    f"Email sent to {masked}. The link is valid for {self.validity}.",
                    False
                )
            return DeliveryNotice(
                "display",
                f"Email address needed. Displaying your booking link instead. It's valid for {self.validity}.",
                True
            )

        return DeliveryNotice(
            "display",
            f"Here's your personalized booking link. It's valid for {self.validity}.",
            False
        )
