"""Unit tests for DeliveryNotifier and contact masking."""

import pytest

from booking_agent.errors import ValidationError
from booking_agent.services.delivery_service import DeliveryNotifier
from booking_agent.utils.formatters import Formatters


class TestMasking:
    def test_mask_phone_keeps_last_four_digits(self):
        assert Formatters.mask_phone("5551234567") == "***4567"
        assert Formatters.mask_phone("+1 (555) 123-4567") == "***4567"

    def test_mask_email_keeps_first_char_and_domain(self):
        assert Formatters.mask_email("ana.lopez@example.com") == "a***@example.com"

    def test_mask_empty(self):
        assert Formatters.mask_phone(None) == ""
        assert Formatters.mask_email("not-an-email") == ""


class TestResolve:
    def test_default_is_display(self):
        notice = DeliveryNotifier().resolve(None)

        assert notice.method == "display"
        assert notice.fallback is False
        assert "valid for 2 hours" in notice.message

    def test_sms_with_phone(self):
        notice = DeliveryNotifier().resolve("sms", phone="5551234567")

        assert notice.method == "sms"
        assert "***4567" in notice.message
        assert "5551234567" not in notice.message

    def test_sms_without_phone_falls_back_to_display(self):
        notice = DeliveryNotifier().resolve("sms")

        assert notice.method == "display"
        assert notice.fallback is True
        assert "Phone number needed" in notice.message

    def test_email_with_address(self):
        notice = DeliveryNotifier().resolve("email", email="ana@example.com")

        assert notice.method == "email"
        assert "a***@example.com" in notice.message
        assert "ana@example.com" not in notice.message

    def test_email_without_address_falls_back(self):
        notice = DeliveryNotifier().resolve("email", email="")

        assert notice.method == "display"
        assert notice.fallback is True
        assert "Email address needed" in notice.message

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError):
            DeliveryNotifier().resolve("pigeon")

    def test_build_message_uses_contact_for_channel(self):
        notifier = DeliveryNotifier()

        assert "***4567" in notifier.build_message("sms", "5551234567")
        assert "a***@example.com" in notifier.build_message("email", "ana@example.com")

    def test_validity_follows_ttl(self):
        assert "valid for 1 hour." in DeliveryNotifier(ttl_seconds=3600).resolve("display").message
        assert "valid for 90 minutes." in DeliveryNotifier(ttl_seconds=5400).resolve("display").message
