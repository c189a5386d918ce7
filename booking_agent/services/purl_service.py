"""
PURL Service - Personalized booking links

The token is ``<base64url(claims)>.<placeholder>``. The second segment is a
random stub, NOT a signature: nothing verifies it and the link must never be
treated as an authentication token. Swapping in real signing means replacing
``_placeholder_signature``.
"""

import json
import logging
import secrets
from datetime import datetime, timezone
from typing import Any, Dict, NamedTuple, Optional

from ..config.settings import BOOKING_SETTINGS
from ..models.session import BookingSession
from ..utils.helpers import Helpers

logger = logging.getLogger(__name__)


class PurlResult(NamedTuple):
    purl: str
    token: str
    claims: Dict[str, Any]
    expires_at: datetime


class PurlBuilder:
    """Encodes session claims into a booking link"""

    def __init__(self, base_url: str, ttl_seconds: Optional[int] = None):
        self.base_url = base_url.rstrip("/")
        self.ttl_seconds = ttl_seconds or BOOKING_SETTINGS["purl_ttl_seconds"]

    def build(self, session: BookingSession, now: Optional[datetime] = None) -> PurlResult:
        issued = now or Helpers.utc_now()
        iat = int(issued.timestamp())
        exp = iat + self.ttl_seconds

        claims = {
            "sid": session.id,
            "mn": session.member_name,
            "mid": session.member_id,
            "pkg": session.selected_package_id,
            "tt": session.travel_type,
            "dst": session.destination,
            "pax": session.travelers,
            "iat": iat,
            "exp": exp
        }

        token = f"{Helpers.encode_json(claims)}.{self._placeholder_signature()}"
        purl = f"{self.base_url}/b/{token}"

        logger.info(f"Built booking link for session {session.id} (pkg={session.selected_package_id})")

        return PurlResult(
            purl=purl,
            token=token,
            claims=claims,
            expires_at=datetime.fromtimestamp(exp, timezone.utc)
        )

    @staticmethod
    def decode_claims(token: str) -> Dict[str, Any]:
        """Read the claims half of a token (no verification)"""
        payload, _, _ = token.partition(".")
        return json.loads(Helpers.b64url_decode(payload))

    @staticmethod
    def _placeholder_signature() -> str:
        # Stub only, see module docstring
        prefix = BOOKING_SETTINGS["signature_prefix"]
        return Helpers.b64url_encode(f"{prefix}_{secrets.token_hex(8)}".encode("ascii"))
