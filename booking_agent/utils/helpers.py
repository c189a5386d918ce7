"""
General helper utilities
"""

import base64
import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class Helpers:
    """Helper utilities"""
    
    @staticmethod
    def generate_session_id() -> str:
        """Generate globally unique session ID"""
        return str(uuid.uuid4())
    
    @staticmethod
    def generate_search_id() -> str:
        """Generate short search reference"""
        return f"search_{uuid.uuid4().hex[:10]}"
    
    @staticmethod
    def utc_now() -> datetime:
        return datetime.now(timezone.utc)
    
    @staticmethod
    def get_timestamp(moment: Optional[datetime] = None) -> str:
        """Get timestamp in ISO format with millisecond precision"""
        moment = moment or Helpers.utc_now()
        return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    
    @staticmethod
    def get_epoch_millis() -> int:
        return int(Helpers.utc_now().timestamp() * 1000)
    
    @staticmethod
    def b64url_encode(raw: bytes) -> str:
        """URL-safe base64 without padding"""
        return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")
    
    @staticmethod
    def b64url_decode(text: str) -> bytes:
        padding = "=" * (-len(text) % 4)
        return base64.urlsafe_b64decode(text + padding)
    
    @staticmethod
    def encode_json(payload: Dict[str, Any]) -> str:
        return Helpers.b64url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
