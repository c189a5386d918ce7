"""
Services Package - Exports all service classes
"""

from .session_service import SessionService
from .action_queue import ActionQueue
from .catalog_service import CatalogService
from .delivery_service import DeliveryNotifier, DeliveryNotice
from .purl_service import PurlBuilder, PurlResult
from .conversation_service import TavusService, RetellService

__all__ = [
    "SessionService",
    "ActionQueue",
    "CatalogService",
    "DeliveryNotifier",
    "DeliveryNotice",
    "PurlBuilder",
    "PurlResult",
    "TavusService",
    "RetellService"
]
