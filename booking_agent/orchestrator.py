# booking_agent/orchestrator.py
"""
Booking Orchestrator - process-scoped state container

One instance is created at service start and shared by every request. It
owns the session store, the action queue and the dispatcher; tests build a
fresh one per test.
"""

import logging
from typing import Any, Dict, List, Optional

from config import PURL_BASE_URL
from .config.settings import BOOKING_SETTINGS
from .engine.dispatcher import ToolDispatcher, ToolResult
from .engine.state_manager import StateManager
from .errors import BookingError, InternalError
from .services.action_queue import ActionQueue
from .services.catalog_service import CatalogService
from .services.delivery_service import DeliveryNotifier
from .services.purl_service import PurlBuilder
from .services.session_service import SessionService

logger = logging.getLogger(__name__)


class BookingOrchestrator:
    """Entry point for tool invocations and browser polling"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.settings = {**BOOKING_SETTINGS, **self.config}

        # Core services
        self.session_service = SessionService()
        self.action_queue = ActionQueue()
        self.catalog = CatalogService(self.config.get("packages"))
        self.notifier = DeliveryNotifier(self.settings["purl_ttl_seconds"])
        self.purl_builder = PurlBuilder(
            self.config.get("purl_base_url", PURL_BASE_URL),
            self.settings["purl_ttl_seconds"]
        )
        self.dispatcher = ToolDispatcher(
            self.session_service,
            self.action_queue,
            self.catalog,
            self.notifier,
            self.purl_builder,
            StateManager()
        )

        logger.info("✅ BookingOrchestrator initialized")

    def invoke(
        self,
        tool_name: str,
        tool_input: Optional[Dict[str, Any]] = None,
        conversation_id: Optional[str] = None,
        tool_call_id: Optional[str] = None
    ) -> ToolResult:
        """
        Run a booking tool and always return a structured result

        Typed booking errors come back as ``success: False`` with an
        ``errorType``; anything unexpected becomes an ``internal_error``
        result carrying the original text and a spoken fallback line.
        """
        logger.info(f"Tool call: {tool_name} | call_id: {tool_call_id} | conversation: {conversation_id}")

        try:
            result = self.dispatcher.dispatch(tool_name, tool_input, conversation_id)
        except BookingError as e:
            logger.warning(f"{tool_name} rejected: {e.error_type}: {e.message}")
            result = e.to_result()
        except Exception as e:
            logger.error(f"{tool_name} error: {e}", exc_info=True)
            result = InternalError(str(e)).to_result()
            result["fallback"] = self.settings["fallback_message"]

        logger.info(f"{tool_name} completed | success: {result.get('success')}")
        return result

    def poll(self, conversation_id: str) -> List[Dict[str, Any]]:
        """Drain queued UI actions for a conversation"""
        return [action.to_dict() for action in self.action_queue.drain_all(conversation_id)]

    def get_stats(self) -> Dict[str, Any]:
        return {
            "sessions": self.session_service.get_stats(),
            "actions": self.action_queue.get_stats(),
            "catalog_size": len(self.catalog.packages),
            "tools": self.dispatcher.tool_names
        }
