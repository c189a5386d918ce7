# booking_agent/engine/dispatcher.py
"""
Tool Dispatcher
Routes booking tool calls to state transitions on the session store
"""

import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from .state_manager import StateManager
from ..config.catalog_config import NOT_FOUND_MESSAGE
from ..config.settings import BOOKING_SETTINGS
from ..errors import NotFoundError, PreconditionError, ValidationError
from ..models.action import ActionType
from ..models.session import BookingSession
from ..models.state import BookingStatus, NOT_FOUND_STATUS
from ..models.tool_inputs import (
    ToolInput,
    InitiateBookingInput,
    SearchInventoryInput,
    SelectPackageInput,
    GeneratePurlInput,
    BookingStatusInput
)
from ..services.action_queue import ActionQueue
from ..services.catalog_service import CatalogService
from ..services.delivery_service import DeliveryNotifier
from ..services.purl_service import PurlBuilder, PurlResult
from ..services.session_service import SessionService
from ..utils.helpers import Helpers

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=ToolInput)

ToolResult = Dict[str, Any]


class ToolDispatcher:
    """Runs the five booking tools against shared session and queue state"""

    def __init__(
        self,
        session_service: SessionService,
        action_queue: ActionQueue,
        catalog: CatalogService,
        notifier: DeliveryNotifier,
        purl_builder: PurlBuilder,
        state_manager: Optional[StateManager] = None
    ):
        self.sessions = session_service
        self.actions = action_queue
        self.catalog = catalog
        self.notifier = notifier
        self.purl_builder = purl_builder
        self.state_manager = state_manager or StateManager()

        self.handlers: Dict[str, Callable[[Dict[str, Any], Optional[str]], ToolResult]] = {
            "initiate_booking": self.initiate_booking,
            "search_inventory": self.search_inventory,
            "select_package": self.select_package,
            "generate_purl": self.generate_purl,
            "booking_status": self.booking_status
        }

    @property
    def tool_names(self):
        return list(self.handlers)

    def dispatch(
        self,
        tool_name: str,
        tool_input: Optional[Dict[str, Any]] = None,
        conversation_id: Optional[str] = None
    ) -> ToolResult:
        """
        Run one tool

        Raises:
            ValidationError: Unknown tool or bad input
            NotFoundError: Unknown session
            PreconditionError: Tool called out of order
        """
        handler = self.handlers.get(tool_name)
        if handler is None:
            raise ValidationError(f"Unknown tool: {tool_name}")

        return handler(tool_input or {}, conversation_id)

    # ==================== TOOLS ====================

    def initiate_booking(self, tool_input: Dict[str, Any], conversation_id: Optional[str] = None) -> ToolResult:
        data = self._parse(InitiateBookingInput, tool_input)
        travelers = data.travelers or BOOKING_SETTINGS["default_travelers"]

        session = BookingSession(
            member_name=data.member_name,
            member_id=data.member_id,
            travel_type=data.travel_type,
            destination=data.destination,
            departure_window=data.departure_window,
            travelers=travelers,
            budget_range=data.budget_range,
            special_requests=data.special_requests,
            conversation_id=conversation_id
        )
        session_id = self.sessions.create_session(session)

        self.actions.push(conversation_id, ActionType.BOOKING_STARTED, {
            "sessionId": session_id,
            "memberName": session.member_name,
            "travelType": session.travel_type,
            "destination": session.destination,
            "travelers": travelers
        })

        destination = f" to {session.destination}" if session.destination else ""
        return {
            "success": True,
            "sessionId": session_id,
            "message": (
                f"Booking session created for {session.member_name}. Searching for "
                f"{session.travel_type} options{destination} for {travelers} travelers."
            ),
            "instruction": (
                f"Booking session started. Session ID: {session_id}. Now call search_inventory "
                "with this sessionId to find available packages."
            ),
            "session": session.to_dict()
        }

    def search_inventory(self, tool_input: Dict[str, Any], conversation_id: Optional[str] = None) -> ToolResult:
        data = self._parse(SearchInventoryInput, tool_input)
        self._require_session(data.session_id)

        packages = self.catalog.query(data.filters)
        results = [CatalogService.format_result(p, i) for i, p in enumerate(packages, start=1)]

        def present_results(session: BookingSession) -> None:
            self.state_manager.ensure_transition(session.status, BookingStatus.RESULTS_PRESENTED)
            # A new search reopens the choice
            session.clear_selection()
            session.update_status(BookingStatus.RESULTS_PRESENTED)

        session = self.sessions.update_session(data.session_id, present_results)

        self.actions.push(self._conversation(conversation_id, session), ActionType.SEARCH_RESULTS, {
            "resultCount": len(results),
            "results": results
        })

        return {
            "success": True,
            "resultCount": len(results),
            "searchId": Helpers.generate_search_id(),
            "results": results,
            "instruction": (
                f"Found {len(results)} options. Present the top results conversationally: describe "
                "the destination, price, and a standout highlight for each. Ask which the member prefers."
            )
        }

    def select_package(self, tool_input: Dict[str, Any], conversation_id: Optional[str] = None) -> ToolResult:
        data = self._parse(SelectPackageInput, tool_input)
        self._require_session(data.session_id)

        if not data.member_confirmed:
            logger.info(f"Selection of {data.package_id} not confirmed for session {data.session_id}")
            return {
                "success": False,
                "message": (
                    "Member must verbally confirm their selection. Repeat the package details "
                    "and ask for a clear yes before calling this tool."
                ),
                "instruction": "Do NOT proceed until the member explicitly says yes."
            }

        package = self.catalog.get(data.package_id)
        summary = data.package_summary or (package.name if package else data.package_id)

        def record_selection(session: BookingSession) -> None:
            self.state_manager.ensure_transition(session.status, BookingStatus.PACKAGE_SELECTED)
            session.select_package(data.package_id, summary)

        session = self.sessions.update_session(data.session_id, record_selection)

        if package:
            selected = CatalogService.format_summary(package)
        else:
            logger.warning(f"Selected package not in catalog: {data.package_id}")
            selected = {"packageId": data.package_id}

        self.actions.push(self._conversation(conversation_id, session), ActionType.PACKAGE_SELECTED, {
            "packageId": data.package_id,
            "name": package.name if package else data.package_id,
            "destination": selected.get("destination"),
            "pricePerPerson": selected.get("pricePerPerson"),
            "cabinClass": selected.get("cabinClass"),
            "provider": selected.get("provider")
        })

        return {
            "success": True,
            "message": (
                f"Package locked in: {package.name if package else data.package_id}. "
                "Ready to generate a personalized booking link."
            ),
            "selectedPackage": selected,
            "instruction": (
                "Package selected. Ask the member how they would like to receive their booking "
                "link: text message, email, or displayed on screen."
            )
        }

    def generate_purl(self, tool_input: Dict[str, Any], conversation_id: Optional[str] = None) -> ToolResult:
        data = self._parse(GeneratePurlInput, tool_input)
        self._require_session(data.session_id)

        notice = self.notifier.resolve(
            data.delivery_method,
            phone=data.member_phone,
            email=data.member_email
        )
        built: Dict[str, PurlResult] = {}

        def issue_link(session: BookingSession) -> None:
            if not session.selected_package_id:
                raise PreconditionError("No package selected. Call select_package first.")
            self.state_manager.ensure_transition(session.status, BookingStatus.PURL_GENERATED)
            built["purl"] = self.purl_builder.build(session)
            session.update_status(BookingStatus.PURL_GENERATED)

        session = self.sessions.update_session(data.session_id, issue_link)
        link = built["purl"]
        expires_at = Helpers.get_timestamp(link.expires_at)

        logger.info(
            f"Booking link issued for session {session.id} via {notice.method}"
            f"{' (fallback)' if notice.fallback else ''}"
        )

        package = self.catalog.get(session.selected_package_id)
        self.actions.push(self._conversation(conversation_id, session), ActionType.PURL_READY, {
            "purl": link.purl,
            "deliveryMethod": notice.method,
            "message": notice.message,
            "expiresAt": expires_at,
            "memberName": session.member_name,
            "package": CatalogService.format_details(package) if package else None
        })

        return {
            "success": True,
            "purl": link.purl,
            "deliveryMethod": notice.method,
            "requestedDeliveryMethod": data.delivery_method or BOOKING_SETTINGS["default_delivery_method"],
            "message": notice.message,
            "expiresAt": expires_at,
            "payload": link.claims,
            "instruction": (
                "The booking link has been displayed on the member's screen. Let them know they can "
                "click it to complete their booking. The link is personalized and pre-fills their "
                "trip details."
            )
        }

    def booking_status(self, tool_input: Dict[str, Any], conversation_id: Optional[str] = None) -> ToolResult:
        data = self._parse(BookingStatusInput, tool_input)
        session = self.sessions.get_session(data.session_id)

        if session is None:
            return {
                "success": True,
                "status": NOT_FOUND_STATUS,
                "sessionId": data.session_id,
                "summary": NOT_FOUND_MESSAGE
            }

        return {
            "success": True,
            "status": session.status.value,
            "sessionId": session.id,
            "summary": self.state_manager.get_status_message(session.status),
            "session": session.to_dict(),
            "instruction": "Relay the booking status to the member."
        }

    # ==================== HELPERS ====================

    def _require_session(self, session_id: str) -> BookingSession:
        session = self.sessions.get_session(session_id)
        if session is None:
            raise NotFoundError(f"Session not found: {session_id}")
        return session

    @staticmethod
    def _conversation(conversation_id: Optional[str], session: BookingSession) -> Optional[str]:
        return conversation_id or session.conversation_id

    @staticmethod
    def _parse(model: Type[InputT], tool_input: Dict[str, Any]) -> InputT:
        if not isinstance(tool_input, dict):
            raise ValidationError("Tool input must be an object")
        try:
            return model.model_validate(tool_input)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ValidationError(f"Invalid input: {problems}") from e
