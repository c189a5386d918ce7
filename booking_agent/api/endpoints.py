"""
Booking API Endpoints
"""

import logging
import time
from typing import Any, Dict, Optional

from fastapi import HTTPException
from fastapi.responses import JSONResponse

from ..errors import ConversationServiceError, ERROR_STATUS_CODES
from ..models.api_models import (
    ConversationRequest,
    PollResponse,
    ToolCallRequest,
    ToolCallResponse,
    ToolRunRequest
)
from ..orchestrator import BookingOrchestrator
from ..services.conversation_service import RetellService, TavusService
from ..utils.helpers import Helpers

logger = logging.getLogger(__name__)


class BookingEndpoints:
    """Booking API endpoint handlers"""

    def __init__(
        self,
        orchestrator: BookingOrchestrator,
        tavus: Optional[TavusService] = None,
        retell: Optional[RetellService] = None
    ):
        """Initialize endpoints"""
        self.orchestrator = orchestrator
        self.tavus = tavus or TavusService()
        self.retell = retell or RetellService()

        logger.info("BookingEndpoints initialized")

    # ==================== TOOL ENDPOINTS ====================

    async def run_tool(self, request: ToolRunRequest) -> Dict[str, Any]:
        """Playground: run one tool and report typed failures as HTTP errors"""
        if not request.tool or request.input is None:
            raise HTTPException(status_code=400, detail="Missing tool or input")

        start_time = time.monotonic()
        result = self.orchestrator.invoke(request.tool, request.input)

        error_type = result.get("errorType")
        if error_type:
            raise HTTPException(
                status_code=ERROR_STATUS_CODES.get(error_type, 500),
                detail={"error": result["error"], "tool": request.tool}
            )

        return {
            "tool": request.tool,
            "result": result,
            "duration_ms": int((time.monotonic() - start_time) * 1000),
            "timestamp": Helpers.get_timestamp()
        }

    async def execute_tool_call(self, request: ToolCallRequest):
        """Agent callback: every outcome is returned to the agent as a result"""
        if not request.tool_name:
            raise HTTPException(status_code=400, detail="Missing tool_name")

        tool_call_id = request.tool_call_id or "unknown"
        result = self.orchestrator.invoke(
            request.tool_name,
            request.tool_input or {},
            conversation_id=request.conversation_id,
            tool_call_id=tool_call_id
        )

        response = ToolCallResponse(tool_call_id=tool_call_id, result=result)
        if result.get("errorType") == "internal_error":
            return JSONResponse(status_code=500, content=response.model_dump())

        return response

    async def poll_actions(self, conversation_id: Optional[str] = None) -> PollResponse:
        """Browser poll: drain UI actions for one conversation"""
        if not conversation_id:
            raise HTTPException(status_code=400, detail="Missing conversation_id query parameter")

        return PollResponse(actions=self.orchestrator.poll(conversation_id))

    # ==================== CONVERSATION ENDPOINTS ====================
    # Sync handlers: outbound requests block, so these run in the threadpool

    def create_tavus_session(self, request: Optional[ConversationRequest] = None) -> Dict[str, Any]:
        request = request or ConversationRequest()
        try:
            return self.tavus.create_conversation(name=request.name, reason=request.reason)
        except ConversationServiceError as e:
            raise HTTPException(status_code=e.status_code, detail=str(e))

    def create_retell_inbound(self) -> Dict[str, Any]:
        try:
            return self.retell.create_inbound_call()
        except ConversationServiceError as e:
            raise HTTPException(status_code=e.status_code, detail=str(e))

    def create_retell_outbound(self, request: Optional[ConversationRequest] = None) -> Dict[str, Any]:
        request = request or ConversationRequest()
        try:
            return self.retell.create_outbound_call(name=request.name)
        except ConversationServiceError as e:
            raise HTTPException(status_code=e.status_code, detail=str(e))

    # ==================== HEALTH ====================

    async def health_check(self) -> Dict[str, Any]:
        """Health check endpoint"""
        try:
            stats = self.orchestrator.get_stats()
            return {
                "status": "healthy",
                "timestamp": Helpers.get_timestamp(),
                "active_sessions": stats["sessions"]["active_sessions"],
                "pending_actions": stats["actions"]["pending_actions"],
                "catalog_size": stats["catalog_size"],
                "tools": stats["tools"]
            }
        except Exception as e:
            logger.error(f"Health check error: {e}")
            raise HTTPException(status_code=503, detail="Service unhealthy")
