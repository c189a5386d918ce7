"""
Booking API Router
"""

from typing import Optional

from fastapi import APIRouter

from .endpoints import BookingEndpoints
from ..services.conversation_service import RetellService, TavusService


def create_booking_router(
    orchestrator,
    tavus: Optional[TavusService] = None,
    retell: Optional[RetellService] = None
) -> APIRouter:
    """Create and configure booking router"""
    
    router = APIRouter(prefix="/api", tags=["Booking"])
    endpoints = BookingEndpoints(orchestrator, tavus=tavus, retell=retell)
    
    # Tool execution and browser polling
    router.post("/booking")(endpoints.run_tool)
    router.post("/execute")(endpoints.execute_tool_call)
    router.get("/execute")(endpoints.poll_actions)
    
    # Agent conversations
    router.post("/tavus-session")(endpoints.create_tavus_session)
    router.post("/retell-inbound")(endpoints.create_retell_inbound)
    router.post("/retell-outbound")(endpoints.create_retell_outbound)
    
    router.get("/health")(endpoints.health_check)
    
    return router
