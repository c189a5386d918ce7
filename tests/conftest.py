"""
Test configuration and fixtures.

Every test gets its own orchestrator so sessions and queued actions never
leak between tests.
"""

import pytest

from booking_agent import BookingOrchestrator


@pytest.fixture
def orchestrator():
    """Fresh process-scoped state container."""
    return BookingOrchestrator()


@pytest.fixture
def dispatcher(orchestrator):
    return orchestrator.dispatcher


@pytest.fixture
def started_session(orchestrator):
    """Session created through initiate_booking on conversation conv-1."""
    result = orchestrator.invoke(
        "initiate_booking",
        {"memberName": "Ana", "travelType": "cruise", "destination": "Caribbean", "travelers": 2},
        conversation_id="conv-1",
    )
    assert result["success"] is True
    return result["sessionId"]


@pytest.fixture
def selected_session(orchestrator, started_session):
    """Session with pkg_cruise_carib_001 selected."""
    orchestrator.invoke(
        "search_inventory",
        {"sessionId": started_session, "filters": {"destination": "caribbean"}},
        conversation_id="conv-1",
    )
    result = orchestrator.invoke(
        "select_package",
        {"sessionId": started_session, "packageId": "pkg_cruise_carib_001", "memberConfirmed": True},
        conversation_id="conv-1",
    )
    assert result["success"] is True
    return started_session
