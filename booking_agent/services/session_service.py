"""
Session Service - In-memory booking session store
"""

from typing import Callable, Dict, Optional, Any
import logging
import threading

from ..errors import InternalError, NotFoundError
from ..models.session import BookingSession
from ..utils.helpers import Helpers

logger = logging.getLogger(__name__)


class SessionService:
    """In-memory session store keyed by session ID.

    Sessions live for the life of the process: there is no TTL and no
    capacity bound, so a long-running host must be restarted (or given an
    external reaper) to reclaim them.
    """

    def __init__(self):
        """Initialize session service"""
        self.sessions: Dict[str, BookingSession] = {}
        self.lock = threading.RLock()
        self.stats = {
            'created': 0,
            'updated': 0
        }

        logger.info("SessionService initialized")

    def create_session(self, session: BookingSession) -> str:
        """Store a new session and return its ID"""
        with self.lock:
            if session.id in self.sessions:
                raise ValueError(f"Session already exists: {session.id}")

            self.sessions[session.id] = session
            self.stats['created'] += 1

            logger.info(f"Created new session: {session.id} (type: {session.travel_type})")

            return session.id

    def get_session(self, session_id: Optional[str]) -> Optional[BookingSession]:
        """Get a copy of the latest committed session, or None"""
        if not session_id:
            return None

        with self.lock:
            session = self.sessions.get(session_id)
            return session.model_copy(deep=True) if session else None

    def update_session(
        self,
        session_id: str,
        mutator: Callable[[BookingSession], None]
    ) -> BookingSession:
        """
        Apply mutator to a working copy and commit it

        Args:
            session_id: Session identifier
            mutator: Callable that edits the session in place

        Returns:
            The committed session

        Raises:
            NotFoundError: If the session does not exist
            InternalError: If the result has a selection without a selecting status, or the reverse
        """
        with self.lock:
            current = self.sessions.get(session_id)
            if current is None:
                raise NotFoundError(f"Session not found: {session_id}")

            # The stored record is only replaced if the mutator finishes
            working = current.model_copy(deep=True)
            mutator(working)
            if working.status.has_selection() != bool(working.selected_package_id):
                raise InternalError(
                    f"Session {session_id} in status {working.status.value} "
                    f"has selected package {working.selected_package_id!r}"
                )
            working.updated_at = Helpers.utc_now()

            self.sessions[session_id] = working
            self.stats['updated'] += 1

            logger.debug(f"Updated session: {session_id} -> {working.status.value}")

            return working.model_copy(deep=True)

    def get_stats(self) -> Dict[str, Any]:
        """Get session store statistics"""
        with self.lock:
            by_status: Dict[str, int] = {}
            for session in self.sessions.values():
                by_status[session.status.value] = by_status.get(session.status.value, 0) + 1

            stats = self.stats.copy()
            stats.update({
                'active_sessions': len(self.sessions),
                'sessions_by_status': by_status,
                'timestamp': Helpers.get_timestamp()
            })
            return stats
