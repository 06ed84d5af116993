"""
Session Manager - registry of editor sessions
"""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from threading import RLock
from typing import Any, Dict, List, Optional

from core.constants import SessionConstants
from core.selection_controller import SelectionController

logger = logging.getLogger(__name__)


@dataclass
class EditorSession:
    """One user's editing context: source image plus selection state"""

    id: str
    controller: SelectionController
    created_at: datetime = field(default_factory=datetime.now)
    last_access: datetime = field(default_factory=datetime.now)
    source: Optional[str] = None
    lock: RLock = field(default_factory=RLock, repr=False)

    def touch(self) -> None:
        self.last_access = datetime.now()


class SessionManager:
    """Bounded LRU registry of editor sessions"""

    def __init__(self, max_sessions: int = SessionConstants.DEFAULT_MAX_SESSIONS):
        """
        Initialize Session Manager

        Args:
            max_sessions: Maximum number of live sessions; the least recently
                used one is evicted when a new session would exceed it
        """
        self.max_sessions = max_sessions
        self.sessions: "OrderedDict[str, EditorSession]" = OrderedDict()

        # Statistics
        self.total_created = 0
        self.total_evicted = 0

        # Thread safety (RLock allows reentrant locking)
        self.lock = RLock()

        logger.info(f"Session Manager initialized with max sessions: {max_sessions}")

    def create(self) -> EditorSession:
        """
        Create a new, empty editor session

        Returns:
            The new session
        """
        with self.lock:
            session_id = f"{SessionConstants.SESSION_ID_PREFIX}{uuid.uuid4().hex[:8]}"
            session = EditorSession(id=session_id, controller=SelectionController())

            while len(self.sessions) >= self.max_sessions:
                evicted_id, _ = self.sessions.popitem(last=False)
                self.total_evicted += 1
                logger.info(f"Evicted least recently used session {evicted_id}")

            self.sessions[session_id] = session
            self.total_created += 1

            logger.info(f"Created session {session_id}")
            return session

    def get(self, session_id: str) -> Optional[EditorSession]:
        """Get session by ID, marking it as recently used"""
        with self.lock:
            session = self.sessions.get(session_id)
            if session is not None:
                self.sessions.move_to_end(session_id)
                session.touch()
            return session

    def delete(self, session_id: str) -> bool:
        """Delete a session; returns False if it did not exist"""
        with self.lock:
            if self.sessions.pop(session_id, None) is None:
                return False
            logger.info(f"Deleted session {session_id}")
            return True

    def list_ids(self) -> List[str]:
        """Session IDs, least recently used first"""
        with self.lock:
            return list(self.sessions.keys())

    def get_stats(self) -> Dict[str, Any]:
        """Get registry statistics"""
        with self.lock:
            return {
                "active": len(self.sessions),
                "max_sessions": self.max_sessions,
                "with_image": sum(1 for s in self.sessions.values() if s.controller.has_image),
                "total_created": self.total_created,
                "total_evicted": self.total_evicted,
            }

    def clear(self):
        """Drop all sessions"""
        with self.lock:
            self.sessions.clear()
            logger.info("Session registry cleared")
