"""In-memory per-conversation session state.

Sessions live for the process lifetime: there is no eviction, so the store
grows with every conversation that ever shared a location or picked a radius.
"""

import threading

from models import ConversationId, Location, Session


class SessionStore:
    """Lock-guarded map of ConversationId -> Session."""

    def __init__(self):
        self._sessions: dict[ConversationId, Session] = {}
        self._lock = threading.Lock()

    def get(self, conversation_id: ConversationId) -> Session | None:
        """Return a copy of the session, or None if there isn't one."""
        with self._lock:
            session = self._sessions.get(conversation_id)
            return session.model_copy(deep=True) if session else None

    def set_location(self, conversation_id: ConversationId, location: Location) -> None:
        """Store a fresh location. Any earlier radius is dropped."""
        with self._lock:
            self._sessions[conversation_id] = Session(
                conversation_id=conversation_id,
                location=location.model_copy(),
            )

    def set_radius(self, conversation_id: ConversationId, radius_km: float) -> None:
        with self._lock:
            session = self._sessions.get(conversation_id)
            if session is None:
                session = Session(conversation_id=conversation_id)
                self._sessions[conversation_id] = session
            session.radius_km = radius_km

    def clear(self, conversation_id: ConversationId) -> None:
        with self._lock:
            self._sessions.pop(conversation_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
