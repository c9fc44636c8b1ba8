"""In-memory registry of planner sessions."""

from __future__ import annotations

import logging
from collections import OrderedDict

from ...config import settings
from .session import Geocoder, PlannerSession, SessionError

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds live sessions; the oldest is evicted once ``max_sessions`` is reached."""

    def __init__(
        self,
        geocoder: Geocoder,
        *,
        max_sessions: int | None = None,
        debounce_seconds: float | None = None,
    ) -> None:
        self.geocoder = geocoder
        self.max_sessions = max_sessions or settings.max_sessions
        self.debounce_seconds = debounce_seconds
        self._sessions: OrderedDict[str, PlannerSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self) -> PlannerSession:
        while len(self._sessions) >= self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info(f"Evicted planner session {evicted_id} (limit {self.max_sessions})")
        session = PlannerSession(self.geocoder, debounce_seconds=self.debounce_seconds)
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> PlannerSession:
        try:
            return self._sessions[session_id]
        except KeyError as exc:
            raise SessionError(f"Session '{session_id}' not found.") from exc

    def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None
