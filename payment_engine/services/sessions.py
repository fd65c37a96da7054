# This project was developed with assistance from AI tools.
"""Calculator session registry.

Each session (one browser tab, one embedding page) owns an independent
DerivedStateController. Sessions live in process memory only and are never
persisted; a restart starts everyone over with defaults.

Session IDs are random UUID4 hex strings handed back to the client on
creation.
"""

import logging
import uuid

from ..core.config import settings
from ..schemas.calculator import Unit
from .controller import DerivedStateController

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """Raised when a session id is unknown (never created or already closed)."""


def default_unit() -> Unit | None:
    """The unit a new session starts with, from ``DEFAULT_UNIT_PRICE``."""
    if settings.DEFAULT_UNIT_PRICE is None:
        return None
    return Unit(price=settings.DEFAULT_UNIT_PRICE)


class SessionRegistry:
    """In-memory map of session id to controller."""

    def __init__(self) -> None:
        self._sessions: dict[str, DerivedStateController] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self, unit: Unit | None = None) -> tuple[str, DerivedStateController]:
        """Open a session, starting from ``unit`` or the configured default unit.

        Returns:
            The new session id and its controller.
        """
        session_id = uuid.uuid4().hex
        controller = DerivedStateController(unit=default_unit())
        if unit is not None:
            controller.select_unit(unit)
        self._sessions[session_id] = controller
        logger.info("Calculator session opened: %s", session_id)
        return session_id, controller

    def get(self, session_id: str) -> DerivedStateController:
        """Return the controller for *session_id*.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def close(self, session_id: str) -> None:
        """Drop a session.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("Calculator session closed: %s", session_id)

    def clear(self) -> None:
        self._sessions.clear()


# Module-level singleton
_registry = SessionRegistry()


def get_session_registry() -> SessionRegistry:
    """Return the module-level SessionRegistry singleton."""
    return _registry
