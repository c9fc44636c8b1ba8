"""Planner session services."""

from .session import (
    FieldState,
    InputHandler,
    LookupOutcome,
    PlannerSession,
    SelectionField,
    SessionError,
)
from .store import SessionStore

__all__ = [
    "FieldState",
    "InputHandler",
    "LookupOutcome",
    "PlannerSession",
    "SelectionField",
    "SessionError",
    "SessionStore",
]
