"""Planner session schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..services.planner.session import FieldState, LookupOutcome, PlannerSession
from .geocoding import LocationModel


class FieldStateModel(BaseModel):
    text: str
    selected: Optional[LocationModel] = None
    suggestions: List[LocationModel]
    suggestions_visible: bool
    sequence: int

    @classmethod
    def from_state(cls, state: FieldState) -> "FieldStateModel":
        return cls(
            text=state.text,
            selected=LocationModel.from_domain(state.selected) if state.selected else None,
            suggestions=[LocationModel.from_domain(item) for item in state.suggestions],
            suggestions_visible=state.suggestions_visible,
            sequence=state.sequence,
        )


class SessionStateModel(BaseModel):
    session_id: str
    created_at: datetime
    fields: Dict[str, FieldStateModel]
    stops: List[LocationModel]

    @classmethod
    def from_session(cls, session: PlannerSession) -> "SessionStateModel":
        return cls(
            session_id=session.session_id,
            created_at=session.created_at,
            fields={name.value: FieldStateModel.from_state(state) for name, state in session.fields.items()},
            stops=[LocationModel.from_domain(stop) for stop in session.stops],
        )


class FieldInputRequest(BaseModel):
    text: str = Field(default="", description="Current text of the input field")


class FieldInputResponse(BaseModel):
    field: str
    sequence: int
    superseded: bool
    suggestions: List[LocationModel]

    @classmethod
    def from_outcome(cls, outcome: LookupOutcome) -> "FieldInputResponse":
        return cls(
            field=outcome.field.value,
            sequence=outcome.sequence,
            superseded=outcome.superseded,
            suggestions=[LocationModel.from_domain(item) for item in outcome.suggestions],
        )


class SelectRequest(BaseModel):
    location_id: str


class StopSubmitRequest(BaseModel):
    text: str


class StopSubmitResponse(BaseModel):
    added: Optional[LocationModel] = None
    stops: List[LocationModel]


class SessionQuoteRequest(BaseModel):
    weight: Optional[float] = None
    tier: Optional[str] = None
