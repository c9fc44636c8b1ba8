"""Planner session endpoints.

Each endpoint mirrors one interaction with the estimator form: typing into a
field, picking a suggestion, pressing Enter in the stop field, removing a
stop, and submitting either the shipping form or the route form.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.geocoding import LocationModel
from ...schemas.routing import RoutePlanResponse
from ...schemas.sessions import (
    FieldInputRequest,
    FieldInputResponse,
    SelectRequest,
    SessionQuoteRequest,
    SessionStateModel,
    StopSubmitRequest,
    StopSubmitResponse,
)
from ...schemas.shipping import QuoteResponse
from ...services.planner.session import PlannerSession, SelectionField, SessionError
from ...services.planner.store import SessionStore
from ..dependencies import get_session_store

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_session(session_id: str, store: SessionStore) -> PlannerSession:
    try:
        return store.get(session_id)
    except SessionError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("", response_model=SessionStateModel, status_code=status.HTTP_201_CREATED)
def create_session(store: SessionStore = Depends(get_session_store)) -> SessionStateModel:
    return SessionStateModel.from_session(store.create())


@router.get("/{session_id}", response_model=SessionStateModel, status_code=status.HTTP_200_OK)
def get_session(session_id: str, store: SessionStore = Depends(get_session_store)) -> SessionStateModel:
    return SessionStateModel.from_session(_get_session(session_id, store))


@router.delete("/{session_id}", status_code=status.HTTP_200_OK)
def delete_session(session_id: str, store: SessionStore = Depends(get_session_store)) -> dict:
    if not store.delete(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Session '{session_id}' not found.")
    return {"success": True, "session_id": session_id}


@router.post("/{session_id}/reset", response_model=SessionStateModel, status_code=status.HTTP_200_OK)
def reset_session(session_id: str, store: SessionStore = Depends(get_session_store)) -> SessionStateModel:
    session = _get_session(session_id, store)
    session.reset()
    return SessionStateModel.from_session(session)


@router.post(
    "/{session_id}/fields/{field}/input",
    response_model=FieldInputResponse,
    status_code=status.HTTP_200_OK,
)
async def field_input(
    session_id: str,
    field: SelectionField,
    payload: FieldInputRequest,
    store: SessionStore = Depends(get_session_store),
) -> FieldInputResponse:
    session = _get_session(session_id, store)
    outcome = await session.on_input(field, payload.text)
    return FieldInputResponse.from_outcome(outcome)


@router.post(
    "/{session_id}/fields/{field}/select",
    response_model=SessionStateModel,
    status_code=status.HTTP_200_OK,
)
def field_select(
    session_id: str,
    field: SelectionField,
    payload: SelectRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionStateModel:
    session = _get_session(session_id, store)
    try:
        session.on_select(field, payload.location_id)
    except SessionError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return SessionStateModel.from_session(session)


@router.post("/{session_id}/stops/submit", response_model=StopSubmitResponse, status_code=status.HTTP_200_OK)
async def submit_stop(
    session_id: str,
    payload: StopSubmitRequest,
    store: SessionStore = Depends(get_session_store),
) -> StopSubmitResponse:
    session = _get_session(session_id, store)
    added = await session.on_submit_stop(payload.text)
    return StopSubmitResponse(
        added=LocationModel.from_domain(added) if added else None,
        stops=[LocationModel.from_domain(stop) for stop in session.stops],
    )


@router.delete("/{session_id}/stops/{location_id}", response_model=SessionStateModel, status_code=status.HTTP_200_OK)
def remove_stop(
    session_id: str,
    location_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionStateModel:
    session = _get_session(session_id, store)
    session.remove_stop(location_id)
    return SessionStateModel.from_session(session)


@router.post("/{session_id}/quote", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def session_quote(
    session_id: str,
    payload: SessionQuoteRequest,
    store: SessionStore = Depends(get_session_store),
) -> QuoteResponse:
    session = _get_session(session_id, store)
    try:
        return QuoteResponse.from_domain(session.request_quote(payload.weight, payload.tier))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error calculating session quote: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to calculate shipping quote: {str(exc)}"
        ) from exc


@router.post("/{session_id}/route-plan", response_model=RoutePlanResponse, status_code=status.HTTP_200_OK)
def session_route_plan(session_id: str, store: SessionStore = Depends(get_session_store)) -> RoutePlanResponse:
    session = _get_session(session_id, store)
    try:
        return RoutePlanResponse.from_domain(session.request_route_plan())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error planning session route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to plan route: {str(exc)}"
        ) from exc
