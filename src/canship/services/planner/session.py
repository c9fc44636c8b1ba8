"""Planner sessions: selection state and input handling for one user.

A session replaces the page-wide globals of a browser form. Each input field
keeps its own text, selected location, suggestion list and a monotonic
sequence token. Keystroke lookups are debounced per field and any lookup that
is overtaken by a newer input on the same field is discarded instead of
overwriting the newer suggestions.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Protocol

from ...config import settings
from ...models.domain import Location
from ..pricing.calculator import calculate_shipping_cost, validate_quote_request
from ..pricing.models import ShippingQuote
from ..pricing.rates import ShippingTier
from ..routing.models import RoutePlan
from ..routing.service import plan_route

logger = logging.getLogger(__name__)


class SessionError(LookupError):
    """Raised for unknown sessions or suggestion ids."""


class SelectionField(str, Enum):
    ORIGIN = "origin"
    DESTINATION = "destination"
    START = "start"
    STOP = "stop"


class Geocoder(Protocol):
    async def search(self, query: str) -> list[Location]: ...


class InputHandler(Protocol):
    """What a rendering surface calls when the user interacts with an input."""

    async def on_input(self, field: SelectionField, text: str) -> "LookupOutcome": ...

    def on_select(self, field: SelectionField, location_id: str) -> Location: ...

    async def on_submit_stop(self, text: str) -> Optional[Location]: ...


@dataclass
class FieldState:
    text: str = ""
    selected: Optional[Location] = None
    suggestions: list[Location] = field(default_factory=list)
    suggestions_visible: bool = False
    sequence: int = 0

    def hide_suggestions(self) -> None:
        self.suggestions_visible = False


@dataclass(slots=True)
class LookupOutcome:
    field: SelectionField
    sequence: int
    superseded: bool
    suggestions: list[Location]


class PlannerSession:
    """Selection state for one estimator user; implements ``InputHandler``."""

    def __init__(
        self,
        geocoder: Geocoder,
        *,
        session_id: str | None = None,
        debounce_seconds: float | None = None,
        min_query_length: int | None = None,
        route_leg_weight: float | None = None,
        route_leg_tier: ShippingTier | str | None = None,
    ) -> None:
        self.session_id = session_id or uuid.uuid4().hex
        self.created_at = datetime.now(timezone.utc)
        self.geocoder = geocoder
        self.debounce_seconds = debounce_seconds if debounce_seconds is not None else settings.debounce_seconds
        self.min_query_length = min_query_length if min_query_length is not None else settings.min_query_length
        self.route_leg_weight = route_leg_weight if route_leg_weight is not None else settings.route_leg_weight
        self.route_leg_tier = route_leg_tier if route_leg_tier is not None else settings.route_leg_tier
        self.fields: dict[SelectionField, FieldState] = {}
        self.stops: list[Location] = []
        self.reset()

    def reset(self) -> None:
        self.fields = {name: FieldState() for name in SelectionField}
        self.stops = []

    @property
    def origin(self) -> Optional[Location]:
        return self.fields[SelectionField.ORIGIN].selected

    @property
    def destination(self) -> Optional[Location]:
        return self.fields[SelectionField.DESTINATION].selected

    @property
    def start(self) -> Optional[Location]:
        return self.fields[SelectionField.START].selected

    def _is_current(self, name: SelectionField, state: FieldState, token: int) -> bool:
        return self.fields.get(name) is state and state.sequence == token

    async def on_input(self, field: SelectionField, text: str) -> LookupOutcome:
        """Record an edit and, after the debounce window, refresh suggestions."""
        state = self.fields[field]
        state.text = text
        state.selected = None
        state.sequence += 1
        token = state.sequence

        if len(text.strip()) < self.min_query_length:
            state.suggestions = []
            state.hide_suggestions()
            return LookupOutcome(field=field, sequence=token, superseded=False, suggestions=[])

        if self.debounce_seconds > 0:
            await asyncio.sleep(self.debounce_seconds)
        if not self._is_current(field, state, token):
            return LookupOutcome(field=field, sequence=token, superseded=True, suggestions=[])

        locations = await self.geocoder.search(text)
        if not self._is_current(field, state, token):
            logger.debug(f"Discarding stale {field.value} suggestions for '{text}' (token {token})")
            return LookupOutcome(field=field, sequence=token, superseded=True, suggestions=[])

        state.suggestions = locations
        state.suggestions_visible = bool(locations)
        return LookupOutcome(field=field, sequence=token, superseded=False, suggestions=list(locations))

    def on_select(self, field: SelectionField, location_id: str) -> Location:
        """Pick one of the field's current suggestions."""
        state = self.fields[field]
        location = next((item for item in state.suggestions if item.id == str(location_id)), None)
        if location is None:
            raise SessionError(f"Location '{location_id}' is not among the {field.value} suggestions.")

        # a lookup still in flight must not reopen the list
        state.sequence += 1
        state.hide_suggestions()
        if field is SelectionField.STOP:
            self.add_stop(location)
            state.text = ""
        else:
            state.selected = location
            state.text = location.display_name
        return location

    async def on_submit_stop(self, text: str) -> Optional[Location]:
        """Enter in the stop field: add the first match without waiting for a pick."""
        state = self.fields[SelectionField.STOP]
        locations = await self.geocoder.search(text)
        if not locations:
            return None
        first = locations[0]
        self.add_stop(first)
        state.sequence += 1
        state.text = ""
        state.hide_suggestions()
        return first

    def add_stop(self, location: Location) -> bool:
        if any(stop.same_place(location) for stop in self.stops):
            return False
        self.stops.append(location)
        return True

    def remove_stop(self, location_id: str) -> bool:
        before = len(self.stops)
        self.stops = [stop for stop in self.stops if stop.id != str(location_id)]
        removed = len(self.stops) != before
        logger.info(
            f"Session {self.session_id}: remove stop '{location_id}' "
            f"({'removed' if removed else 'not present'}, {len(self.stops)} remaining)"
        )
        return removed

    def request_quote(self, weight: float | None, tier: ShippingTier | str | None) -> ShippingQuote:
        resolved = validate_quote_request(self.origin, self.destination, weight, tier)
        return calculate_shipping_cost(self.origin, self.destination, weight, resolved)

    def request_route_plan(self) -> RoutePlan:
        return plan_route(self.start, self.stops, weight=self.route_leg_weight, tier=self.route_leg_tier)
