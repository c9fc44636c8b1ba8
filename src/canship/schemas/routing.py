"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from ..services.outputs.formatter import route_plan_display
from ..services.routing.models import OptimizedRoute, RoutePlan
from .geocoding import LocationModel


class RouteRequest(BaseModel):
    start: LocationModel
    stops: List[LocationModel] = Field(default_factory=list)


class RoutePlanRequest(RouteRequest):
    weight: Optional[float] = Field(default=None, description="Per-leg weight; defaults to the configured average.")
    tier: Optional[str] = Field(default=None, description="Per-leg tier; defaults to the configured tier.")


class OptimizedRouteResponse(BaseModel):
    route: List[LocationModel]
    total_distance_km: int
    leg_distances_km: List[int]

    @classmethod
    def from_domain(cls, optimized: OptimizedRoute) -> "OptimizedRouteResponse":
        return cls(
            route=[LocationModel.from_domain(location) for location in optimized.route],
            total_distance_km=optimized.total_distance_km,
            leg_distances_km=list(optimized.leg_distances_km),
        )


class RouteLegModel(BaseModel):
    sequence: int
    origin_id: str
    destination_id: str
    distance_km: int
    cost: float
    delivery_days: Tuple[int, int]


class RoutePlanDisplayModel(BaseModel):
    steps: List[str]
    total_distance: str
    total_cost: str
    total_time: str


class RoutePlanResponse(BaseModel):
    route: List[LocationModel]
    legs: List[RouteLegModel]
    tier: str
    weight: float
    total_distance_km: int
    total_cost: float
    max_delivery_days: int
    display: RoutePlanDisplayModel

    @classmethod
    def from_domain(cls, plan: RoutePlan) -> "RoutePlanResponse":
        return cls(
            route=[LocationModel.from_domain(location) for location in plan.route],
            legs=[
                RouteLegModel(
                    sequence=leg.sequence,
                    origin_id=leg.origin.id,
                    destination_id=leg.destination.id,
                    distance_km=leg.quote.distance_km,
                    cost=leg.quote.cost,
                    delivery_days=leg.quote.delivery_days,
                )
                for leg in plan.legs
            ],
            tier=plan.tier.value,
            weight=plan.weight,
            total_distance_km=plan.total_distance_km,
            total_cost=plan.total_cost,
            max_delivery_days=plan.max_delivery_days,
            display=RoutePlanDisplayModel(**route_plan_display(plan)),
        )
