"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.routing import OptimizedRouteResponse, RoutePlanRequest, RoutePlanResponse, RouteRequest
from ...services.routing.optimizer import optimize_route
from ...services.routing.service import plan_route

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/optimize", response_model=OptimizedRouteResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RouteRequest) -> OptimizedRouteResponse:
    optimized = optimize_route(payload.start.to_domain(), [stop.to_domain() for stop in payload.stops])
    return OptimizedRouteResponse.from_domain(optimized)


@router.post("/plan", response_model=RoutePlanResponse, status_code=status.HTTP_200_OK)
def plan(payload: RoutePlanRequest) -> RoutePlanResponse:
    try:
        route_plan = plan_route(
            payload.start.to_domain(),
            [stop.to_domain() for stop in payload.stops],
            weight=payload.weight,
            tier=payload.tier,
        )
        return RoutePlanResponse.from_domain(route_plan)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error planning route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to plan route: {str(exc)}"
        ) from exc
