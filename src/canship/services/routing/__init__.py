"""Routing services."""

from .models import OptimizedRoute, RouteLeg, RoutePlan
from .optimizer import optimize_route
from .service import plan_route

__all__ = ["OptimizedRoute", "RouteLeg", "RoutePlan", "optimize_route", "plan_route"]
