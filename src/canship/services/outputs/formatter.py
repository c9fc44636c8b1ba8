"""Human-readable renderings of quotes and route plans."""

from __future__ import annotations

from ..pricing.models import ShippingQuote
from ..routing.models import RoutePlan


def format_cost(cost: float) -> str:
    return f"${cost:.2f} CAD"


def format_distance(distance_km: int) -> str:
    return f"{distance_km} km"


def format_delivery_days(days: tuple[int, int]) -> str:
    low, high = days
    if low == high:
        return f"{low} day{'s' if low > 1 else ''}"
    return f"{low}-{high} days"


def format_total_days(days: int) -> str:
    return f"{days} days"


def quote_display(quote: ShippingQuote) -> dict[str, str]:
    return {
        "cost": format_cost(quote.cost),
        "delivery_time": format_delivery_days(quote.delivery_days),
        "distance": format_distance(quote.distance_km),
    }


def route_plan_display(plan: RoutePlan) -> dict:
    return {
        "steps": [f"{index}. {location.display_name}" for index, location in enumerate(plan.route, start=1)],
        "total_distance": format_distance(plan.total_distance_km),
        "total_cost": format_cost(plan.total_cost),
        "total_time": format_total_days(plan.max_delivery_days),
    }
