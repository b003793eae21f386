"""Cleanup route ordering and estimation."""

from .estimator import estimate_route
from .models import InvalidRouteConfig, OptimizedRoute, RouteConfig, RouteEstimate, RouteLeg
from .nearest_neighbor import build_tour
from .optimizer import RouteOptimizer, optimize, recalculate_after_removal

__all__ = [
    "build_tour",
    "estimate_route",
    "optimize",
    "recalculate_after_removal",
    "RouteOptimizer",
    "RouteConfig",
    "RouteEstimate",
    "RouteLeg",
    "OptimizedRoute",
    "InvalidRouteConfig",
]
