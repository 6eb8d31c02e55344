"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Owns the airport network and answers route queries
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
