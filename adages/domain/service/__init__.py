"""Domain services."""

from .base import Service
from .commendation_service import CommendationService
from .contribution_service import ContributionService
from .engagement_service import EngagementService
from .jwt_service import JWTService
from .scoring import combine_tallies, rank_popular, reduce_votes
from .user_service import UserService

__all__ = [
    "CommendationService",
    "ContributionService",
    "EngagementService",
    "JWTService",
    "Service",
    "UserService",
    "combine_tallies",
    "rank_popular",
    "reduce_votes",
]
