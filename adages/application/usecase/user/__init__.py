"""User use cases."""

from .get_current_user import GetCurrentUserUseCase
from .get_user_stats import GetUserStatsUseCase

__all__ = ["GetCurrentUserUseCase", "GetUserStatsUseCase"]
