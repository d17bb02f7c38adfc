"""Application layer DI providers."""

from dishka import Scope, provide

from adages.application.usecase.user import GetCurrentUserUseCase, GetUserStatsUseCase
from adages.config import CommendationSettings
from adages.domain.service import CommendationService, JWTService, UserService
from adages.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, not swappable."""

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        commendation_service: CommendationService,
        settings: CommendationSettings,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            commendation_service=commendation_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_user_stats_use_case(
        self,
        user_service: UserService,
        commendation_service: CommendationService,
        settings: CommendationSettings,
    ) -> GetUserStatsUseCase:
        """Provide get user stats use case."""
        return GetUserStatsUseCase(
            user_service=user_service,
            commendation_service=commendation_service,
            settings=settings,
        )
