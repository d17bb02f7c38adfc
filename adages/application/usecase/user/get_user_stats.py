"""Get user stats use case."""

from uuid import UUID

from pydantic import BaseModel

from adages.application.usecase.base import BaseUseCase
from adages.config import CommendationSettings
from adages.domain.service import CommendationService, UserService
from adages.domain.value import UserId

from .stats import CommendationStatsResponse, to_commendation_response


class GetUserStatsRequest(BaseModel):
    """Get user stats request."""

    user_id: UUID


class GetUserStatsUseCase(BaseUseCase):
    """Use case for any user's public commendation statistics."""

    def __init__(
        self,
        user_service: UserService,
        commendation_service: CommendationService,
        settings: CommendationSettings,
    ) -> None:
        """Initialize get user stats use case.

        Args:
            user_service: User domain service
            commendation_service: Commendation domain service
            settings: Commendation settings (preview length)
        """
        self.user_service = user_service
        self.commendation_service = commendation_service
        self.settings = settings

    async def execute(self, request: GetUserStatsRequest) -> CommendationStatsResponse:
        """Execute get user stats flow.

        Args:
            request: Request with the user's ID

        Returns:
            Commendation statistics

        Raises:
            NotFoundError: If user not found or deleted
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        stats = await self.commendation_service.get_commendation_stats(user.id)
        return to_commendation_response(stats, self.settings.preview_length)
