"""Get current user use case."""

import asyncio
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from adages.application.usecase.base import BaseUseCase
from adages.config import CommendationSettings
from adages.domain.service import CommendationService, JWTService, UserService
from adages.domain.value import UserId, UserRole
from adages.util.jwt import JWTError

from .stats import (
    ActivityStatsResponse,
    CommendationStatsResponse,
    ResponseModel,
    to_activity_response,
    to_commendation_response,
)


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token from the session cookie


class EmailPreferencesResponse(BaseModel):
    email_weekly_adage: bool = True
    email_events: bool = True
    email_site_updates: bool = True
    email_archive_additions: bool = True
    email_comment_notifications: bool = True


class GetCurrentUserResponse(ResponseModel):
    """Current user's profile with activity and commendation stats."""

    id: str
    email: str
    username: Optional[str]
    display_name: Optional[str]
    bio: Optional[str]
    profile_image_url: Optional[str]
    role: UserRole
    email_verified: bool
    created_at: datetime
    profile_private: bool
    comments_friends_only: bool
    email_preferences: EmailPreferencesResponse
    stats: ActivityStatsResponse
    commendation_stats: CommendationStatsResponse = Field(alias="commendationStats")


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the current authenticated user's profile."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        commendation_service: CommendationService,
        settings: CommendationSettings,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            commendation_service: Commendation domain service
            settings: Commendation settings (preview length)
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.commendation_service = commendation_service
        self.settings = settings

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify the session token
        2. Load the non-deleted user row
        3. Concurrently compute activity and commendation stats
        4. Return profile and stats

        Args:
            request: Request with JWT token

        Returns:
            Profile with stats

        Raises:
            JWTError: If token is invalid, expired or names no valid user id
            NotFoundError: If user not found or deleted
        """
        payload = self.jwt_service.verify_token(request.token)
        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            raise JWTError("Invalid token")

        user = await self.user_service.get_by_id(user_id)

        activity, commendation = await asyncio.gather(
            self.user_service.get_activity_stats(user.id),
            self.commendation_service.get_commendation_stats(user.id),
        )

        return GetCurrentUserResponse(
            id=str(user.id),
            email=user.email,
            username=user.username,
            display_name=user.display_name,
            bio=user.bio,
            profile_image_url=user.profile_image_url,
            role=user.role,
            email_verified=user.email_verified,
            created_at=user.created_at,
            profile_private=user.profile_private,
            comments_friends_only=user.comments_friends_only,
            email_preferences=EmailPreferencesResponse(
                **user.email_preferences.model_dump()
            ),
            stats=to_activity_response(activity),
            commendation_stats=to_commendation_response(
                commendation, self.settings.preview_length
            ),
        )
