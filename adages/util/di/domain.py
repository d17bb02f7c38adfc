"""Domain layer DI providers."""

from dishka import Scope, provide

from adages.config import AuthSettings, CommendationSettings
from adages.domain.repository import (
    ChallengeRepository,
    CitationRepository,
    ContentRepository,
    LibraryRepository,
    UserRepository,
    VoteRepository,
)
from adages.domain.service import (
    CommendationService,
    ContributionService,
    EngagementService,
    JWTService,
    UserService,
)
from adages.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, not swappable.

    Domain services are REQUEST-scoped; each HTTP request gets fresh
    service instances over the shared repositories.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        content_repository: ContentRepository,
        library_repository: LibraryRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            content_repository=content_repository,
            library_repository=library_repository,
        )

    @provide
    def get_contribution_service(
        self,
        content_repository: ContentRepository,
        challenge_repository: ChallengeRepository,
        citation_repository: CitationRepository,
    ) -> ContributionService:
        """Provide contribution domain service."""
        return ContributionService(
            content_repository=content_repository,
            challenge_repository=challenge_repository,
            citation_repository=citation_repository,
        )

    @provide
    def get_engagement_service(
        self,
        vote_repository: VoteRepository,
        challenge_repository: ChallengeRepository,
    ) -> EngagementService:
        """Provide engagement domain service."""
        return EngagementService(
            vote_repository=vote_repository,
            challenge_repository=challenge_repository,
        )

    @provide
    def get_commendation_service(
        self,
        contribution_service: ContributionService,
        engagement_service: EngagementService,
        content_repository: ContentRepository,
        settings: CommendationSettings,
    ) -> CommendationService:
        """Provide commendation domain service."""
        return CommendationService(
            contribution_service=contribution_service,
            engagement_service=engagement_service,
            content_repository=content_repository,
            settings=settings,
        )
