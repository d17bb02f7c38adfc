"""User profile and statistics routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status

from adages.application.usecase.user import GetCurrentUserUseCase, GetUserStatsUseCase
from adages.application.usecase.user.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from adages.application.usecase.user.get_user_stats import GetUserStatsRequest
from adages.application.usecase.user.stats import CommendationStatsResponse
from adages.config import AuthSettings
from adages.domain.error import NotFoundError
from adages.interface.api.response import ApiResponse
from adages.util.jwt import JWTError

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


def _session_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Session token from the auth cookie, or a Bearer Authorization header."""
    token = request.cookies.get(auth_settings.cookie_name)
    if token:
        return token

    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials
    return None


@router.get("/me", response_model=ApiResponse[GetCurrentUserResponse])
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> ApiResponse[GetCurrentUserResponse]:
    """Get the signed-in user's profile, activity and commendation stats.

    Args:
        request: Incoming request (session cookie or Authorization header)
        get_current_user_use_case: Get current user use case from DI
        auth_settings: Authentication settings from DI

    Returns:
        Envelope with the profile and stats

    Raises:
        HTTPException: 401 if not signed in, 404 if the user row is missing,
            500 on unexpected errors

    Example:
        GET /api/users/me
        Cookie: auth_token=...

        Response:
        {
            "success": true,
            "data": {
                "id": "...",
                "email": "editor@americanadages.org",
                "stats": {"saved_adages": 3, "collections": 1, "comments": 2},
                "commendationStats": {
                    "reports": {"received": 2, "accepted": 1},
                    "votes": {"upvotes": 6, "downvotes": 1, "net": 5},
                    "contributions": {"citations": 2, "challenges": 0, ...},
                    "popularPosts": [{"type": "adage", "score": 1, ...}]
                }
            }
        }
    """
    token = _session_token(request, auth_settings)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )

    try:
        profile = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except Exception as e:
        logfire.exception("Failed to fetch current user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to fetch user data",
        )

    return ApiResponse[GetCurrentUserResponse].ok(profile)


@router.get("/{user_id}/stats", response_model=ApiResponse[CommendationStatsResponse])
async def get_user_stats(
    user_id: UUID,
    get_user_stats_use_case: FromDishka[GetUserStatsUseCase],
) -> ApiResponse[CommendationStatsResponse]:
    """Get any user's commendation statistics.

    Args:
        user_id: User ID
        get_user_stats_use_case: Get user stats use case from DI

    Returns:
        Envelope with reports, votes, contributions and popular posts

    Raises:
        HTTPException: 404 if the user is missing or deleted, 500 on
            unexpected errors
    """
    try:
        stats = await get_user_stats_use_case.execute(
            GetUserStatsRequest(user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except Exception as e:
        logfire.exception("Failed to fetch user stats", user_id=str(user_id))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to fetch user stats",
        )

    return ApiResponse[CommendationStatsResponse].ok(stats)
