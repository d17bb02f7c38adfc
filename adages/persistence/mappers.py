"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel

from adages.domain.model import (
    Challenge,
    ContentItem,
    ContentSummary,
    EmailPreferences,
    User,
    Vote,
)
from adages.domain.value import (
    ChallengeId,
    ChallengeStatus,
    ContentId,
    ContentType,
    UserId,
    UserRole,
    VoteId,
    VoteValue,
)
from adages.persistence.tables import CONTENT_TABLES


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def _flag(value: Any, default: bool) -> bool:
    """Read a nullable boolean column; NULL means the default."""
    if value is None:
        return default
    return bool(value)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    preferences = {
        field: _flag(row.get(field), True) for field in EmailPreferences.model_fields
    }
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        username=row.get("username"),
        display_name=row.get("display_name"),
        bio=row.get("bio"),
        profile_image_url=row.get("profile_image_url"),
        role=UserRole(row.get("role") or UserRole.USER.value),
        email_verified=_flag(row.get("email_verified"), False),
        profile_private=_flag(row.get("profile_private"), False),
        comments_friends_only=_flag(row.get("comments_friends_only"), False),
        email_preferences=EmailPreferences(**preferences),
        created_at=row["created_at"],
        updated_at=row.get("updated_at") or row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Email preferences are stored as one column each.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump(exclude={"email_preferences"}, mode="python")
    data["role"] = user.role.value
    data.update(user.email_preferences.model_dump())
    return data


def row_to_summary(content_type: ContentType, row: Dict[str, Any]) -> ContentSummary:
    """Convert a summary row to ContentSummary.

    The row must label the author column ``author_id`` and the display
    text column ``text``; category-specific columns are read if present.

    Args:
        content_type: Category the row was read from
        row: Database row as dict

    Returns:
        ContentSummary domain model
    """
    return ContentSummary(
        content_type=content_type,
        id=ContentId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row.get("text") or "",
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
        hidden_at=row.get("hidden_at"),
        slug=row.get("slug"),
        thread_id=_optional_uuid(row.get("thread_id")),
        target_type=row.get("target_type"),
        target_id=_optional_uuid(row.get("target_id")),
    )


def content_to_dict(item: ContentItem) -> Dict[str, Any]:
    """Convert a content item to a dict for its category's table.

    Renames ``author_id`` to the table's author column and drops fields
    the table has no column for.

    Args:
        item: Content item of any category

    Returns:
        Dict suitable for database insertion
    """
    content_table = CONTENT_TABLES[item.content_type]
    data = item.model_dump()
    data[content_table.author_column] = data.pop("author_id")
    return {k: v for k, v in data.items() if k in content_table.table.c}


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=ContentType(row["target_type"]),
        target_id=ContentId(_uuid(row["target_id"])),
        value=VoteValue(row["value"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    data = vote.model_dump()
    data["target_type"] = vote.target_type.value
    data["value"] = int(vote.value)
    return data


def row_to_challenge(row: Dict[str, Any]) -> Challenge:
    """Convert database row to Challenge domain model.

    Args:
        row: Database row as dict

    Returns:
        Challenge domain model
    """
    return Challenge(
        id=ChallengeId(_uuid(row["id"])),
        challenger_id=UserId(_uuid(row["challenger_id"])),
        target_type=ContentType(row["target_type"]),
        target_id=ContentId(_uuid(row["target_id"])),
        status=ChallengeStatus(row["status"]),
        reason=row.get("reason"),
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def challenge_to_dict(challenge: Challenge) -> Dict[str, Any]:
    """Convert Challenge domain model to database dict.

    Args:
        challenge: Challenge domain model

    Returns:
        Dict suitable for database insertion
    """
    data = challenge.model_dump()
    data["target_type"] = challenge.target_type.value
    data["status"] = challenge.status.value
    return data


def model_to_dict(model: BaseModel) -> Dict[str, Any]:
    """Convert a plain domain model (citation, saved adage, collection).

    Args:
        model: Domain model whose fields match its table's columns

    Returns:
        Dict suitable for database insertion
    """
    return model.model_dump()
