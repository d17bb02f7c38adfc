"""User aggregate root.

Users sign in through the session provider; the row here carries their
public profile, privacy switches and email preferences.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from adages.domain.model.common import DomainModel
from adages.domain.value import UserId, UserRole


class EmailPreferences(DomainModel):
    """Which mailing-list emails the user receives. Everything is opt-out."""

    email_weekly_adage: bool = True
    email_events: bool = True
    email_site_updates: bool = True
    email_archive_additions: bool = True
    email_comment_notifications: bool = True


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: str
    username: Optional[str] = Field(default=None, max_length=50)
    display_name: Optional[str] = None
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole = UserRole.USER
    email_verified: bool = False
    profile_private: bool = False
    comments_friends_only: bool = False
    email_preferences: EmailPreferences = EmailPreferences()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
