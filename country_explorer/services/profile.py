"""Newest-user profile: fetch, pre-fill, submit."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import ProfileError
from ..models import UserProfile
from .remote_store import RemoteStoreClient

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Could not load user info."
SUBMIT_ERROR_MESSAGE = "Could not submit profile. Please try again."


@dataclass
class ProfileForm:
    """Field values and inline error for the profile form."""
    name: str = ""
    email: str = ""
    country_name: str = ""
    bio: str = ""
    error: str = ""
    newest: Optional[UserProfile] = field(default=None)

    def to_profile(self) -> UserProfile:
        return UserProfile(name=self.name, email=self.email, country_name=self.country_name, bio=self.bio)

    def fill(self, profile: UserProfile) -> None:
        self.name = profile.name or ""
        self.email = profile.email or ""
        self.country_name = profile.country_name or ""
        self.bio = profile.bio or ""

    def clear_fields(self) -> None:
        self.name = self.email = self.country_name = self.bio = ""

    def welcome_message(self) -> str:
        if self.newest and self.newest.name:
            return f"Welcome back, {self.newest.name}!"
        return "Welcome back, User!"


class ProfileService:
    def __init__(self, store: RemoteStoreClient, form: Optional[ProfileForm] = None):
        self.store = store
        self.form = form or ProfileForm()

    async def load_newest(self) -> Optional[UserProfile]:
        """Fetch the newest profile and pre-fill the form with it."""
        self.form.error = ""
        try:
            profile = await self.store.get_newest_user()
        except ProfileError as e:
            logger.warning("Newest user fetch failed: %s", e.message)
            self.form.error = LOAD_ERROR_MESSAGE
            return None

        self.form.newest = profile
        if profile is not None:
            self.form.fill(profile)
        return profile

    async def submit(self) -> bool:
        """Send the form; fields are cleared only when the store accepts it."""
        self.form.error = ""
        try:
            ack = await self.store.add_user(self.form.to_profile())
        except ProfileError as e:
            logger.error("Profile submit failed: %s", e.message)
            self.form.error = SUBMIT_ERROR_MESSAGE
            return False

        logger.info("Profile submitted: %s", ack.strip()[:80])
        await self.load_newest()
        self.form.clear_fields()
        return True
