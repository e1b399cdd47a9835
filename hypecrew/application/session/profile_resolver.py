"""
Profile resolution with retry.

After signup the profile row is written by a server-side trigger, so the
first fetches may legitimately find nothing. The resolver polls with a
fixed delay until the row shows up or the attempt budget runs out.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from hypecrew.domain.models.base import EntityNotFoundError
from hypecrew.domain.models.profile import Profile
from hypecrew.domain.repositories.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class ProfileResolver:
    """Fetches a profile, retrying only on the not-found condition."""

    def __init__(
        self,
        repository: ProfileRepository,
        max_attempts: int = 5,
        retry_delay: float = 2.0,
        sleep: Sleep = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if retry_delay < 0:
            raise ValueError("retry_delay cannot be negative")
        self.repository = repository
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._sleep = sleep

    async def fetch(self, identity_id: str) -> Profile:
        """Single fetch, no retry."""
        return await self.repository.get_by_id(identity_id)

    async def resolve(self, identity_id: str, max_attempts: Optional[int] = None) -> Profile:
        """
        Fetch the profile of `identity_id`, polling while it does not exist.

        Makes at most `max_attempts` fetches (defaults to the resolver's
        budget). Raises the last EntityNotFoundError when the budget is spent;
        any other error is raised immediately.
        """
        attempts = max_attempts if max_attempts is not None else self.max_attempts
        if attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        attempt = 0
        while True:
            attempt += 1
            logger.debug(f"Fetching profile for user {identity_id}, attempt {attempt}/{attempts}")
            try:
                profile = await self.repository.get_by_id(identity_id)
            except EntityNotFoundError:
                if attempt >= attempts:
                    logger.warning(
                        f"Profile for user {identity_id} still missing after {attempts} attempts"
                    )
                    raise
                logger.info(
                    f"Profile not found, retrying in {self.retry_delay}s ({attempt}/{attempts})"
                )
                await self._sleep(self.retry_delay)
                continue

            logger.info(f"Profile found for user {identity_id} on attempt {attempt}")
            return profile
