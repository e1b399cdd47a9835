"""
Unit tests for ProfileResolver.
"""

import pytest

from hypecrew.application.session.profile_resolver import ProfileResolver
from hypecrew.domain.models.base import BackendServiceError, EntityNotFoundError
from hypecrew.domain.models.profile import Profile


class TestProfileResolver:

    @pytest.mark.asyncio
    async def test_found_first_time(self, profile_repository, sleep_recorder):
        resolver = ProfileResolver(profile_repository, max_attempts=5, retry_delay=2.0, sleep=sleep_recorder)

        profile = await resolver.resolve("client-1")

        assert profile.id == "client-1"
        assert profile_repository.calls == ["client-1"]
        assert sleep_recorder.delays == []

    @pytest.mark.asyncio
    async def test_retries_until_profile_appears(self, profile_repository, sleep_recorder):
        profile_repository.add(Profile(id="new-user", full_name="Fresh"))
        profile_repository.misses["new-user"] = 2
        resolver = ProfileResolver(profile_repository, max_attempts=5, retry_delay=2.0, sleep=sleep_recorder)

        profile = await resolver.resolve("new-user")

        assert profile.full_name == "Fresh"
        assert len(profile_repository.calls) == 3
        assert sleep_recorder.delays == [2.0, 2.0]

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, profile_repository, sleep_recorder):
        resolver = ProfileResolver(profile_repository, max_attempts=3, retry_delay=0.5, sleep=sleep_recorder)

        with pytest.raises(EntityNotFoundError):
            await resolver.resolve("ghost")

        assert profile_repository.calls == ["ghost"] * 3
        assert sleep_recorder.delays == [0.5, 0.5]

    @pytest.mark.asyncio
    async def test_per_call_attempt_budget(self, profile_repository, sleep_recorder):
        resolver = ProfileResolver(profile_repository, max_attempts=5, retry_delay=0, sleep=sleep_recorder)

        with pytest.raises(EntityNotFoundError):
            await resolver.resolve("ghost", max_attempts=1)

        assert profile_repository.calls == ["ghost"]
        assert sleep_recorder.delays == []

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self, profile_repository, sleep_recorder):
        profile_repository.error = BackendServiceError("permission denied for table profiles")
        resolver = ProfileResolver(profile_repository, max_attempts=5, retry_delay=1.0, sleep=sleep_recorder)

        with pytest.raises(BackendServiceError):
            await resolver.resolve("client-1")

        assert len(profile_repository.calls) == 1

    @pytest.mark.asyncio
    async def test_fetch_never_retries(self, profile_repository, sleep_recorder):
        resolver = ProfileResolver(profile_repository, sleep=sleep_recorder)

        with pytest.raises(EntityNotFoundError):
            await resolver.fetch("ghost")

        assert profile_repository.calls == ["ghost"]

    def test_invalid_configuration(self, profile_repository):
        with pytest.raises(ValueError):
            ProfileResolver(profile_repository, max_attempts=0)
        with pytest.raises(ValueError):
            ProfileResolver(profile_repository, retry_delay=-1)
