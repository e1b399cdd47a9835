"""
Unit tests for the browser session registry.
"""

import pytest

from hypecrew.infrastructure.auth.session_manager import SessionManager


class TestSessionManager:

    @pytest.mark.asyncio
    async def test_new_session_is_started(self, session_factory):
        manager = SessionManager(session_factory)

        user_session = await manager.get_or_create(None)

        assert len(manager) == 1
        assert user_session.session_id in manager
        assert not user_session.store.loading
        assert not user_session.store.is_authenticated
        await manager.close_all()

    @pytest.mark.asyncio
    async def test_known_id_returns_same_session(self, session_factory):
        manager = SessionManager(session_factory)
        first = await manager.get_or_create(None)

        second = await manager.get_or_create(first.session_id)

        assert second is first
        assert len(session_factory.built) == 1
        await manager.close_all()

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_adopted(self, session_factory):
        manager = SessionManager(session_factory)

        user_session = await manager.get_or_create("forged-cookie-value")

        assert user_session.session_id != "forged-cookie-value"
        assert "forged-cookie-value" not in manager
        await manager.close_all()

    @pytest.mark.asyncio
    async def test_discard_closes_session(self, session_factory):
        manager = SessionManager(session_factory)
        user_session = await manager.get_or_create(None)

        await manager.discard(user_session.session_id)
        await manager.discard(user_session.session_id)
        await manager.discard(None)

        assert len(manager) == 0
        assert user_session.store.closed
        assert user_session.auth.listeners == []

    @pytest.mark.asyncio
    async def test_close_all_survives_failing_session(self, session_factory):
        manager = SessionManager(session_factory)
        broken = await manager.get_or_create(None)
        healthy = await manager.get_or_create(None)

        async def explode():
            raise RuntimeError("boom")

        broken.close = explode

        await manager.close_all()

        assert len(manager) == 0
        assert healthy.store.closed

    def test_get_without_id(self, session_factory):
        assert SessionManager(session_factory).get(None) is None


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class TestSessionExpiry:

    @pytest.mark.asyncio
    async def test_idle_sessions_are_closed(self, session_factory):
        clock = FakeClock()
        manager = SessionManager(session_factory, idle_timeout=60, clock=clock)
        idle = await manager.get_or_create(None)

        clock.now += 61
        fresh = await manager.get_or_create(None)

        assert idle.session_id not in manager
        assert idle.store.closed
        assert fresh.session_id in manager
        assert len(manager) == 1
        await manager.close_all()

    @pytest.mark.asyncio
    async def test_activity_keeps_session_alive(self, session_factory):
        clock = FakeClock()
        manager = SessionManager(session_factory, idle_timeout=60, clock=clock)
        user_session = await manager.get_or_create(None)

        for _ in range(3):
            clock.now += 45
            assert await manager.get_or_create(user_session.session_id) is user_session

        assert not user_session.store.closed
        await manager.close_all()

    @pytest.mark.asyncio
    async def test_expired_cookie_starts_new_session(self, session_factory):
        clock = FakeClock()
        manager = SessionManager(session_factory, idle_timeout=60, clock=clock)
        old = await manager.get_or_create(None)

        clock.now += 120
        new = await manager.get_or_create(old.session_id)

        assert new is not old
        assert old.store.closed
        await manager.close_all()

    @pytest.mark.asyncio
    async def test_cookieless_requests_cannot_grow_past_limit(self, session_factory):
        clock = FakeClock()
        manager = SessionManager(session_factory, max_sessions=5, clock=clock)
        sessions = []
        for _ in range(50):
            clock.now += 1
            sessions.append(await manager.get_or_create(None))

        assert len(manager) == 5
        assert all(s.store.closed for s in sessions[:45])
        assert all(s.session_id in manager for s in sessions[45:])
        await manager.close_all()

    @pytest.mark.asyncio
    async def test_limit_evicts_least_recently_used(self, session_factory):
        clock = FakeClock()
        manager = SessionManager(session_factory, max_sessions=2, clock=clock)
        first = await manager.get_or_create(None)
        clock.now += 1
        second = await manager.get_or_create(None)
        clock.now += 1
        await manager.get_or_create(first.session_id)

        clock.now += 1
        await manager.get_or_create(None)

        assert first.session_id in manager
        assert second.session_id not in manager
        await manager.close_all()
