"""
Shared fixtures: in-memory stand-ins for the auth service and repositories.
"""

import datetime as dt
from typing import Dict, List, Optional

import pytest

from hypecrew.application.session.auth_gateway import AuthEvent, AuthGateway
from hypecrew.application.session.profile_resolver import ProfileResolver
from hypecrew.application.session.session_store import SessionStore
from hypecrew.domain.models.application import GigApplication
from hypecrew.domain.models.base import AuthenticationError, EntityNotFoundError
from hypecrew.domain.models.gig import Gig
from hypecrew.domain.models.profile import (
    AuthSession,
    Identity,
    PerformerProfile,
    Profile,
    UserRole,
)
from hypecrew.domain.repositories import (
    ApplicationRepository,
    GigRepository,
    ProfileRepository,
)
from hypecrew.infrastructure.auth.session_manager import UserSession


def make_session(user_id: str, email: Optional[str] = None) -> AuthSession:
    return AuthSession(
        identity=Identity(id=user_id, email=email or f"{user_id}@example.com", email_verified=True),
        access_token=f"token-{user_id}",
        refresh_token=f"refresh-{user_id}",
    )


class FakeSubscription:
    def __init__(self, gateway, listener):
        self.gateway = gateway
        self.listener = listener

    def unsubscribe(self):
        if self.listener in self.gateway.listeners:
            self.gateway.listeners.remove(self.listener)


class FakeAuthGateway(AuthGateway):
    """Auth service that keeps accounts in memory and emits events synchronously."""

    def __init__(self, session: Optional[AuthSession] = None):
        self.session = session
        self.listeners = []
        self.accounts: Dict[str, tuple] = {}
        self.sign_ups: List[dict] = []
        self.sign_out_calls = 0

    def add_account(self, email: str, password: str, user_id: str) -> AuthSession:
        session = make_session(user_id, email)
        self.accounts[email] = (password, session)
        return session

    def emit(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        for listener in list(self.listeners):
            listener(event, session)

    async def get_session(self):
        return self.session

    async def sign_up(self, email, password, display_name, role):
        self.sign_ups.append({"email": email, "display_name": display_name, "role": role})
        session = make_session(f"new-{len(self.sign_ups)}", email)
        self.session = session
        self.emit(AuthEvent.SIGNED_UP, session)
        return session

    async def sign_in_with_password(self, email, password):
        account = self.accounts.get(email)
        if account is None or account[0] != password:
            raise AuthenticationError("Invalid login credentials")
        self.session = account[1]
        self.emit(AuthEvent.SIGNED_IN, self.session)
        return self.session

    async def sign_out(self):
        self.sign_out_calls += 1
        self.session = None
        self.emit(AuthEvent.SIGNED_OUT, None)

    def on_auth_state_change(self, listener):
        self.listeners.append(listener)
        return FakeSubscription(self, listener)


class FakeProfileRepository(ProfileRepository):
    """
    Profiles by id. `misses[id] = n` makes the first n fetches of `id`
    report not-found even if the profile exists.
    """

    def __init__(self, profiles=()):
        self.profiles: Dict[str, Profile] = {p.id: p for p in profiles}
        self.performer_profiles: Dict[str, PerformerProfile] = {}
        self.misses: Dict[str, int] = {}
        self.error: Optional[Exception] = None
        self.calls: List[str] = []

    def add(self, profile: Profile) -> Profile:
        self.profiles[profile.id] = profile
        return profile

    async def get_by_id(self, profile_id):
        self.calls.append(profile_id)
        if self.error is not None:
            raise self.error
        if self.misses.get(profile_id, 0) > 0:
            self.misses[profile_id] -= 1
            raise EntityNotFoundError("Profile", profile_id)
        if profile_id not in self.profiles:
            raise EntityNotFoundError("Profile", profile_id)
        return self.profiles[profile_id]

    async def find_performer_profile(self, user_id):
        return self.performer_profiles.get(user_id)


class FakeGigRepository(GigRepository):
    def __init__(self, gigs=()):
        self.gigs: List[Gig] = list(gigs)
        self.inserted: List[Gig] = []

    async def list_open(self):
        return [gig for gig in self.gigs if gig.is_open]

    async def insert(self, gig):
        gig.id = f"gig-{len(self.inserted) + 1}"
        gig.created_at = dt.datetime(2025, 1, 1, tzinfo=dt.timezone.utc)
        self.inserted.append(gig)
        self.gigs.insert(0, gig)
        return gig

    async def get_by_id(self, gig_id):
        for gig in self.gigs:
            if gig.id == gig_id:
                return gig
        raise EntityNotFoundError("Gig", gig_id)


class FakeApplicationRepository(ApplicationRepository):
    def __init__(self, applications=()):
        self.applications: List[GigApplication] = list(applications)

    async def list_for_performer(self, performer_id):
        return [a for a in self.applications if a.performer_id == performer_id]


class SleepRecorder:
    """Drop-in for asyncio.sleep that records delays and returns at once."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def client_profile():
    return Profile(id="client-1", email="host@example.com", full_name="Party Host", role=UserRole.CLIENT)


@pytest.fixture
def performer_profile():
    return Profile(id="performer-1", email="hype@example.com", full_name="MC Hype", role=UserRole.PERFORMER)


@pytest.fixture
def auth_gateway():
    return FakeAuthGateway()


@pytest.fixture
def profile_repository(client_profile, performer_profile):
    return FakeProfileRepository([client_profile, performer_profile])


@pytest.fixture
def gig_repository():
    return FakeGigRepository()


@pytest.fixture
def application_repository():
    return FakeApplicationRepository()


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def session_for():
    """Factory for AuthSession values."""
    return make_session


@pytest.fixture
def make_gig():
    """Factory for open gigs with sensible defaults."""
    def _make_gig(**overrides):
        values = dict(
            id="gig-x",
            client_id="client-1",
            title="Birthday bash",
            description="Need someone to keep the crowd going",
            event_type="Birthday Party",
            location="Austin, TX",
            date=dt.date(2025, 6, 1),
            start_time=dt.time(18, 0),
            budget=300.0,
        )
        values.update(overrides)
        return Gig(**values)
    return _make_gig


class InMemorySessionFactory:
    """
    Session factory for SessionManager that wires every browser session to
    the same in-memory repositories. Each session gets its own auth gateway
    seeded with `accounts`.
    """

    def __init__(self, profiles, gigs, applications, accounts=()):
        self.profiles = profiles
        self.gigs = gigs
        self.applications = applications
        self.accounts = list(accounts)
        self.built: List[UserSession] = []

    def __call__(self, session_id: str) -> UserSession:
        auth = FakeAuthGateway()
        for email, password, user_id in self.accounts:
            auth.add_account(email, password, user_id)
        user_session = UserSession(
            session_id=session_id,
            auth=auth,
            profiles=self.profiles,
            gigs=self.gigs,
            applications=self.applications,
            store=SessionStore(auth, ProfileResolver(self.profiles, retry_delay=0), signup_delay=0),
        )
        self.built.append(user_session)
        return user_session


@pytest.fixture
def session_factory(profile_repository, gig_repository, application_repository):
    return InMemorySessionFactory(
        profile_repository,
        gig_repository,
        application_repository,
        accounts=[
            ("host@example.com", "secret", "client-1"),
            ("hype@example.com", "secret", "performer-1"),
        ],
    )
