"""
Unit tests for the use case base classes.
"""

import pytest

from hypecrew.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
    UseCaseResult,
)
from hypecrew.domain.models.base import (
    BackendServiceError,
    DomainEvent,
    FeatureNotImplementedError,
    ValidationError,
)
from hypecrew.domain.models.profile import Identity, UserRole


class TestUseCaseResult:
    """Test cases for UseCaseResult."""

    def test_success_result(self):
        """Test creating successful result."""
        result = UseCaseResult.success_result({"id": 1, "name": "test"})

        assert result.success is True
        assert result.data == {"id": 1, "name": "test"}
        assert result.error is None
        assert result.error_code is None

    def test_error_result(self):
        """Test creating error result."""
        result = UseCaseResult.error_result("Something went wrong", "TEST_ERROR")

        assert result.success is False
        assert result.data is None
        assert result.error == "Something went wrong"
        assert result.error_code == "TEST_ERROR"

    def test_from_validation_error_keeps_field(self):
        result = UseCaseResult.from_exception(ValidationError("Budget cannot be negative", "budget"))

        assert result.error_code == "VALIDATION_ERROR"
        assert result.field == "budget"

    def test_from_unknown_exception(self):
        result = UseCaseResult.from_exception(RuntimeError("boom"))

        assert result.error == "boom"
        assert result.error_code == "UNKNOWN_ERROR"


class EchoQuery(QueryUseCase[str, str]):
    def __init__(self, error=None):
        self.error = error

    async def _execute_business_logic(self, request):
        if self.error is not None:
            raise self.error
        return request.upper()


class TestBaseUseCase:

    @pytest.mark.asyncio
    async def test_success_carries_timing(self):
        result = await EchoQuery().execute("hype")

        assert result.success
        assert result.data == "HYPE"
        assert "execution_time_seconds" in result.metadata

    @pytest.mark.asyncio
    async def test_domain_errors_become_results(self):
        result = await EchoQuery(BackendServiceError("timeout")).execute("hype")

        assert not result.success
        assert result.error == "timeout"
        assert result.error_code == "BACKEND_ERROR"
        assert "failed_at" in result.metadata

    @pytest.mark.asyncio
    async def test_unexpected_errors_become_results(self):
        result = await EchoQuery(KeyError("x")).execute("hype")

        assert not result.success
        assert result.error_code == "UNKNOWN_ERROR"


class PingEvent(DomainEvent):
    @property
    def event_name(self):
        return "test.ping"


class RecordingCommand(AuthorizedUseCase, CommandUseCase[str, int]):
    async def _check_authorization(self, request):
        self._require_role(UserRole.CLIENT)

    async def _execute_command_logic(self, request):
        self.events.append(PingEvent())
        self.published_before = len(self.events)
        return len(request)


class TestAuthorizedCommand:

    @pytest.mark.asyncio
    async def test_requires_identity(self):
        result = await RecordingCommand().execute("abc")

        assert not result.success
        assert result.error_code == "BUSINESS_RULE_VIOLATION"

    @pytest.mark.asyncio
    async def test_requires_role(self):
        use_case = RecordingCommand()
        use_case.set_current_user(Identity(id="u1"), UserRole.PERFORMER)

        result = await use_case.execute("abc")

        assert not result.success
        assert "clients" in result.error

    @pytest.mark.asyncio
    async def test_events_are_published_and_cleared(self):
        use_case = RecordingCommand()
        use_case.set_current_user(Identity(id="u1"), UserRole.CLIENT)

        result = await use_case.execute("abc")

        assert result.success
        assert result.data == 3
        assert use_case.published_before == 1
        assert use_case.events == []
        assert use_case.current_user_id == "u1"


class TestFeatureNotImplemented:

    def test_message_and_code(self):
        exc = FeatureNotImplementedError("Messaging")

        assert exc.message == "Messaging is coming soon"
        assert exc.code == "NOT_IMPLEMENTED"
