"""
Unit tests for gig use cases.
"""

import datetime as dt

import pytest

from hypecrew.application.dto.gig_dto import GigFilterDTO, GigFormDTO
from hypecrew.application.use_cases.gig_use_cases import ListOpenGigsUseCase, PostGigUseCase
from hypecrew.domain.models.gig import GigStatus
from hypecrew.domain.models.profile import Identity, UserRole


def valid_form(**overrides):
    values = dict(
        title="Birthday bash",
        description="Keep the crowd going all night",
        event_type="Birthday Party",
        location="Austin, TX",
        date="2025-06-01",
        start_time="18:00",
        budget="300",
    )
    values.update(overrides)
    return GigFormDTO(**values)


def post_use_case(gig_repository, role=UserRole.CLIENT, user_id="client-1"):
    use_case = PostGigUseCase(gig_repository)
    use_case.set_current_user(Identity(id=user_id), role)
    return use_case


class TestPostGigUseCase:

    @pytest.mark.asyncio
    async def test_posts_open_gig_owned_by_caller(self, gig_repository):
        result = await post_use_case(gig_repository).execute(valid_form())

        assert result.success
        assert len(gig_repository.inserted) == 1
        gig = gig_repository.inserted[0]
        assert gig.client_id == "client-1"
        assert gig.status is GigStatus.OPEN
        assert gig.date == dt.date(2025, 6, 1)
        assert gig.start_time == dt.time(18, 0)
        assert gig.end_time is None
        assert gig.budget == 300.0
        assert result.data.id == "gig-1"
        assert result.data.status == "open"

    @pytest.mark.asyncio
    async def test_negative_budget_is_rejected_without_insert(self, gig_repository):
        result = await post_use_case(gig_repository).execute(valid_form(budget="-5"))

        assert not result.success
        assert result.error_code == "VALIDATION_ERROR"
        assert result.field == "budget"
        assert gig_repository.inserted == []

    @pytest.mark.asyncio
    async def test_requirements_cleaned_and_status_forced_open(self, gig_repository):
        form = valid_form(requirements=["", "Must arrive early", ""], status="cancelled")

        result = await post_use_case(gig_repository).execute(form)

        assert result.success
        gig = gig_repository.inserted[0]
        assert gig.requirements == ["Must arrive early"]
        assert gig.status is GigStatus.OPEN

    @pytest.mark.asyncio
    async def test_end_time_and_styles(self, gig_repository):
        form = valid_form(end_time="23:30", hype_styles_wanted=["High Energy"])

        await post_use_case(gig_repository).execute(form)

        gig = gig_repository.inserted[0]
        assert gig.end_time == dt.time(23, 30)
        assert gig.hype_styles_wanted == ["High Energy"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["title", "description", "event_type", "location", "date", "start_time", "budget"])
    async def test_required_fields(self, gig_repository, field):
        result = await post_use_case(gig_repository).execute(valid_form(**{field: "  "}))

        assert not result.success
        assert result.field == field
        assert gig_repository.inserted == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("overrides,field", [
        ({"budget": "lots"}, "budget"),
        ({"budget": "nan"}, "budget"),
        ({"date": "06/01/2025"}, "date"),
        ({"start_time": "6pm"}, "start_time"),
        ({"end_time": "late"}, "end_time"),
    ])
    async def test_malformed_values(self, gig_repository, overrides, field):
        result = await post_use_case(gig_repository).execute(valid_form(**overrides))

        assert result.error_code == "VALIDATION_ERROR"
        assert result.field == field
        assert gig_repository.inserted == []

    @pytest.mark.asyncio
    async def test_performers_cannot_post(self, gig_repository):
        result = await post_use_case(gig_repository, role=UserRole.PERFORMER).execute(valid_form())

        assert result.error_code == "BUSINESS_RULE_VIOLATION"
        assert gig_repository.inserted == []

    @pytest.mark.asyncio
    async def test_requires_sign_in(self, gig_repository):
        result = await PostGigUseCase(gig_repository).execute(valid_form())

        assert not result.success
        assert gig_repository.inserted == []


class TestListOpenGigsUseCase:

    @pytest.mark.asyncio
    async def test_filters_and_counts(self, gig_repository, make_gig):
        gig_repository.gigs = [
            make_gig(id="1", title="Wedding MC"),
            make_gig(id="2", title="Esports finals"),
            make_gig(id="3", title="Closed wedding", status=GigStatus.COMPLETED),
        ]
        use_case = ListOpenGigsUseCase(gig_repository)
        use_case.set_current_user(Identity(id="performer-1"), UserRole.PERFORMER)

        result = await use_case.execute(GigFilterDTO(search="wedding"))

        assert result.success
        assert [g.id for g in result.data.gigs] == ["1"]
        assert result.data.total_open == 2
        assert result.data.show_apply_button

    @pytest.mark.asyncio
    async def test_clients_get_no_apply_button(self, gig_repository, make_gig):
        gig_repository.gigs = [make_gig(id="1")]
        use_case = ListOpenGigsUseCase(gig_repository)
        use_case.set_current_user(Identity(id="client-1"), UserRole.CLIENT)

        result = await use_case.execute(GigFilterDTO())

        assert len(result.data.gigs) == 1
        assert not result.data.show_apply_button
