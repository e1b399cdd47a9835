"""
Unit tests for Profile and PerformerProfile domain models.
"""

import pytest

from hypecrew.domain.models.base import ValidationError
from hypecrew.domain.models.profile import PerformerProfile, Profile, UserRole


class TestProfile:

    def test_display_name_prefers_full_name(self):
        profile = Profile(id="u1", email="sam@example.com", full_name="Sam Sparks")

        assert profile.display_name == "Sam Sparks"

    def test_display_name_falls_back_to_email(self):
        profile = Profile(id="u1", email="sam@example.com")

        assert profile.display_name == "sam"

    def test_role_helpers(self):
        performer = Profile(id="u1", role=UserRole.PERFORMER)
        client = Profile(id="u2", role=UserRole.CLIENT)

        assert performer.is_performer and not performer.is_client
        assert client.is_client and not client.is_performer

    def test_id_required(self):
        with pytest.raises(ValidationError):
            Profile(id=None)

    def test_equality_by_id(self):
        assert Profile(id="u1", full_name="A") == Profile(id="u1", full_name="B")
        assert len({Profile(id="u1"), Profile(id="u1")}) == 1


class TestPerformerProfile:

    def test_defaults(self):
        card = PerformerProfile(user_id="u1")

        assert card.rating is None
        assert card.total_gigs == 0
        assert card.specialties == []

    @pytest.mark.parametrize("rating", [-0.1, 5.1])
    def test_rating_range(self, rating):
        with pytest.raises(ValidationError):
            PerformerProfile(user_id="u1", rating=rating)

    def test_negative_hourly_rate(self):
        with pytest.raises(ValidationError):
            PerformerProfile(user_id="u1", hourly_rate=-1)
