"""
Unit tests for gig filtering.
"""

from hypecrew.domain.services.gig_filter import GigFilter, filter_gigs


class TestFilterGigs:

    def _gigs(self, make_gig):
        return [
            make_gig(id="1", title="Wedding MC needed", event_type="Wedding", hype_styles_wanted=["Wedding"]),
            make_gig(id="2", title="Esports finals", event_type="Gaming Tournament",
                     hype_styles_wanted=["Gaming/Esports", "High Energy"]),
            make_gig(id="3", title="Reception", description="Our WEDDING afterparty", event_type="Other"),
            make_gig(id="4", title="Launch night", location="Wedding Hall, Austin", event_type="Product Launch"),
        ]

    def test_empty_filter_returns_input_in_order(self, make_gig):
        gigs = self._gigs(make_gig)

        result = filter_gigs(gigs, GigFilter())

        assert [g.id for g in result] == ["1", "2", "3", "4"]
        assert filter_gigs(gigs) == gigs

    def test_blank_strings_mean_no_filter(self, make_gig):
        gigs = self._gigs(make_gig)

        assert filter_gigs(gigs, GigFilter(text="", event_type="", style="")) == gigs

    def test_text_is_case_insensitive_over_title_description_location(self, make_gig):
        gigs = self._gigs(make_gig)

        result = filter_gigs(gigs, GigFilter(text="wedding"))

        assert [g.id for g in result] == ["1", "3", "4"]

    def test_event_type_is_exact(self, make_gig):
        gigs = self._gigs(make_gig)

        assert [g.id for g in filter_gigs(gigs, GigFilter(event_type="Wedding"))] == ["1"]
        assert filter_gigs(gigs, GigFilter(event_type="wedding")) == []

    def test_style_membership(self, make_gig):
        gigs = self._gigs(make_gig)

        result = filter_gigs(gigs, GigFilter(style="High Energy"))

        assert [g.id for g in result] == ["2"]

    def test_filters_combine(self, make_gig):
        gigs = self._gigs(make_gig)

        result = filter_gigs(gigs, GigFilter(text="wedding", event_type="Other"))

        assert [g.id for g in result] == ["3"]

    def test_idempotent(self, make_gig):
        gigs = self._gigs(make_gig)
        gig_filter = GigFilter(text="wedding")

        once = filter_gigs(gigs, gig_filter)

        assert filter_gigs(once, gig_filter) == once
