"""Tests for researcher profile normalization."""

import pytest

from modules.profiles.profile_renderer import contact_action, display_text, is_present, render_profile, resolve_field
from schema_names import K


class TestPresence:

    @pytest.mark.parametrize("value", [None, "", [], {}, ()])
    def test_absent_values(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", [0, False, "x", [1], {"a": 1}])
    def test_present_values(self, value):
        assert is_present(value) is True

    def test_display_text(self):
        assert display_text("abc") == "abc"
        assert display_text(87) == "87"
        assert display_text(True) == "true"
        assert display_text({"a": 1}) == '{"a": 1}'


class TestResolveField:
    """Alias lookup: first present alias wins."""

    def test_first_alias_wins(self):
        assert resolve_field({"name": "A", "author": "B"}, K.F_NAME) == ("name", "A")

    def test_empty_alias_is_skipped(self):
        assert resolve_field({"name": "", "researcher": "B"}, K.F_NAME) == ("researcher", "B")

    def test_case_insensitive_fallback(self):
        assert resolve_field({"EMAIL": "x@y.z"}, K.F_EMAIL) == ("EMAIL", "x@y.z")

    def test_missing(self):
        assert resolve_field({"foo": 1}, K.F_SCORE) == (None, None)


class TestRenderProfile:

    def test_aliases_and_score_suffix(self):
        res = render_profile({"researcher": "A. Lee", "affiliation": "X Lab", "rating": 87})
        assert res.ok
        view = res.view
        assert view.name == "A. Lee"
        assert view.institution == "X Lab"
        assert view.score == "87%"
        assert view.email is None
        assert view.contact is None

    def test_zero_score_is_shown(self):
        assert render_profile({"name": "A", "score": 0}).view.score == "0%"

    def test_contact_action(self):
        view = render_profile({"name": "A", "email": "a.b@uni.edu"}).view
        assert view.contact == contact_action("a.b@uni.edu")
        assert view.contact.href == "mailto:a.b@uni.edu?subject=Research%20Collaboration%20Opportunity"

    def test_publications_capped_and_titles_used(self):
        record = {"name": "A", "papers": [{"title": "P1"}, "P2", "P3", "P4"]}
        assert render_profile(record).view.publications == ("P1", "P2", "P3")

    def test_research_areas(self):
        view = render_profile({"name": "A", "fields": ["ML", "Robotics"]}).view
        assert view.research_areas == ("ML", "Robotics")

    def test_title_and_reasoning(self):
        view = render_profile({"name": "A", "position": "Lecturer", "rationale": "Good fit"}).view
        assert view.title == "Lecturer"
        assert view.reasoning == "Good fit"

    def test_unknown_name_top_level_only(self):
        assert render_profile({"email": "a@b.co"}).view.name == K.UNKNOWN_RESEARCHER
        assert render_profile({"email": "a@b.co"}, nested=True).view.name is None

    def test_non_mapping_record(self):
        res = render_profile("not a record")
        assert res.ok
        assert res.view.name == K.UNKNOWN_RESEARCHER

    def test_non_list_publications_fail(self):
        res = render_profile({"name": "N", "publications": 5}, location="$[2]")
        assert not res.ok
        assert res.failure.location == "$[2].publications"

    def test_string_research_areas_fail(self):
        res = render_profile({"name": "N", "areas": "ML"})
        assert not res.ok
        assert res.failure.location == "$.areas"

    def test_deterministic(self):
        record = {"name": "A", "publications": ["x"], "score": 3}
        assert render_profile(record) == render_profile(record)
