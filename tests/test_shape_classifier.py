"""Tests for payload classification and recursive dispatch."""

import pytest

from constants.profile_fields import DEFAULT_ICON
from schema_names import K
from shape_classifier import (
    _HANDLERS,
    PayloadShape,
    classify,
    decode_json_strict,
    format_key,
    icon_for_key,
    render_payload,
)
from view_nodes import GenericList, ObjectSectionList, ResearcherGrid, TextNode, TextView


class TestClassify:

    @pytest.mark.parametrize(
        "payload, shape",
        [
            ("text", PayloadShape.TEXT),
            (5, PayloadShape.PRIMITIVE),
            (None, PayloadShape.PRIMITIVE),
            (True, PayloadShape.PRIMITIVE),
            ([], PayloadShape.GENERIC_ARRAY),
            ([1, "a"], PayloadShape.GENERIC_ARRAY),
            ([{"name": ""}], PayloadShape.GENERIC_ARRAY),
            ([1, {"email": "a@b.co"}], PayloadShape.PROFILE_ARRAY),
            ({"Institution": "X"}, PayloadShape.PROFILE_OBJECT),
            ({"foo": 1}, PayloadShape.GENERIC_OBJECT),
            ({}, PayloadShape.GENERIC_OBJECT),
        ],
    )
    def test_shapes(self, payload, shape):
        assert classify(payload) is shape

    def test_every_shape_has_a_handler(self):
        assert set(_HANDLERS) == set(PayloadShape)


class TestDecodeJsonStrict:

    def test_valid(self):
        assert decode_json_strict('{"a": [1]}') == (True, {"a": [1]})

    def test_invalid(self):
        assert decode_json_strict("[1,") == (False, None)

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", "-Infinity"])
    def test_rejects_non_standard_constants(self, text):
        assert decode_json_strict(text)[0] is False


class TestKeyFormatting:

    def test_format_key(self):
        assert format_key("research_areas") == "Research Areas"
        assert format_key("match-score") == "Match Score"

    def test_icon_for_key(self):
        assert icon_for_key("contact_email") == K.ICON_MAIL
        assert icon_for_key("homepage_url") == K.ICON_GLOBE
        assert icon_for_key("Researcher") == K.ICON_PERSON
        assert icon_for_key("misc") == DEFAULT_ICON


class TestRenderPayload:

    def test_json_string_profile_array(self):
        res = render_payload('[{"name": "A", "score": 90}]')
        assert res.ok
        assert isinstance(res.view, ResearcherGrid)
        assert res.view.profiles[0].name == "A"
        assert res.view.profiles[0].score == "90%"

    def test_single_profile_object(self):
        view = render_payload({"name": "A", "institution": "MIT"}).view
        assert isinstance(view, ResearcherGrid)
        assert len(view.profiles) == 1

    def test_free_text(self):
        view = render_payload("Dr. Smith works at MIT University. Email: s@mit.edu").view
        assert isinstance(view, TextView)
        assert view.summary.counts == ((K.RESEARCHER, 1), (K.INSTITUTION, 1), (K.EMAIL, 1))
        assert view.contacts == ("s@mit.edu",)

    def test_publication_only_summary(self):
        view = render_payload("Read the JOURNAL entry.").view
        assert view.summary.counts == ((K.PUBLICATION, 1),)
        assert view.contacts == ()

    def test_text_without_patterns_has_no_summary(self):
        view = render_payload("not json at all").view
        assert view.summary is None
        assert view.sections[0].plain_text() == "not json at all"

    def test_malformed_json_falls_back_to_text(self):
        view = render_payload('{"name": "A"').view
        assert isinstance(view, TextView)

    def test_empty_string(self):
        view = render_payload("").view
        assert isinstance(view, TextView)
        assert len(view.sections) == 1
        assert view.sections[0].nodes == ()

    @pytest.mark.parametrize("payload, text", [(42, "42"), ("42", "42"), (True, "true"), (None, "null"), (1.5, "1.5")])
    def test_primitives(self, payload, text):
        view = render_payload(payload).view
        assert isinstance(view, TextView)
        assert view.summary is None
        assert view.sections[0].plain_text() == text

    def test_negative_number_is_not_a_bullet(self):
        view = render_payload(-1).view
        assert view.sections[0].nodes == (TextNode("-1"),)

    def test_generic_object_sections(self):
        view = render_payload({"results": [{"name": "A"}], "note": "hi"}).view
        assert isinstance(view, ObjectSectionList)
        assert [s.key for s in view.sections] == ["results", "note"]
        assert view.sections[0].label == "Results"
        assert isinstance(view.sections[0].body, ResearcherGrid)
        assert isinstance(view.sections[1].body, TextView)

    def test_nested_profile_has_no_default_name(self):
        view = render_payload({"group": [{"email": "a@b.co"}]}).view
        assert view.sections[0].body.profiles[0].name is None

    def test_generic_list_recurses(self):
        view = render_payload([1, [2, "x"]]).view
        assert isinstance(view, GenericList)
        assert isinstance(view.items[1], GenericList)

    def test_failure_location_is_threaded(self):
        res = render_payload({"data": {"people": [{"name": "A", "papers": "x"}]}})
        assert not res.ok
        assert res.failure.location == "$.data.people[0].papers"

    def test_deterministic(self):
        payload = {"a": ["Dr. X at Y University.", {"name": "Z"}]}
        assert render_payload(payload) == render_payload(payload)
