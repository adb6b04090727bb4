"""Tests for content pattern detection and text segmentation."""

from modules.detection.pattern_detector import EMPTY_PATTERNS, detect
from modules.detection.text_segmenter import segment
from schema_names import K


class TestDetect:
    """Category extraction over free text."""

    def test_emails_in_order_with_duplicates(self):
        p = detect("Write to jane.doe@example.org, then bob@lab.edu, then jane.doe@example.org.")
        assert p.emails == ("jane.doe@example.org", "bob@lab.edu", "jane.doe@example.org")

    def test_institution_clause_starts_at_keyword(self):
        p = detect("She works at Stanford University in California. Nothing else")
        assert p.institutions == ("University in California.",)

    def test_researcher_clause(self):
        p = detect("Dr. Smith studies cells. Next sentence")
        assert p.researchers == ("Dr. Smith studies cells.",)

    def test_scores_keep_percent_suffix(self):
        p = detect("Match score 87% with 3 matches")
        assert p.scores == ("87%", "3")

    def test_url_and_phone(self):
        p = detect("See https://example.org/lab or call 555-123-4567")
        assert p.urls == ("https://example.org/lab",)
        assert p.phones == ("555-123-4567",)

    def test_location_acronyms_are_case_sensitive(self):
        assert detect("Tell us more.").locations == ()
        assert detect("the usa team.").locations == ()
        assert detect("Based in the US now.").locations == ("US now.",)

    def test_location_names_ignore_case(self):
        assert detect("The lab moved to Canada last year.").locations == ("Canada last year.",)
        assert detect("She relocated to GERMANY in 2020.").locations == ("GERMANY in 2020.",)

    def test_publication_clauses_ignore_case(self):
        p = detect("Their paper appeared in Nature! See the ARXIV preprint now.")
        assert p.publications == ("paper appeared in Nature!", "ARXIV preprint now.")

    def test_publication_journal_keyword(self):
        assert detect("Published in a Journal of AI.").publications == ("Journal of AI.",)

    def test_phone_separators(self):
        assert detect("call 555.123.4567").phones == ("555.123.4567",)
        assert detect("call 5551234567").phones == ("5551234567",)

    def test_overlaps_are_kept(self):
        p = detect("Professor Ada at the Research Lab.")
        assert p.researchers == ("Professor Ada at the Research Lab.",)
        assert p.institutions == ("Lab.",)

    def test_no_match_is_empty_not_error(self):
        p = detect("plain words only")
        assert p.is_empty()
        assert p.counts() == {c: 0 for c in K.CATEGORIES}

    def test_empty_text(self):
        assert detect("") is EMPTY_PATTERNS

    def test_get_by_category(self):
        p = detect("mail a@b.io")
        assert p.get(K.EMAIL) == ("a@b.io",)
        assert p.get(K.PHONE) == ()


class TestSegment:
    """Section boundaries."""

    def test_blank_line_boundary(self):
        assert segment("first part\n\nsecond part") == ["first part", "second part"]

    def test_numbered_list_boundary(self):
        assert segment("intro\n1. first\n2. second") == ["intro", "1. first", "2. second"]

    def test_bold_and_heading_boundary(self):
        assert segment("intro\n**Bold** part\n## Heading") == ["intro", "**Bold** part", "## Heading"]

    def test_whitespace_only_line_counts_as_blank(self):
        assert segment("a\n   \nb") == ["a", "b"]

    def test_single_section_returns_input(self):
        assert segment("one line\nstill one section") == ["one line\nstill one section"]

    def test_fewer_than_two_pieces_returns_input(self):
        text = "only\n\n   \n"
        assert segment(text) == [text]

    def test_empty_text(self):
        assert segment("") == [""]
