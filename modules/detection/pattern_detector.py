#!/usr/bin/env python3
"""
FILE: modules/detection/pattern_detector.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Best-effort content pattern detection over free text.

LOCKS:
- Rules come from constants.pattern_rules.PATTERN_RULES (single authority).
- Each category is matched independently over the whole text, not line by line.
- Matches keep first-occurrence order and are NOT deduplicated.
- Overlaps across categories are kept (a number inside an institution clause is
  also a score).
- No match is ever an error: the category is simply empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from constants.pattern_rules import PATTERN_RULES
from schema_names import K


@dataclass(frozen=True)
class ContentPatternSet:
    emails: Tuple[str, ...] = ()
    institutions: Tuple[str, ...] = ()
    publications: Tuple[str, ...] = ()
    researchers: Tuple[str, ...] = ()
    scores: Tuple[str, ...] = ()
    urls: Tuple[str, ...] = ()
    phones: Tuple[str, ...] = ()
    locations: Tuple[str, ...] = ()

    def get(self, category: str) -> Tuple[str, ...]:
        return getattr(self, _FIELD_BY_CATEGORY[category])

    def counts(self) -> Dict[str, int]:
        return {c: len(self.get(c)) for c in K.CATEGORIES}

    def is_empty(self) -> bool:
        return not any(self.get(c) for c in K.CATEGORIES)


_FIELD_BY_CATEGORY: Dict[str, str] = {
    K.EMAIL: "emails",
    K.INSTITUTION: "institutions",
    K.PUBLICATION: "publications",
    K.RESEARCHER: "researchers",
    K.SCORE: "scores",
    K.URL: "urls",
    K.PHONE: "phones",
    K.LOCATION: "locations",
}

EMPTY_PATTERNS = ContentPatternSet()


def _matches(category: str, text: str) -> Tuple[str, ...]:
    return tuple(m.group(0) for m in PATTERN_RULES[category].finditer(text))


def detect(text: str) -> ContentPatternSet:
    if not text:
        return EMPTY_PATTERNS

    found = {_FIELD_BY_CATEGORY[c]: _matches(c, text) for c in K.CATEGORIES}
    return ContentPatternSet(**found)
