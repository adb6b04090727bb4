#!/usr/bin/env python3
"""
FILE: constants/pattern_rules.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Single source of truth for content-pattern extraction rules (category -> regex).

This file is the ONLY authority for:
- Keyword lists per clause category (institution, publication, researcher, location)
- The compiled extraction pattern per category

Anti-drift rule:
- Detectors import PATTERN_RULES from here; no other module compiles category regexes.
- Every category in schema_names.K.CATEGORIES must have exactly one rule.
"""

from __future__ import annotations

import re
from typing import Dict, Pattern, Tuple

from schema_names import K


# ─────────────────────────────────────────────────────────────
# Keyword vocabularies
# ─────────────────────────────────────────────────────────────

INSTITUTION_KEYWORDS: Tuple[str, ...] = (
    "university",
    "institute",
    "college",
    "research center",
    "laboratory",
    "lab",
)

PUBLICATION_KEYWORDS: Tuple[str, ...] = (
    "journal",
    "paper",
    "article",
    "publication",
    "doi",
    "arxiv",
)

RESEARCHER_MARKERS: Tuple[str, ...] = (
    "prof.",
    "dr.",
    "professor",
    "researcher",
)

# Acronyms match case-sensitively so the pronoun "us" is not read as a country.
LOCATION_ACRONYMS: Tuple[str, ...] = ("USA", "US", "UK")

LOCATION_NAMES: Tuple[str, ...] = (
    "United States",
    "Canada",
    "Germany",
    "France",
    "Japan",
    "China",
    "Australia",
)

# A clause runs from the keyword up to and including the next sentence terminator.
_CLAUSE_TAIL = r"[^.!?]*[.!?]"


def _alternation(words: Tuple[str, ...]) -> str:
    return "|".join(re.escape(w) for w in words)


# ─────────────────────────────────────────────────────────────
# 🔒 Rule table (category -> compiled pattern)
# ─────────────────────────────────────────────────────────────

PATTERN_RULES: Dict[str, Pattern[str]] = {
    K.EMAIL: re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"),
    K.INSTITUTION: re.compile(
        rf"\b(?:{_alternation(INSTITUTION_KEYWORDS)})\b{_CLAUSE_TAIL}",
        re.IGNORECASE,
    ),
    K.PUBLICATION: re.compile(
        rf"(?:{_alternation(PUBLICATION_KEYWORDS)}){_CLAUSE_TAIL}",
        re.IGNORECASE,
    ),
    K.RESEARCHER: re.compile(
        rf"(?:{_alternation(RESEARCHER_MARKERS)}){_CLAUSE_TAIL}",
        re.IGNORECASE,
    ),
    # Standalone number; the % suffix is kept when present.
    K.SCORE: re.compile(r"\b\d+(?:\.\d+)?%?(?!\w)"),
    K.URL: re.compile(r"https?://\S+"),
    K.PHONE: re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b"),
    K.LOCATION: re.compile(
        rf"\b(?:{_alternation(LOCATION_ACRONYMS)}|(?i:{_alternation(LOCATION_NAMES)}))\b{_CLAUSE_TAIL}"
    ),
}
