#!/usr/bin/env python3
"""
FILE: constants/profile_fields.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Single source of truth for researcher-profile vocabularies.

This file is the ONLY authority for:
- FIELD_ALIASES: ordered candidate keys per logical profile field (first present wins)
- ARRAY_PROFILE_KEYS: keys that mark an array element as researcher-like
- OBJECT_PROFILE_KEYS: keys that mark a mapping as a single profile
- KEY_ICON_RULES: keyword -> icon for generic object section headers

Extending a vocabulary is a data change here, never an inline conditional elsewhere.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from schema_names import K


# ─────────────────────────────────────────────────────────────
# 🔒 Alias table (logical field -> ordered candidate keys)
# ─────────────────────────────────────────────────────────────

FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    K.F_NAME: ("name", "researcher", "author"),
    K.F_TITLE: ("title", "position", "role"),
    K.F_EMAIL: ("email", "contact"),
    K.F_INSTITUTION: ("institution", "university", "affiliation"),
    K.F_PUBLICATIONS: ("publications", "papers"),
    K.F_RESEARCH_AREAS: ("research_areas", "areas", "fields"),
    K.F_SCORE: ("score", "rating", "match_score"),
    K.F_REASONING: ("reasoning", "rationale", "explanation", "summary"),
}

# Publications beyond this count are not displayed on a profile card.
MAX_PUBLICATIONS_SHOWN = 3


# ─────────────────────────────────────────────────────────────
# Shape vocabularies (classification)
# ─────────────────────────────────────────────────────────────

ARRAY_PROFILE_KEYS: Tuple[str, ...] = ("name", "researcher", "author", "email")

OBJECT_PROFILE_KEYS: FrozenSet[str] = frozenset(
    {"name", "email", "institution", "publications", "research_areas"}
)


# ─────────────────────────────────────────────────────────────
# Section header icons (first matching rule wins)
# ─────────────────────────────────────────────────────────────

KEY_ICON_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("name", "researcher"), K.ICON_PERSON),
    (("email", "contact"), K.ICON_MAIL),
    (("institution", "university"), K.ICON_BUILDING),
    (("publication", "paper"), K.ICON_BOOK),
    (("score", "rating"), K.ICON_STAR),
    (("location", "address"), K.ICON_PIN),
    (("phone",), K.ICON_PHONE),
    (("website", "url"), K.ICON_GLOBE),
)

DEFAULT_ICON = K.ICON_DOCUMENT
