#!/usr/bin/env python3
"""
FILE: modules/profiles/profile_renderer.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Render one researcher-like record into a ProfileView.

Field resolution:
- Each logical field probes constants.profile_fields.FIELD_ALIASES in order;
  the first PRESENT alias wins (exact key first, then case-insensitive key).
- "Present" = not None, not "", not an empty list/tuple/dict.
- Every field is optional. Absence suppresses the UI element, never errors.
- Name falls back to "Unknown Researcher" only for a top-level profile.

Failure semantics:
- publications / research areas must be a list when present. Anything else is
  returned as a RenderFailure (data), located at the offending key.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

from constants.profile_fields import FIELD_ALIASES, MAX_PUBLICATIONS_SHOWN
from schema_names import K
from view_nodes import Action, ProfileView, RenderResult


# ─────────────────────────────────────────────────────────────
# Small helpers
# ─────────────────────────────────────────────────────────────


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    return True


def display_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, default=str)
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    return str(value)


def _publication_text(item: Any) -> str:
    if isinstance(item, Mapping) and is_present(item.get("title")):
        return display_text(item["title"])
    return display_text(item)


def resolve_field(record: Mapping[str, Any], field: str) -> Tuple[Optional[str], Any]:
    """
    Returns (matched_key, value) for the first present alias, else (None, None).
    """
    lowered: Optional[Dict[str, str]] = None
    for alias in FIELD_ALIASES[field]:
        if alias in record and is_present(record[alias]):
            return alias, record[alias]

        if lowered is None:
            lowered = {}
            for k in record:
                lowered.setdefault(str(k).lower(), k)
        key = lowered.get(alias)
        if key is not None and is_present(record[key]):
            return key, record[key]
    return None, None


def contact_action(email: str) -> Action:
    href = f"mailto:{quote(email, safe='@+')}?subject={quote(K.CONTACT_SUBJECT)}"
    return Action(label="Contact Researcher", href=href)


def _sequence_field(
    record: Mapping[str, Any], field: str, location: str
) -> Tuple[Optional[Tuple[Any, ...]], Optional[RenderResult]]:
    key, value = resolve_field(record, field)
    if key is None:
        return (), None
    if not isinstance(value, (list, tuple)):
        msg = f"{field} must be a list, got {type(value).__name__}"
        return None, RenderResult.failed(msg, location=f"{location}.{key}")
    return tuple(value), None


# ─────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────


def render_profile(record: Any, *, nested: bool = False, location: str = "$") -> RenderResult:
    rec: Mapping[str, Any] = record if isinstance(record, Mapping) else {}

    publications, failure = _sequence_field(rec, K.F_PUBLICATIONS, location)
    if failure is not None:
        return failure
    areas, failure = _sequence_field(rec, K.F_RESEARCH_AREAS, location)
    if failure is not None:
        return failure

    _, name = resolve_field(rec, K.F_NAME)
    _, title = resolve_field(rec, K.F_TITLE)
    _, email = resolve_field(rec, K.F_EMAIL)
    _, institution = resolve_field(rec, K.F_INSTITUTION)
    _, score = resolve_field(rec, K.F_SCORE)
    _, reasoning = resolve_field(rec, K.F_REASONING)

    if name is not None:
        name_text: Optional[str] = display_text(name)
    else:
        name_text = None if nested else K.UNKNOWN_RESEARCHER

    email_text = display_text(email) if email is not None else None

    view = ProfileView(
        name=name_text,
        title=display_text(title) if title is not None else None,
        institution=display_text(institution) if institution is not None else None,
        email=email_text,
        score=f"{display_text(score)}%" if score is not None else None,
        research_areas=tuple(display_text(a) for a in areas),
        publications=tuple(_publication_text(p) for p in publications[:MAX_PUBLICATIONS_SHOWN]),
        reasoning=display_text(reasoning) if reasoning is not None else None,
        contact=contact_action(email) if isinstance(email, str) else None,
    )
    return RenderResult.success(view)
