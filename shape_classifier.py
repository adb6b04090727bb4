#!/usr/bin/env python3
"""
FILE: shape_classifier.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Total classification of an arbitrary backend payload + recursive dispatch to
the matching renderer.

Shapes (closed set, see PayloadShape):
- TEXT            str; strict-JSON-decoded and re-dispatched, else rendered as text
- PRIMITIVE       number / bool / None / anything unrecognized
- PROFILE_ARRAY   list with >= 1 mapping exposing name|researcher|author|email
- GENERIC_ARRAY   any other list
- PROFILE_OBJECT  mapping with a key (case-insensitive) in the profile vocabulary
- GENERIC_OBJECT  any other mapping

LOCKS:
- Pure: no memoization, no module state. Same payload -> equal view tree.
- Every shape has exactly one handler in _HANDLERS.
- Every call returns RenderResult. A child failure short-circuits upward as data;
  nothing here catches exceptions (that is the containment boundary's job).
"""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from constants.profile_fields import ARRAY_PROFILE_KEYS, DEFAULT_ICON, KEY_ICON_RULES, OBJECT_PROFILE_KEYS
from modules.annotation.text_annotator import annotate
from modules.detection.pattern_detector import ContentPatternSet, detect
from modules.detection.text_segmenter import segment
from modules.profiles.profile_renderer import is_present, render_profile
from schema_names import K
from view_nodes import (
    AnnotatedText,
    GenericList,
    ObjectSection,
    ObjectSectionList,
    RenderResult,
    ResearcherGrid,
    SummaryStrip,
    TextNode,
    TextView,
)


class PayloadShape(Enum):
    TEXT = "text"
    PRIMITIVE = "primitive"
    PROFILE_ARRAY = "profile_array"
    GENERIC_ARRAY = "generic_array"
    PROFILE_OBJECT = "profile_object"
    GENERIC_OBJECT = "generic_object"


# ─────────────────────────────────────────────────────────────
# Classification
# ─────────────────────────────────────────────────────────────


def _is_profile_like_item(item: Any) -> bool:
    return isinstance(item, Mapping) and any(is_present(item.get(k)) for k in ARRAY_PROFILE_KEYS)


def _is_profile_object(obj: Mapping[str, Any]) -> bool:
    return any(str(k).lower() in OBJECT_PROFILE_KEYS for k in obj)


def classify(payload: Any) -> PayloadShape:
    if isinstance(payload, str):
        return PayloadShape.TEXT
    if isinstance(payload, (list, tuple)):
        if any(_is_profile_like_item(x) for x in payload):
            return PayloadShape.PROFILE_ARRAY
        return PayloadShape.GENERIC_ARRAY
    if isinstance(payload, Mapping):
        if _is_profile_object(payload):
            return PayloadShape.PROFILE_OBJECT
        return PayloadShape.GENERIC_OBJECT
    return PayloadShape.PRIMITIVE


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def decode_json_strict(text: str) -> Tuple[bool, Any]:
    """
    Strict decode: NaN / Infinity are rejected like a browser JSON.parse would.
    Returns (decoded_ok, value).
    """
    try:
        return True, json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False, None


# ─────────────────────────────────────────────────────────────
# Section labels + icons (generic objects)
# ─────────────────────────────────────────────────────────────


def format_key(key: str) -> str:
    spaced = re.sub(r"[_-]", " ", key)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def icon_for_key(key: str) -> str:
    lowered = key.lower()
    for words, icon in KEY_ICON_RULES:
        if any(w in lowered for w in words):
            return icon
    return DEFAULT_ICON


# ─────────────────────────────────────────────────────────────
# Text views
# ─────────────────────────────────────────────────────────────


def _summary_strip(patterns: ContentPatternSet) -> Optional[SummaryStrip]:
    counts = tuple((c, len(patterns.get(c))) for c in K.SUMMARY_CATEGORIES if patterns.get(c))
    return SummaryStrip(counts=counts) if counts else None


def build_text_view(text: str) -> TextView:
    patterns = detect(text)
    sections = tuple(annotate(s, patterns) for s in segment(text))
    return TextView(summary=_summary_strip(patterns), sections=sections, contacts=patterns.emails)


def _primitive_text(value: Any) -> str:
    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return str(value)


# ─────────────────────────────────────────────────────────────
# Handlers (one per shape)
# ─────────────────────────────────────────────────────────────


def _render_text(payload: str, depth: int, location: str) -> RenderResult:
    decoded_ok, decoded = decode_json_strict(payload)
    if decoded_ok:
        return render_payload(decoded, depth=depth, location=location)
    return RenderResult.success(build_text_view(payload))


def _render_primitive(payload: Any, depth: int, location: str) -> RenderResult:
    text = _primitive_text(payload)
    view = TextView(summary=None, sections=(AnnotatedText(nodes=(TextNode(text),)),))
    return RenderResult.success(view)


def _render_profile_array(payload: Any, depth: int, location: str) -> RenderResult:
    profiles = []
    for i, item in enumerate(payload):
        res = render_profile(item, nested=depth > 0, location=f"{location}[{i}]")
        if not res.ok:
            return res
        profiles.append(res.view)
    return RenderResult.success(ResearcherGrid(profiles=tuple(profiles)))


def _render_generic_array(payload: Any, depth: int, location: str) -> RenderResult:
    items = []
    for i, item in enumerate(payload):
        res = render_payload(item, depth=depth + 1, location=f"{location}[{i}]")
        if not res.ok:
            return res
        items.append(res.view)
    return RenderResult.success(GenericList(items=tuple(items)))


def _render_profile_object(payload: Any, depth: int, location: str) -> RenderResult:
    res = render_profile(payload, nested=depth > 0, location=location)
    if not res.ok:
        return res
    return RenderResult.success(ResearcherGrid(profiles=(res.view,)))


def _render_generic_object(payload: Any, depth: int, location: str) -> RenderResult:
    sections: List[ObjectSection] = []
    for key, value in payload.items():
        name = str(key)
        res = render_payload(value, depth=depth + 1, location=f"{location}.{name}")
        if not res.ok:
            return res
        sections.append(ObjectSection(key=name, label=format_key(name), icon=icon_for_key(name), body=res.view))
    return RenderResult.success(ObjectSectionList(sections=tuple(sections)))


_HANDLERS: Dict[PayloadShape, Callable[[Any, int, str], RenderResult]] = {
    PayloadShape.TEXT: _render_text,
    PayloadShape.PRIMITIVE: _render_primitive,
    PayloadShape.PROFILE_ARRAY: _render_profile_array,
    PayloadShape.GENERIC_ARRAY: _render_generic_array,
    PayloadShape.PROFILE_OBJECT: _render_profile_object,
    PayloadShape.GENERIC_OBJECT: _render_generic_object,
}


def render_payload(payload: Any, *, depth: int = 0, location: str = "$") -> RenderResult:
    return _HANDLERS[classify(payload)](payload, depth, location)
