#!/usr/bin/env python3
"""
FILE: renderer.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Public rendering API used by streamlit_app.py and pipeline.py.

Two responsibilities:
A) Containment boundary (render_output):
   - Runs one full render pass over a backend payload.
   - A failed RenderResult, or anything raised inside the pass, becomes a
     RawFallback view holding the payload verbatim. Nothing escapes.
   - Failures are logged with location + traceback for diagnostics.

B) Markdown writer (to_markdown):
   - Serializes any RenderOutcome to Markdown for Streamlit / the CLI.
   - Every piece of payload text is escaped. Links are emitted only from typed
     LinkNode/Action nodes and only for http(s) and mailto targets.

Scope lock:
- The boundary covers the render pass only. The search form, the backend client
  and sibling widgets are outside it.
"""

from __future__ import annotations

import json
import logging
import re
import traceback
from typing import Any, List

from shape_classifier import render_payload
from view_nodes import (
    Action,
    AnnotatedText,
    BulletList,
    GenericList,
    HighlightNode,
    LinkNode,
    ObjectSectionList,
    ProfileView,
    RawFallback,
    RenderOutcome,
    RenderResult,
    ResearcherGrid,
    TextNode,
    TextView,
)
from view_style import DEFAULT_STYLE, icon, score_badge, summary_item
from schema_names import K

logger = logging.getLogger(__name__)

_MD_SPECIAL_RE = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$:])")
_SAFE_SCHEMES = ("http://", "https://", "mailto:")


# ─────────────────────────────────────────────────────────────
# A) Containment boundary
# ─────────────────────────────────────────────────────────────


def raw_text(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(payload)


def render_result(payload: Any) -> RenderResult:
    try:
        return render_payload(payload)
    except Exception as e:
        return RenderResult.failed(f"{type(e).__name__}: {e}", traceback_text=traceback.format_exc())


def render_output(payload: Any) -> RenderOutcome:
    result = render_result(payload)
    if result.ok:
        return result.view

    failure = result.failure
    logger.error(
        "Render failed at %s: %s%s",
        failure.location,
        failure.message,
        f"\n{failure.traceback_text}" if failure.traceback_text else "",
    )
    return RawFallback(raw_text=raw_text(payload), failure=failure)


# ─────────────────────────────────────────────────────────────
# B) Markdown writer: small helpers
# ─────────────────────────────────────────────────────────────


def escape_md(text: str) -> str:
    return _MD_SPECIAL_RE.sub(r"\\\1", text or "")


def _escape_block(text: str) -> str:
    # Hard line breaks keep the payload's own line structure.
    return "  \n".join(escape_md(line) for line in text.split("\n"))


def _safe_href(href: str) -> str:
    return href.replace(" ", "%20").replace("(", "%28").replace(")", "%29")


def md_link(label: str, href: str) -> str:
    if not href.lower().startswith(_SAFE_SCHEMES):
        return escape_md(label)
    return f"[{escape_md(label)}]({_safe_href(href)})"


def _bullet(lines: List[str], text: str) -> None:
    lines.append(f"- {text}")


def _heading(level: int, text: str) -> str:
    return f"{'#' * max(1, min(level, 6))} {text}"


def _fence(raw: str) -> str:
    longest = max((len(run) for run in re.findall(r"`+", raw)), default=0)
    return "`" * max(3, longest + 1)


# ─────────────────────────────────────────────────────────────
# Inline / section writers
# ─────────────────────────────────────────────────────────────


def inline_md(node: Any) -> str:
    if isinstance(node, TextNode):
        return _escape_block(node.text)
    if isinstance(node, LinkNode):
        return md_link(node.label, node.href)
    if isinstance(node, HighlightNode):
        # Bold markers cannot span a line break.
        return "  \n".join(f"**{escape_md(line)}**" if line else "" for line in node.text.split("\n"))
    return escape_md(str(node))


def annotated_md(section: AnnotatedText) -> str:
    parts: List[str] = []
    for node in section.nodes:
        if isinstance(node, BulletList):
            items = ["- " + "".join(inline_md(n) for n in item) for item in node.items]
            parts.append("\n\n" + "\n".join(items) + "\n\n")
        else:
            parts.append(inline_md(node))
    return "".join(parts).strip("\n")


def action_md(action: Action) -> str:
    return md_link(f"✉️ {action.label}", action.href)


# ─────────────────────────────────────────────────────────────
# Outcome writers
# ─────────────────────────────────────────────────────────────


def _text_view_md(view: TextView, level: int, lines: List[str]) -> None:
    if view.summary is not None:
        lines.append(DEFAULT_STYLE.summary_sep.join(summary_item(cat, n) for cat, n in view.summary.counts))
        lines.append("")

    for section in view.sections:
        lines.append(annotated_md(section))
        lines.append("")

    if view.contacts:
        lines.append(_heading(level, f"{icon(K.ICON_MAIL)} Contact Information"))
        for email in view.contacts:
            _bullet(lines, md_link(email, f"mailto:{email}"))
        lines.append("")


def profile_md(profile: ProfileView, level: int, lines: List[str]) -> None:
    if profile.name:
        lines.append(_heading(level, f"{icon(K.ICON_PERSON)} {escape_md(profile.name)}"))
    if profile.title:
        lines.append(f"*{escape_md(profile.title)}*  ")
    if profile.institution:
        lines.append(f"{icon(K.ICON_BUILDING)} {escape_md(profile.institution)}  ")
    if profile.score:
        lines.append(f"**{escape_md(score_badge(profile.score))}**")
    lines.append("")

    if profile.research_areas:
        lines.append(f"**{icon(K.ICON_BOOK)} Research Areas:** " + " · ".join(escape_md(a) for a in profile.research_areas))
        lines.append("")

    if profile.publications:
        lines.append("**Recent Publications**")
        for pub in profile.publications:
            _bullet(lines, escape_md(pub))
        lines.append("")

    if profile.reasoning:
        lines.append(f"> {_escape_block(profile.reasoning)}")
        lines.append("")

    if profile.contact is not None:
        lines.append(action_md(profile.contact))
        lines.append("")


def _write(view: Any, level: int, lines: List[str]) -> None:
    if isinstance(view, TextView):
        _text_view_md(view, level, lines)
    elif isinstance(view, ResearcherGrid):
        for i, profile in enumerate(view.profiles):
            if i > 0:
                lines.append("---")
                lines.append("")
            profile_md(profile, level, lines)
    elif isinstance(view, GenericList):
        if not view.items:
            lines.append("*(no items)*")
            lines.append("")
        for i, item in enumerate(view.items):
            if i > 0:
                lines.append("---")
                lines.append("")
            _write(item, level + 1, lines)
    elif isinstance(view, ObjectSectionList):
        if not view.sections:
            lines.append("*(no fields)*")
            lines.append("")
        for section in view.sections:
            lines.append(_heading(level, f"{icon(section.icon)} {escape_md(section.label)}"))
            lines.append("")
            _write(section.body, level + 1, lines)
    elif isinstance(view, RawFallback):
        fence = _fence(view.raw_text)
        lines.append(_heading(level, f"{icon(K.ICON_DOCUMENT)} Raw Output"))
        lines.append(fence)
        lines.append(view.raw_text)
        lines.append(fence)
        lines.append("")
    else:
        raise TypeError(f"Unknown view type: {type(view).__name__}")


def to_markdown(view: RenderOutcome, *, level: int = 2) -> str:
    lines: List[str] = []
    _write(view, level, lines)
    return "\n".join(lines).rstrip() + "\n"
