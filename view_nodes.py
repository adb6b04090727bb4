#!/usr/bin/env python3
"""
FILE: view_nodes.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Typed display nodes produced by the rendering pipeline.

LOCKS:
- Nodes are frozen dataclasses holding tuples, so two render passes over the same
  payload compare equal and nothing downstream can mutate a view.
- Text never travels as markup. Links carry an href built by the annotator or the
  profile renderer; every other string is display text to be escaped by the writer.
- RenderOutcome is a closed union of five view kinds. RenderResult is the
  success/failure carrier returned by every recursive render call.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from schema_names import K


# ─────────────────────────────────────────────────────────────
# Inline nodes
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class LinkNode:
    label: str
    href: str
    kind: str = K.LINK_EXTERNAL  # K.LINK_MAILTO | K.LINK_EXTERNAL


@dataclass(frozen=True)
class HighlightNode:
    text: str


Inline = Union[TextNode, LinkNode, HighlightNode]


@dataclass(frozen=True)
class BulletList:
    items: Tuple[Tuple[Inline, ...], ...]


Block = Union[TextNode, LinkNode, HighlightNode, BulletList]


@dataclass(frozen=True)
class AnnotatedText:
    """One annotated text section: inline nodes with at most one bullet list."""

    nodes: Tuple[Block, ...]

    def plain_text(self) -> str:
        parts = []
        for n in self.nodes:
            if isinstance(n, BulletList):
                parts.append("\n".join("".join(_inline_text(i) for i in item) for item in n.items))
            else:
                parts.append(_inline_text(n))
        return "".join(parts)


def _inline_text(node: Inline) -> str:
    return node.label if isinstance(node, LinkNode) else node.text


@dataclass(frozen=True)
class Action:
    label: str
    href: str


# ─────────────────────────────────────────────────────────────
# RenderOutcome variants
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SummaryStrip:
    counts: Tuple[Tuple[str, int], ...]  # (category, count), only non-zero


@dataclass(frozen=True)
class TextView:
    summary: Optional[SummaryStrip]
    sections: Tuple[AnnotatedText, ...]
    contacts: Tuple[str, ...] = ()

    kind = K.VIEW_TEXT


@dataclass(frozen=True)
class ProfileView:
    name: Optional[str]
    title: Optional[str] = None
    institution: Optional[str] = None
    email: Optional[str] = None
    score: Optional[str] = None
    research_areas: Tuple[str, ...] = ()
    publications: Tuple[str, ...] = ()
    reasoning: Optional[str] = None
    contact: Optional[Action] = None


@dataclass(frozen=True)
class ResearcherGrid:
    profiles: Tuple[ProfileView, ...]

    kind = K.VIEW_RESEARCHER_GRID


@dataclass(frozen=True)
class GenericList:
    items: Tuple["RenderOutcome", ...]

    kind = K.VIEW_GENERIC_LIST


@dataclass(frozen=True)
class ObjectSection:
    key: str
    label: str
    icon: str
    body: "RenderOutcome"


@dataclass(frozen=True)
class ObjectSectionList:
    sections: Tuple[ObjectSection, ...]

    kind = K.VIEW_OBJECT_SECTIONS


@dataclass(frozen=True)
class RenderFailure:
    message: str
    location: str = "$"
    traceback_text: str = ""


@dataclass(frozen=True)
class RawFallback:
    raw_text: str
    failure: Optional[RenderFailure] = None

    kind = K.VIEW_RAW_FALLBACK


RenderOutcome = Union[TextView, ResearcherGrid, GenericList, ObjectSectionList, RawFallback]

OUTCOME_TYPES = (TextView, ResearcherGrid, GenericList, ObjectSectionList, RawFallback)


# ─────────────────────────────────────────────────────────────
# Result carrier
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RenderResult:
    view: Optional[Any] = None
    failure: Optional[RenderFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, view: Any) -> "RenderResult":
        return cls(view=view)

    @classmethod
    def failed(cls, message: str, location: str = "$", traceback_text: str = "") -> "RenderResult":
        return cls(failure=RenderFailure(message=message, location=location, traceback_text=traceback_text))


# ─────────────────────────────────────────────────────────────
# Serialization (Debug tab / CLI --json)
# ─────────────────────────────────────────────────────────────


def as_dict(node: Any) -> Any:
    if dataclasses.is_dataclass(node) and not isinstance(node, type):
        out: Dict[str, Any] = {"type": type(node).__name__}
        for f in dataclasses.fields(node):
            out[f.name] = as_dict(getattr(node, f.name))
        return out
    if isinstance(node, tuple):
        return [as_dict(x) for x in node]
    return node
