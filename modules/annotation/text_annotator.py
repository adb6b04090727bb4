#!/usr/bin/env python3
"""
FILE: modules/annotation/text_annotator.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Rewrite one text section into typed inline display nodes using detected patterns.

Rewrite order (fixed):
  1) detected emails      -> mail links
  2) detected URLs        -> external links (literal match)
  3) researcher clauses   -> highlight spans (case-insensitive literal match)
  4) bullet lines (• / -) -> one bullet list (first contiguous run only);
     a highlight spanning several lines is split per line first

LOCKS:
- Every pass only splits plain TextNodes. Text already turned into a link or a
  highlight is never matched again by a later pass.
- Output is a node tree, never markup. Escaping is the writer's job.
- Only the first contiguous run of bullet lines becomes a list; a later run
  in the same section stays as text.
"""

from __future__ import annotations

import re
from typing import Callable, List, Pattern

from modules.detection.pattern_detector import ContentPatternSet
from schema_names import K
from view_nodes import AnnotatedText, Block, BulletList, HighlightNode, Inline, LinkNode, TextNode


_BULLET_LINE_RE = re.compile(r"^\s*[•-]")
_BULLET_MARKER_RE = re.compile(r"^\s*[•-]\s*")


# ─────────────────────────────────────────────────────────────
# Literal splitting (passes 1–3)
# ─────────────────────────────────────────────────────────────


def _split_literal(nodes: List[Block], pattern: Pattern[str], make: Callable[[str], Inline]) -> List[Block]:
    out: List[Block] = []
    for node in nodes:
        if not isinstance(node, TextNode):
            out.append(node)
            continue

        text = node.text
        pos = 0
        for m in pattern.finditer(text):
            if m.start() > pos:
                out.append(TextNode(text[pos:m.start()]))
            out.append(make(m.group(0)))
            pos = m.end()

        if pos == 0:
            out.append(node)
        elif pos < len(text):
            out.append(TextNode(text[pos:]))
    return out


def _literal(needle: str, *, ignore_case: bool = False) -> Pattern[str]:
    return re.compile(re.escape(needle), re.IGNORECASE if ignore_case else 0)


def _mail_link(email: str) -> LinkNode:
    return LinkNode(label=email, href=f"mailto:{email}", kind=K.LINK_MAILTO)


def _external_link(url: str) -> LinkNode:
    return LinkNode(label=url, href=url, kind=K.LINK_EXTERNAL)


# ─────────────────────────────────────────────────────────────
# Bullet list conversion (pass 4)
# ─────────────────────────────────────────────────────────────


def _to_lines(nodes: List[Block]) -> List[List[Inline]]:
    # Highlights may span line breaks; each line keeps its own piece of the span.
    lines: List[List[Inline]] = [[]]
    for node in nodes:
        if isinstance(node, (TextNode, HighlightNode)):
            for i, part in enumerate(node.text.split("\n")):
                if i > 0:
                    lines.append([])
                if part:
                    lines[-1].append(type(node)(part))
        else:
            lines[-1].append(node)
    return lines


def _is_bullet_line(line: List[Inline]) -> bool:
    return (
        bool(line)
        and isinstance(line[0], (TextNode, HighlightNode))
        and bool(_BULLET_LINE_RE.match(line[0].text))
    )


def _strip_marker(line: List[Inline]) -> tuple:
    head = line[0]
    rest = _BULLET_MARKER_RE.sub("", head.text, count=1)
    return tuple(([type(head)(rest)] if rest else []) + line[1:])


def _join_lines(lines: List[List[Inline]]) -> List[Block]:
    out: List[Block] = []
    for i, line in enumerate(lines):
        if i > 0:
            out.append(TextNode("\n"))
        out.extend(line)
    return out


def _merge_text(nodes: List[Block]) -> List[Block]:
    merged: List[Block] = []
    for node in nodes:
        if isinstance(node, TextNode) and merged and isinstance(merged[-1], TextNode):
            merged[-1] = TextNode(merged[-1].text + node.text)
        else:
            merged.append(node)
    return merged


def _convert_first_bullet_run(nodes: List[Block]) -> List[Block]:
    lines = _to_lines(nodes)

    start = next((i for i, line in enumerate(lines) if _is_bullet_line(line)), None)
    if start is None:
        return nodes

    end = start
    while end < len(lines) and _is_bullet_line(lines[end]):
        end += 1

    items = tuple(_strip_marker(line) for line in lines[start:end])

    out: List[Block] = []
    if start > 0:
        out.extend(_join_lines(lines[:start]))
        out.append(TextNode("\n"))
    out.append(BulletList(items=items))
    if end < len(lines):
        out.append(TextNode("\n"))
        out.extend(_join_lines(lines[end:]))
    return _merge_text(out)


# ─────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────


def annotate(section: str, patterns: ContentPatternSet) -> AnnotatedText:
    nodes: List[Block] = [TextNode(section)] if section else []

    for email in patterns.emails:
        nodes = _split_literal(nodes, _literal(email), _mail_link)

    for url in patterns.urls:
        nodes = _split_literal(nodes, _literal(url), _external_link)

    for clause in patterns.researchers:
        nodes = _split_literal(nodes, _literal(clause, ignore_case=True), HighlightNode)

    if "•" in section or "-" in section:
        nodes = _convert_first_bullet_run(nodes)

    return AnnotatedText(nodes=tuple(nodes))
