#!/usr/bin/env python3
"""
FILE: modules/detection/text_segmenter.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Split a raw text blob into logical sections for independent rendering.

Boundaries:
- a blank line (two line breaks with only whitespace between), or
- a line break directly followed by a numbered-list marker ("1."), bold ("**")
  or a heading marker ("##").

Whitespace-only pieces are dropped. Fewer than two surviving pieces means the
original text comes back as the only section.
"""

from __future__ import annotations

import re
from typing import List

_SECTION_BREAK_RE = re.compile(r"\n\s*\n|\n(?=\d+\.|\*\*|##)")


def segment(text: str) -> List[str]:
    pieces = [p for p in _SECTION_BREAK_RE.split(text) if p.strip()]
    return pieces if len(pieces) > 1 else [text]
