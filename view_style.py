#!/usr/bin/env python3
"""
FILE: view_style.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Central presentation tokens for CollabLens views.

Responsibilities:
- Map icon names (schema_names.K.ICON_*) to the emoji shown in Markdown and widgets.
- Provide the summary-strip wording per pattern category.
- Render small user-facing tokens (score badge, summary item) consistently.

LOCKS:
- Writers (renderer.py, renderer_widgets.py) must take icons and labels from here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from schema_names import K


@dataclass(frozen=True)
class ViewStyle:
    icon_map: Dict[str, str] = None  # type: ignore[assignment]
    summary_labels: Dict[str, str] = None  # type: ignore[assignment]

    fallback_icon: str = "📄"
    score_icon: str = "⭐"
    summary_sep: str = " · "

    def __post_init__(self) -> None:
        if self.icon_map is None:
            object.__setattr__(
                self,
                "icon_map",
                {
                    K.ICON_PERSON: "👤",
                    K.ICON_MAIL: "✉️",
                    K.ICON_BUILDING: "🏛️",
                    K.ICON_BOOK: "📚",
                    K.ICON_STAR: "⭐",
                    K.ICON_PIN: "📍",
                    K.ICON_PHONE: "📞",
                    K.ICON_GLOBE: "🌐",
                    K.ICON_DOCUMENT: "📄",
                    K.ICON_USERS: "👥",
                },
            )

        if self.summary_labels is None:
            object.__setattr__(
                self,
                "summary_labels",
                {
                    K.RESEARCHER: "Researchers",
                    K.INSTITUTION: "Institutions",
                    K.PUBLICATION: "Publications",
                    K.EMAIL: "Contacts",
                },
            )


DEFAULT_STYLE = ViewStyle()

# Summary categories -> icon names
SUMMARY_ICONS: Dict[str, str] = {
    K.RESEARCHER: K.ICON_USERS,
    K.INSTITUTION: K.ICON_BUILDING,
    K.PUBLICATION: K.ICON_BOOK,
    K.EMAIL: K.ICON_MAIL,
}


def icon(name: str, *, style: ViewStyle = DEFAULT_STYLE) -> str:
    return style.icon_map.get(name, style.fallback_icon)


def summary_item(category: str, count: int, *, style: ViewStyle = DEFAULT_STYLE) -> str:
    """
    Renders e.g. "👥 2 Researchers".
    """
    label = style.summary_labels.get(category, category.title())
    return f"{icon(SUMMARY_ICONS.get(category, ''), style=style)} {count} {label}"


def score_badge(score: str, *, style: ViewStyle = DEFAULT_STYLE) -> str:
    return f"{style.score_icon} {score}"
