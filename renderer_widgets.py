#!/usr/bin/env python3
"""
FILE: renderer_widgets.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Draw a RenderOutcome with Streamlit widgets.

- Profiles become bordered cards laid out in columns.
- Generic objects become one titled block per key; lists are separated by dividers.
- All payload text goes through the escaping helpers in renderer.py; no
  unsafe_allow_html anywhere.

LOCKS:
- draw_outcome() is its own containment boundary: if drawing raises, whatever
  was drawn so far stays on screen and the raw payload is shown below it.
"""

from __future__ import annotations

import logging
from typing import Any

import streamlit as st

from renderer import annotated_md, escape_md, md_link
from schema_names import K
from view_nodes import (
    GenericList,
    ObjectSectionList,
    ProfileView,
    RawFallback,
    RenderOutcome,
    ResearcherGrid,
    TextView,
)
from view_style import DEFAULT_STYLE, icon, score_badge, summary_item

logger = logging.getLogger(__name__)

GRID_COLUMNS = 2


def _draw_text_view(view: TextView) -> None:
    if view.summary is not None:
        st.caption(DEFAULT_STYLE.summary_sep.join(summary_item(c, n) for c, n in view.summary.counts))

    for section in view.sections:
        st.markdown(annotated_md(section))

    if view.contacts:
        with st.container(border=True):
            st.markdown(f"**{icon(K.ICON_MAIL)} Contact Information**")
            for email in view.contacts:
                st.markdown("- " + md_link(email, f"mailto:{email}"))


def _draw_profile(profile: ProfileView) -> None:
    with st.container(border=True):
        head, badge = st.columns([4, 1])
        with head:
            if profile.name:
                st.markdown(f"#### {icon(K.ICON_PERSON)} {escape_md(profile.name)}")
            if profile.title:
                st.caption(escape_md(profile.title))
            if profile.institution:
                st.markdown(f"{icon(K.ICON_BUILDING)} {escape_md(profile.institution)}")
        with badge:
            if profile.score:
                st.markdown(f"**{escape_md(score_badge(profile.score))}**")

        if profile.research_areas:
            st.markdown(f"**{icon(K.ICON_BOOK)} Research Areas**")
            st.markdown(" · ".join(f"`{a.replace('`', '')}`" for a in profile.research_areas))

        if profile.publications:
            st.markdown("**Recent Publications**")
            st.markdown("\n".join("- " + escape_md(p) for p in profile.publications))

        if profile.reasoning:
            st.info(escape_md(profile.reasoning))

        if profile.contact is not None:
            st.link_button(f"{icon(K.ICON_MAIL)} {profile.contact.label}", profile.contact.href)


def _draw_grid(view: ResearcherGrid) -> None:
    profiles = view.profiles
    for start in range(0, len(profiles), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, profile in zip(cols, profiles[start : start + GRID_COLUMNS]):
            with col:
                _draw_profile(profile)


def _draw(view: Any) -> None:
    if isinstance(view, TextView):
        _draw_text_view(view)
    elif isinstance(view, ResearcherGrid):
        _draw_grid(view)
    elif isinstance(view, GenericList):
        if not view.items:
            st.caption("(no items)")
        for i, item in enumerate(view.items):
            if i > 0:
                st.divider()
            _draw(item)
    elif isinstance(view, ObjectSectionList):
        if not view.sections:
            st.caption("(no fields)")
        for section in view.sections:
            with st.container(border=True):
                st.markdown(f"**{icon(section.icon)} {escape_md(section.label)}**")
                _draw(section.body)
    elif isinstance(view, RawFallback):
        _draw_raw(view)
    else:
        raise TypeError(f"Unknown view type: {type(view).__name__}")


def _draw_raw(view: RawFallback) -> None:
    st.markdown(f"**{icon(K.ICON_DOCUMENT)} Raw Output**")
    st.code(view.raw_text, language=None)


def draw_outcome(view: RenderOutcome, raw_text: str) -> None:
    try:
        _draw(view)
    except Exception as e:
        logger.exception("Widget drawing failed: %s", e)
        st.warning("Could not display formatted results. Showing raw output.")
        st.code(raw_text, language=None)
