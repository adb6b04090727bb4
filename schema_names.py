#!/usr/bin/env python3
"""
FILE: schema_names.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE: Central key registry for CollabLens (wire keys, categories, view kinds, icons).

Notes:
- This module is a contract layer. Keep keys stable; update deliberately.
- Import pattern: from schema_names import K
"""

from __future__ import annotations


class K:
    # --- Backend wire contract ---
    QUERY = "query"
    OUTPUT = "output"
    CHAT_ROUTE = "chat"

    # --- Pattern categories (ContentPatternSet) ---
    EMAIL = "email"
    INSTITUTION = "institution"
    PUBLICATION = "publication"
    RESEARCHER = "researcher"
    SCORE = "score"
    URL = "url"
    PHONE = "phone"
    LOCATION = "location"

    CATEGORIES = (EMAIL, INSTITUTION, PUBLICATION, RESEARCHER, SCORE, URL, PHONE, LOCATION)

    # Categories surfaced in the summary strip (order = display order)
    SUMMARY_CATEGORIES = (RESEARCHER, INSTITUTION, PUBLICATION, EMAIL)

    # --- Profile logical fields (NormalizedProfile) ---
    F_NAME = "name"
    F_TITLE = "title"
    F_EMAIL = "email"
    F_INSTITUTION = "institution"
    F_PUBLICATIONS = "publications"
    F_RESEARCH_AREAS = "research_areas"
    F_SCORE = "score"
    F_REASONING = "reasoning"

    # --- RenderOutcome kinds ---
    VIEW_TEXT = "text_view"
    VIEW_RESEARCHER_GRID = "researcher_grid"
    VIEW_GENERIC_LIST = "generic_list"
    VIEW_OBJECT_SECTIONS = "object_section_list"
    VIEW_RAW_FALLBACK = "raw_fallback"

    # --- Link kinds ---
    LINK_MAILTO = "mailto"
    LINK_EXTERNAL = "external"

    # --- Icons (names; widgets map these to emoji) ---
    ICON_PERSON = "person"
    ICON_MAIL = "mail"
    ICON_BUILDING = "building"
    ICON_BOOK = "book"
    ICON_STAR = "star"
    ICON_PIN = "pin"
    ICON_PHONE = "phone"
    ICON_GLOBE = "globe"
    ICON_DOCUMENT = "document"
    ICON_USERS = "users"

    # --- Fixed display strings ---
    UNKNOWN_RESEARCHER = "Unknown Researcher"
    CONTACT_SUBJECT = "Research Collaboration Opportunity"
