#!/usr/bin/env python3
"""
FILE: demo_results.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Demo-mode payload used when the backend is unreachable.

Guarantees:
- Deterministic: same query -> same list (fresh copies every call).
- Output is a plain list of researcher records, i.e. an ordinary RawPayload.
  It goes through the same renderer as live backend output.
- Records are fictional sample data; they make no claim about real people.
"""

from __future__ import annotations

import copy
import re
from typing import Any, Dict, List, Tuple

MAX_DEMO_RESULTS = 3

DEMO_NOTICE = (
    "Using demo data - API connection failed. "
    "In production, this would show real researcher matches."
)

_RESEARCHERS: List[Dict[str, Any]] = [
    {
        "name": "Dr. Sarah Chen",
        "title": "Associate Professor of Computer Science",
        "institution": "Stanford University",
        "research_areas": ["Machine Learning", "Healthcare AI", "Medical Imaging"],
        "publications": [
            "Deep Learning for Medical Diagnosis (Nature, 2023)",
            "AI in Healthcare: Current Trends (JAMA, 2022)",
        ],
        "email": "sarah.chen@stanford.edu",
        "score": 95,
        "reasoning": "Strong alignment in ML healthcare applications with 15+ relevant publications",
    },
    {
        "name": "Prof. Michael Rodriguez",
        "title": "Director of AI Research Lab",
        "institution": "MIT",
        "research_areas": ["Computer Vision", "Medical AI", "Deep Learning"],
        "publications": [
            "Automated Medical Image Analysis (Cell, 2023)",
            "Vision Transformers in Healthcare (ICCV, 2022)",
        ],
        "email": "m.rodriguez@mit.edu",
        "score": 88,
        "reasoning": "Complementary expertise in computer vision with healthcare focus",
    },
    {
        "name": "Dr. Emily Watson",
        "title": "Climate Science Researcher",
        "institution": "University of California, Berkeley",
        "research_areas": ["Climate Change", "Data Science", "Environmental Modeling"],
        "publications": [
            "Climate Data Analysis with Machine Learning (Science, 2023)",
            "Predictive Models for Climate Change (Nature Climate Change, 2022)",
        ],
        "email": "e.watson@berkeley.edu",
        "score": 92,
        "reasoning": "Expert in climate science with strong data science background",
    },
    {
        "name": "Prof. David Kim",
        "title": "Professor of Ethics and AI",
        "institution": "Harvard University",
        "research_areas": ["AI Ethics", "Philosophy of Technology", "Responsible AI"],
        "publications": [
            "Ethical Frameworks for AI Development (Ethics in Science, 2023)",
            "Bias in Machine Learning Systems (AI & Society, 2022)",
        ],
        "email": "d.kim@harvard.edu",
        "score": 90,
        "reasoning": "Leading expert in AI ethics with interdisciplinary approach",
    },
    {
        "name": "Dr. Lisa Zhang",
        "title": "Senior Research Scientist",
        "institution": "Google DeepMind",
        "research_areas": ["Computer Vision", "Robotics", "Reinforcement Learning"],
        "publications": [
            "Vision-Language Models for Robotics (ICML, 2023)",
            "Multi-Modal Learning in Robotics (RSS, 2022)",
        ],
        "email": "l.zhang@deepmind.com",
        "score": 87,
        "reasoning": "Industry expertise in computer vision and robotics applications",
    },
]

# (query triggers, research-area keywords); first matching rule wins
_TOPIC_RULES: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    ((r"machine learning", r"\bml\b"), ("machine learning",)),
    ((r"climate",), ("climate",)),
    ((r"ethics",), ("ethics",)),
    ((r"computer vision", r"robotics"), ("computer vision", "robotics")),
)


def _has_area(record: Dict[str, Any], keywords: Tuple[str, ...]) -> bool:
    return any(k in area.lower() for area in record["research_areas"] for k in keywords)


def demo_results(query: str) -> List[Dict[str, Any]]:
    q = (query or "").lower()

    pool = _RESEARCHERS
    for triggers, keywords in _TOPIC_RULES:
        if any(re.search(t, q) for t in triggers):
            pool = [r for r in _RESEARCHERS if _has_area(r, keywords)]
            break

    return copy.deepcopy(pool[:MAX_DEMO_RESULTS])
