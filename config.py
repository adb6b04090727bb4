#!/usr/bin/env python3
"""
FILE: config.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
Runtime settings for CollabLens.

Lookup order per setting:
  1) Streamlit secrets (only when a secrets file exists)
  2) Environment variables (after .env is loaded by python-dotenv)
  3) Built-in defaults

Invalid numbers / booleans fall back to the default instead of failing.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

DEFAULT_BACKEND_URL = "https://mr-thop-research-management.hf.space"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"

ENV_BACKEND_URL = "COLLABLENS_BACKEND_URL"
ENV_TIMEOUT = "COLLABLENS_TIMEOUT"
ENV_LOG_LEVEL = "COLLABLENS_LOG_LEVEL"
ENV_DEMO_ON_FAILURE = "COLLABLENS_DEMO_ON_FAILURE"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    demo_on_failure: bool = True


def get_clean_value(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).replace("\n", "").replace("\r", "").strip()


def _from_secrets(name: str) -> Optional[str]:
    try:
        import streamlit as st

        value = st.secrets.get(name)
    except FileNotFoundError:
        # No secrets.toml (CLI / tests / bare deployments)
        return None
    return get_clean_value(value) or None


def _lookup(name: str) -> str:
    return _from_secrets(name) or get_clean_value(os.getenv(name))


def _as_float(raw: str, default: float) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _as_bool(raw: str, default: bool) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return default


def load_settings(*, use_secrets: bool = True) -> Settings:
    load_dotenv()
    lookup = _lookup if use_secrets else (lambda n: get_clean_value(os.getenv(n)))

    backend_url = lookup(ENV_BACKEND_URL) or DEFAULT_BACKEND_URL
    return Settings(
        backend_url=backend_url.rstrip("/"),
        request_timeout=_as_float(lookup(ENV_TIMEOUT), DEFAULT_TIMEOUT),
        log_level=(lookup(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
        demo_on_failure=_as_bool(lookup(ENV_DEMO_ON_FAILURE), True),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
