#!/usr/bin/env python3
"""
FILE: pipeline.py
PURPOSE: Local CollabLens runner — resolves input → raw payload → view tree → Markdown / JSON.

Exit codes:
  0  rendered (a RawFallback view still counts as rendered)
  2  input failed (missing query, unreadable file)
  3  backend failed and demo fallback is off
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from backend_client import BackendError
from config import configure_logging, load_settings
from demo_results import demo_results
from io_sources import resolve_payload
from renderer import render_output, to_markdown
from view_nodes import as_dict

logger = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render collaborator search results.")
    p.add_argument("--query", type=str, default=None, help="Ask the backend for collaborators")
    p.add_argument("--file", type=str, default=None, help="Render a local payload file (JSON or text)")
    p.add_argument("--text", type=str, default=None, help="Render the provided payload text")
    p.add_argument("--demo", action="store_true", help="Use demo results instead of the backend")
    p.add_argument("--json", action="store_true", help="Print the view tree as JSON")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = load_settings(use_secrets=False)
    configure_logging(settings.log_level)

    try:
        payload, source = resolve_payload(args.query, args.file, args.text, demo=args.demo, settings=settings)
    except (OSError, ValueError) as e:
        print("❌ Input failed:")
        print(str(e))
        return 2
    except BackendError as e:
        if not settings.demo_on_failure:
            print("❌ Backend failed:")
            print(str(e))
            return 3
        logger.warning("Backend unavailable (%s); using demo results", e)
        payload, source = demo_results(args.query), "demo"

    view = render_output(payload)
    logger.info("Rendered %s payload from %s as %s", type(payload).__name__, source, view.kind)

    if args.json:
        print(json.dumps(as_dict(view), indent=2, ensure_ascii=False))
    else:
        if source == "demo":
            print("> ⚠️ Demo Mode Active: showing sample researchers.\n")
        print(to_markdown(view), end="")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
