from __future__ import annotations

from typing import Any, Optional, Tuple

from backend_client import BackendClient
from config import Settings
from demo_results import demo_results


def load_text_from_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def resolve_payload(
    query: Optional[str],
    file_path: Optional[str],
    text_arg: Optional[str],
    *,
    demo: bool = False,
    settings: Optional[Settings] = None,
) -> Tuple[Any, str]:
    """
    Returns: (payload, source)

    Raises OSError / ValueError on unusable local input, BackendError when the
    backend cannot answer a query.
    """
    if file_path:
        return load_text_from_file(file_path), file_path

    if text_arg is not None:
        return text_arg, "manual_text"

    if not query or not query.strip():
        raise ValueError("Provide --query, --file or --text")

    if demo:
        return demo_results(query), "demo"

    return BackendClient(settings).fetch_output(query), "backend"
