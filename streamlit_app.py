import json
import logging
import time
from typing import Any

import streamlit as st

from backend_client import BackendClient, BackendError
from config import configure_logging, load_settings
from demo_results import DEMO_NOTICE, demo_results
from renderer import raw_text, render_output, to_markdown
from renderer_widgets import draw_outcome
from view_nodes import RawFallback, as_dict

# =========================
# CollabLens: Streamlit App
# =========================

st.set_page_config(page_title="CollabLens", page_icon="🔬", layout="wide")

settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("collablens.app")


# -------------------------
# 0) Session State
# -------------------------
def _init_state():
    defaults = {
        "query": "",
        "payload": None,
        "outcome": None,
        "is_demo": False,
        "last_error": "",
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


_init_state()


# -------------------------
# 1) Constants
# -------------------------
LOADING_STAGES = [
    "Analyzing your request...",
    "Searching research databases...",
    "Finding potential matches...",
    "Generating recommendations...",
    "Finalizing results...",
]

EXAMPLE_QUERIES = [
    "I need a collaborator with expertise in machine learning and healthcare data analysis",
    "Looking for researchers working on climate change modeling and environmental data science",
    "Seeking experts in AI ethics and responsible technology development",
    "Find collaborators specializing in computer vision and robotics applications",
]


# -------------------------
# 2) Search
# -------------------------
def _store(query: str, payload: Any, is_demo: bool, error: str = "") -> None:
    st.session_state.update(
        {
            "query": query,
            "payload": payload,
            "outcome": render_output(payload),
            "is_demo": is_demo,
            "last_error": error,
        }
    )


def run_search(query: str) -> None:
    client = BackendClient(settings)
    with st.status(LOADING_STAGES[0], expanded=False) as status:
        try:
            for stage in LOADING_STAGES[1:-1]:
                status.update(label=stage)
                time.sleep(0.2)
            payload = client.fetch_output(query)
        except BackendError as e:
            logger.warning("Backend unavailable, query=%r: %s", query, e)
            if not settings.demo_on_failure:
                status.update(label="Search failed", state="error")
                st.session_state.update({"payload": None, "outcome": None, "is_demo": False, "last_error": str(e)})
                return
            status.update(label="Backend unavailable. Showing demo results.", state="error")
            _store(query, demo_results(query), is_demo=True, error=str(e))
            return

        status.update(label=LOADING_STAGES[-1])
        _store(query, payload, is_demo=False)
        status.update(label="Done!", state="complete")


# -------------------------
# 3) Main UI
# -------------------------
st.title("🔬 CollabLens")
st.caption("Find research collaborators. Describe the expertise you are looking for.")

with st.sidebar:
    st.subheader("Settings")
    st.text_input("Backend URL", value=settings.backend_url, disabled=True)
    st.caption(f"Timeout: {settings.request_timeout:g}s · Demo fallback: {'on' if settings.demo_on_failure else 'off'}")

    st.divider()
    st.subheader("Example queries")
    for i, example in enumerate(EXAMPLE_QUERIES):
        if st.button(example, key=f"example_{i}", use_container_width=True):
            st.session_state["query_input"] = example

    st.divider()
    if st.button("Clear results / reset", use_container_width=True):
        st.session_state.update({"payload": None, "outcome": None, "is_demo": False, "last_error": "", "query_input": ""})
        st.rerun()

query = st.text_area("What kind of collaborator are you looking for?", key="query_input", height=120)

if st.button("Find Collaborators", type="primary"):
    if not (query or "").strip():
        st.warning("Please enter a query.")
    else:
        run_search(query.strip())

tab_results, tab_debug = st.tabs(["Results", "Debug"])

with tab_results:
    outcome = st.session_state["outcome"]
    if st.session_state["is_demo"]:
        with st.container(border=True):
            st.markdown("**⚠️ Demo Mode Active**")
            st.caption(DEMO_NOTICE)
            if st.button("Retry API Connection"):
                run_search(st.session_state["query"])
                st.rerun()
    elif st.session_state["last_error"] and outcome is None:
        st.error(f"Search failed: {st.session_state['last_error']}")

    if outcome is not None:
        if isinstance(outcome, RawFallback):
            st.warning("Could not format these results. Showing raw output.")
        draw_outcome(outcome, raw_text(st.session_state["payload"]))
        st.download_button(
            "Download as Markdown",
            data=to_markdown(outcome),
            file_name="collablens_results.md",
            mime="text/markdown",
        )
    elif not st.session_state["last_error"]:
        st.info("Enter a query above to find collaborators.")

with tab_debug:
    payload = st.session_state["payload"]
    st.markdown("**Raw payload**")
    st.code(raw_text(payload) if payload is not None else "", language="json")
    st.markdown("**View tree**")
    outcome = st.session_state["outcome"]
    st.code(json.dumps(as_dict(outcome), indent=2, ensure_ascii=False) if outcome is not None else "{}", language="json")
