import asyncio
import time
from typing import Any, Dict

import streamlit as st

from i2pcontrol.calls import router_info, router_manager
from i2pcontrol.canonical.normalize import FIELD_LABELS, STATUS_FIELDS, error_text, normalize_router_info, router_status_values
from i2pcontrol.config import I2PCONTROL_PASSWORD, I2PCONTROL_REFRESH, I2PCONTROL_URL
from i2pcontrol.document import StreamlitDocument, update_document
from i2pcontrol.errors import AuthenticationError
from i2pcontrol.protocol import ROUTER_MANAGER_OPERATIONS, describe_error
from i2pcontrol.session import Session, session_for_password

# -----------------------------
# UI theme helpers
# -----------------------------
APP_TITLE = "I2P Router Console"
APP_SUBTITLE = "Live status of the local router through I2PControl"

# IMPORTANT: set_page_config must be the first Streamlit command
st.set_page_config(page_title="I2P Router Console", layout="wide")

st.markdown(
    """
<style>
  .block-container { padding-top: 2rem; max-width: 1080px; }
  .card {
    padding: 0.9rem 1.05rem;
    border-radius: 14px;
    border: 1px solid rgba(120,120,120,0.18);
    background: rgba(255,255,255,0.03);
    margin-bottom: 0.6rem;
  }
  .slot-label { opacity: 0.7; font-size: 0.85rem; }
  .badge {
    display: inline-block;
    padding: 0.18rem 0.55rem;
    border-radius: 999px;
    border: 1px solid rgba(120,120,120,0.22);
    font-size: 0.82rem;
  }
  .badge-ok { border-color: rgba(46, 204, 113, 0.55); }
  .badge-warn { border-color: rgba(241, 196, 15, 0.60); }
</style>
""",
    unsafe_allow_html=True,
)


def _badge(text: str, kind: str = "ok") -> str:
    cls = {"ok": "badge badge-ok", "warn": "badge badge-warn"}.get(kind, "badge")
    return f"<span class='{cls}'>{text}</span>"


# -----------------------------
# Session handling
# -----------------------------
def _session() -> Session:
    # One Session per browser tab; Streamlit reruns keep it in session_state.
    # A new sidebar password replaces the session on the next rerun.
    password = st.session_state.get("password") or I2PCONTROL_PASSWORD
    current = session_for_password(st.session_state.get("i2p_session"), password)
    st.session_state["i2p_session"] = current
    return current


async def _refresh(session: Session, document: StreamlitDocument, strict: bool) -> Dict[str, Any]:
    state: Dict[str, Any] = {}

    if not session.ready:
        await session.start(lambda: state.update({"authenticated": True}), validate=strict)

    def on_info(result: Dict[str, Any], s: Session) -> None:
        status = normalize_router_info(result)
        state["error"] = error_text(status)
        update_document(router_status_values(status), document)

    if session.ready:
        state["answered"] = await router_info(session, on_info) is not None
    return state


async def _manage(session: Session, operation: str) -> Dict[str, Any] | None:
    if not session.ready:
        await session.start(lambda: None)
    return await router_manager(session, operation, lambda r, s: None)


# -----------------------------
# Sidebar
# -----------------------------
with st.sidebar:
    st.markdown("### Connection")
    st.caption(I2PCONTROL_URL)
    st.text_input("Password", type="password", key="password", placeholder="from I2PCONTROL_PASSWORD")
    strict = st.checkbox("Reject failed logins", value=False)
    auto = st.checkbox("Auto refresh", value=True)
    if st.button("Reconnect", use_container_width=True):
        st.session_state.pop("i2p_session", None)

    st.markdown("### Router manager")
    for op in ROUTER_MANAGER_OPERATIONS:
        if st.button(op, use_container_width=True):
            res = asyncio.run(_manage(_session(), op))
            if res is None:
                st.error(f"{op}: no answer")
            elif "error" in res:
                st.error(f"{op}: {describe_error(res['error'])}")
            else:
                st.success(f"{op} requested")

# -----------------------------
# Main
# -----------------------------
st.markdown(f"## {APP_TITLE}")
st.caption(APP_SUBTITLE)

cols = st.columns(3)
placeholders = {}
for i, field in enumerate(STATUS_FIELDS):
    with cols[i % 3]:
        st.markdown(f"<div class='slot-label'>{FIELD_LABELS[field]}</div>", unsafe_allow_html=True)
        placeholders[field] = st.empty()
document = StreamlitDocument(placeholders)
flag = st.empty()

session = _session()
try:
    state = asyncio.run(_refresh(session, document, strict))
except AuthenticationError as e:
    st.session_state.pop("i2p_session", None)
    st.error(str(e))
    state = {}

if not session.ready:
    flag.markdown(_badge("router unreachable", "warn"), unsafe_allow_html=True)
elif session.error:
    # sticky: once the router reported an error it stays flagged for this session
    detail = state.get("error") or "see router log"
    flag.markdown(_badge(f"router reported an error: {detail}", "warn"), unsafe_allow_html=True)
else:
    flag.markdown(_badge("connected"), unsafe_allow_html=True)

if auto:
    time.sleep(I2PCONTROL_REFRESH)
    st.rerun()
