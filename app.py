# app.py
import streamlit as st

from roster_core.api import ApiClient
from roster_core.config import SETTINGS_PATH, configure_logging, ensure_assets_exist, load_config, ui_css
from roster_core.session import RecoverySession, RegistrationSession

# ---------- Page & Theme ----------
st.set_page_config(page_title="Team Registration", layout="centered")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_assets_exist()

# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    if "app_config" not in ss:
        ss.app_config = load_config(SETTINGS_PATH)
        configure_logging(ss.app_config.log_level)
    cfg = ss.app_config
    ss.setdefault("client", ApiClient(cfg.api_base_url, timeout=cfg.request_timeout))
    ss.setdefault("registration", RegistrationSession(ss.client, cfg))
    ss.setdefault("recovery", RecoverySession(ss.client, cfg))

_init_state()

# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Service")
    st.caption(st.session_state.app_config.api_base_url)
    st.caption(f"Max players per team: {st.session_state.app_config.max_players}")

# ---------- Landing ----------
st.title("Team Registration")
st.write("Register a team and its players, recover a team with its code, or manage every registered team.")
st.page_link("pages/1_Register.py", label="Register a team", icon="📝")
st.page_link("pages/2_Recover.py", label="Recover & edit a team", icon="🔑")
st.page_link("pages/3_Teams.py", label="Registered teams", icon="📋")
