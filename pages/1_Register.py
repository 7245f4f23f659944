# pages/1_Register.py
import asyncio
import html

import streamlit as st

from roster_core.errors import RosterError
from roster_core.ui_helpers import clear_row_widgets, player_rows, require_state

require_state()

st.title("1. Team Registration")

session = st.session_state.registration
editor = session.editor
cfg = st.session_state.app_config

name = st.text_input("Team name", editor.team_name, key="reg-team", placeholder="e.g. Los Cóndores FC")
editor.set_team_name(name)

st.subheader(f"Players ({len(editor.players)} / {cfg.max_players})")
removed = player_rows(editor, "reg")
if removed is not None:
    editor.remove_player(removed)
    clear_row_widgets("reg")
    st.rerun()

if editor.can_add:
    if st.button("➕ Add player"):
        editor.add_player()
        st.rerun()
else:
    st.info(f"You have reached the limit of {cfg.max_players} players.")

if st.button("Register team", type="primary", disabled=not editor.can_submit):
    try:
        with st.spinner("Registering..."):
            asyncio.run(session.submit())
    except RosterError as exc:
        st.session_state.reg_error = exc.describe()
    else:
        st.session_state.reg_error = None
        st.session_state.pop("reg-team", None)
        clear_row_widgets("reg")
    st.rerun()

if st.session_state.get("reg_error"):
    st.error(st.session_state.reg_error)
if session.last_result is not None:
    st.success(session.success_message)
    if session.recovery_code:
        st.markdown("Keep this recovery code to edit your team later:")
        st.markdown(f"<div class='card code-badge'>{html.escape(session.recovery_code)}</div>", unsafe_allow_html=True)
    else:
        st.warning("The service did not return a recovery code for this team. Contact the organisers to edit it later.")
