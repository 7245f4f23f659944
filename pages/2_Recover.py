# pages/2_Recover.py
import asyncio

import streamlit as st

from roster_core.errors import RosterError
from roster_core.ui_helpers import clear_row_widgets, player_rows, require_state

require_state()

st.title("2. Recover & Edit Team")

session = st.session_state.recovery
cfg = st.session_state.app_config

code = st.text_input("Recovery code", key="rec-code", placeholder="e.g. 2356")
if st.button("Find team", disabled=not code.strip()):
    st.session_state.rec_error = None
    st.session_state.rec_saved = False
    try:
        with st.spinner("Searching..."):
            asyncio.run(session.load(code))
    except RosterError as exc:
        st.session_state.rec_error = exc.describe()
    st.session_state.pop("rec-team", None)
    clear_row_widgets("rec")
    st.rerun()

if not session.loaded:
    if st.session_state.get("rec_error"):
        st.error(st.session_state.rec_error)
    st.stop()

editor = session.editor
st.subheader("Editing team")
name = st.text_input("Team name", editor.team_name, key="rec-team")
editor.set_team_name(name)

st.subheader(f"Players ({len(editor.players)} / {cfg.max_players})")
removed = player_rows(editor, "rec")
if removed is not None:
    editor.remove_player(removed)
    clear_row_widgets("rec")
    st.rerun()

if editor.can_add:
    if st.button("➕ Add player"):
        editor.add_player()
        st.rerun()
else:
    st.info(f"You have reached the limit of {cfg.max_players} players.")

if st.button("Save changes", type="primary", disabled=not editor.can_submit):
    st.session_state.rec_saved = False
    try:
        with st.spinner("Saving..."):
            asyncio.run(session.save())
    except RosterError as exc:
        st.session_state.rec_error = exc.describe()
    else:
        st.session_state.rec_error = None
        st.session_state.rec_saved = True
        st.session_state.pop("rec-team", None)
        clear_row_widgets("rec")
    st.rerun()

if st.session_state.get("rec_error"):
    st.error(st.session_state.rec_error)
if st.session_state.get("rec_saved"):
    st.success("Changes saved successfully!")
