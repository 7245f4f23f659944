# roster_core/ui_helpers.py
from __future__ import annotations
from typing import Optional

import streamlit as st

from .editor import RosterEditor

def require_state() -> None:
    if "client" not in st.session_state:
        st.warning("Open the **app** home page first.")
        st.stop()

def player_rows(editor: RosterEditor, key: str, disabled: bool = False) -> Optional[int]:
    """
    Draw one input row per player, pushing every change through the editor.
    Returns the index whose Remove button was pressed, if any.
    """
    removed = None
    slots = []
    for i, p in enumerate(editor.players):
        tag = f"(ID: {p.id})" if p.id is not None else "(New)"
        with st.container(border=True):
            st.markdown(f"**Player {i + 1}** {tag}")
            c1, c2, c3, c4 = st.columns([3, 3, 3, 1])
            first = c1.text_input("First name", p.first_name, key=f"{key}-row-first-{i}", disabled=disabled)
            last = c2.text_input("Last name", p.last_name, key=f"{key}-row-last-{i}", disabled=disabled)
            dni = c3.text_input("DNI", p.dni, key=f"{key}-row-dni-{i}", disabled=disabled)
            if (first, last, dni) != p.editable_fields():
                editor.update_player(i, first_name=first, last_name=last, dni=dni)
            if c4.button("🗑", key=f"{key}-row-rm-{i}", disabled=disabled or not editor.can_remove, help="Remove"):
                removed = i
            slots.append(st.empty())
    # errors reflect every edit made in this pass
    errors = editor.errors
    for i, slot in enumerate(slots):
        if i in errors:
            slot.error(errors[i])
    return removed

def clear_row_widgets(key: str) -> None:
    # row widgets are keyed by index; drop them so rows redraw from the editor
    for k in [k for k in st.session_state.keys() if str(k).startswith(f"{key}-row-")]:
        del st.session_state[k]
