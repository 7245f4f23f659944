# pages/3_Teams.py
import streamlit as st

from roster_core.errors import RosterError
from roster_core.export import export_filename, render_teams_pdf, teams_csv_bytes, teams_to_frame
from roster_core.teams import load_teams, remove_player, remove_team
from roster_core.ui_helpers import require_state

require_state()

st.title("3. Registered Teams")

client = st.session_state.client

try:
    teams = load_teams(client)
except RosterError as exc:
    st.error(f"Could not load teams: {exc.describe()}")
    st.stop()

c1, c2 = st.columns(2)
c1.download_button(
    "Export to PDF", data=render_teams_pdf(teams) if teams else b"",
    file_name=export_filename("pdf"), mime="application/pdf", disabled=not teams,
)
c2.download_button(
    "Export to CSV", data=teams_csv_bytes(teams) if teams else b"",
    file_name=export_filename("csv"), mime="text/csv", disabled=not teams,
)

if st.session_state.get("list_error"):
    st.error(st.session_state.list_error)

if not teams:
    st.write("No teams registered yet.")
    st.stop()

def _run(action, *args):
    st.session_state.list_error = None
    try:
        action(client, *args)
    except RosterError as exc:
        st.session_state.list_error = exc.describe()
    st.rerun()

for team in teams:
    with st.container(border=True):
        h1, h2 = st.columns([4, 1])
        h1.subheader(team.name)
        confirm = h2.checkbox("Confirm", key=f"confirm-team-{team.id}", help="Players may be deleted too, depending on the service.")
        if h2.button("Delete team", key=f"del-team-{team.id}", disabled=not confirm):
            _run(remove_team, team)
        if not team.players:
            st.caption("This team has no registered players.")
        for p in team.players:
            r1, r2 = st.columns([4, 1])
            r1.write(f"{p.first_name} {p.last_name} (DNI {p.dni})")
            if r2.button("Delete", key=f"del-player-{p.id}"):
                _run(remove_player, p)

with st.expander("Table view"):
    st.dataframe(teams_to_frame(teams), hide_index=True)
