# roster_core/export.py
from __future__ import annotations
import datetime as dt
import io
from typing import List, Optional, Sequence
from xml.sax.saxutils import escape

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .models import Team

COLUMNS = ["Team", "First name", "Last name", "DNI"]
PLAYER_COLUMNS = COLUMNS[1:]
NO_PLAYERS = "This team has no registered players."

def teams_to_frame(teams: Sequence[Team]) -> pd.DataFrame:
    """One row per player; teams without players still get a row with blank player columns."""
    rows = []
    for t in teams:
        if not t.players:
            rows.append({"Team": t.name, "First name": "", "Last name": "", "DNI": ""})
        for p in t.players:
            rows.append({"Team": t.name, "First name": p.first_name, "Last name": p.last_name, "DNI": p.dni})
    return pd.DataFrame(rows, columns=COLUMNS)

def teams_csv_bytes(teams: Sequence[Team]) -> bytes:
    buf = io.StringIO()
    teams_to_frame(teams).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")

def export_filename(ext: str, today: Optional[dt.date] = None) -> str:
    today = today or dt.date.today()
    return f"teams_{today.isoformat()}.{ext.lstrip('.')}"

def _team_table(team: Team) -> Table:
    data: List[List[str]] = [PLAYER_COLUMNS]
    data += [[p.first_name, p.last_name, p.dni] for p in team.players]
    t = Table(data, repeatRows=1, hAlign="LEFT")
    t.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4B5563")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.white),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,-1), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
    ]))
    return t

def render_teams_pdf(teams: Sequence[Team]) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, title="Teams and Players")
    styles = getSampleStyleSheet()

    story = [Paragraph("Teams and Players", styles["Title"]), Spacer(1, 8)]
    for team in teams:
        story.append(Paragraph(f"Team: {escape(team.name)}", styles["Heading2"]))
        if team.players:
            story.append(_team_table(team))
        else:
            story.append(Paragraph(NO_PLAYERS, styles["Italic"]))
        story.append(Spacer(1, 12))

    doc.build(story)
    return buf.getvalue()
