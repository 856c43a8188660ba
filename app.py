from __future__ import annotations
import html
import logging
from typing import List

import pandas as pd
import streamlit as st

from volley_core.config import load_config, configure_logging, ui_css
from volley_core.constants import LAST_ROTATION, ROLES, SEAT_LABELS
from volley_core.models import Player, PlannerState
from volley_core.engine import (
    lineup_at, next_rotation, previous_rotation, rotation_sheet, open_seats, server_at,
)
from volley_core.roster import (
    default_roster, update_player, sort_for_editor, roster_to_dataframe, dataframe_to_roster,
)
from volley_core.csv_io import roster_sheet_csv, sheet_to_csv_bytes
from volley_core.export_pdf import render_sheet_pdf
from volley_core.ui_helpers import (
    bench_html, court_html, display_name, rotation_flow_text, seat_caption,
)

# -----------------------------
# Page config
# -----------------------------
CONFIG = load_config()
configure_logging(CONFIG.log_level)
logger = logging.getLogger("volley_planner")

st.set_page_config(layout="wide", page_title="Volleyball 11-Player Rotation")
st.markdown(ui_css(), unsafe_allow_html=True)

# -----------------------------
# Session state init
# -----------------------------
def _ensure_state():
    ss = st.session_state
    ss.setdefault("roster", [p.model_dump() for p in default_roster()])
    ss.setdefault("planner", PlannerState(
        rotation=CONFIG.start_rotation, view_mode=CONFIG.default_view
    ).model_dump())

_ensure_state()

def _roster_obj() -> List[Player]:
    return [Player(**p) for p in st.session_state["roster"]]

def _set_roster(roster: List[Player]):
    st.session_state["roster"] = [p.model_dump() for p in roster]

def _planner_obj() -> PlannerState:
    return PlannerState(**st.session_state["planner"])

def _set_planner(ps: PlannerState):
    st.session_state["planner"] = ps.model_dump()

def _clear_editor_widgets():
    for k in list(st.session_state.keys()):
        if k.startswith(("num_", "name_", "role_")) or k == "roster_table":
            del st.session_state[k]

# -----------------------------
# Callbacks
# -----------------------------
def _go_prev():
    ps = _planner_obj()
    ps.rotation = previous_rotation(ps.rotation)
    _set_planner(ps)

def _go_next():
    ps = _planner_obj()
    ps.rotation = next_rotation(ps.rotation)
    _set_planner(ps)

def _on_edit(player_id: str, field: str, key: str):
    _set_roster(update_player(_roster_obj(), player_id, field, st.session_state[key]))

def _on_view_change():
    ps = _planner_obj()
    ps.view_mode = "court" if st.session_state["view_radio"] == "Court" else "table"
    _set_planner(ps)

def _reset_roster():
    _set_roster(default_roster())
    _clear_editor_widgets()
    logger.info("Roster reset to defaults")

# -----------------------------
# Member editor (left column)
# -----------------------------
def member_editor():
    st.subheader("Members (start positions)")
    roster = _roster_obj()
    for p in sort_for_editor(roster):
        st.caption(f"Start: {seat_caption(p.start_seat)}")
        c1, c2, c3 = st.columns([1, 3, 2])
        with c1:
            key = f"num_{p.id}"
            st.text_input("#", value=p.number, key=key, label_visibility="collapsed",
                          placeholder="#", on_change=_on_edit, args=(p.id, "number", key))
        with c2:
            key = f"name_{p.id}"
            st.text_input("Name", value=p.name, key=key, label_visibility="collapsed",
                          placeholder="Name", on_change=_on_edit, args=(p.id, "name", key))
        with c3:
            key = f"role_{p.id}"
            opts = ROLES if p.role in ROLES else ROLES + [p.role]
            st.selectbox("Role", opts, index=opts.index(p.role), key=key,
                         label_visibility="collapsed", on_change=_on_edit, args=(p.id, "role", key))

    missing = open_seats(roster)
    if missing:
        st.warning("No player starts at: " + ", ".join(SEAT_LABELS[s] for s in missing))

    with st.expander("Edit as table"):
        edited = st.data_editor(
            roster_to_dataframe(roster),
            key="roster_table",
            hide_index=True,
            use_container_width=True,
            column_config={
                "id": st.column_config.TextColumn("id", disabled=True),
                "start": st.column_config.TextColumn("Start", disabled=True),
                "number": st.column_config.TextColumn("#"),
                "name": st.column_config.TextColumn("Name"),
                "role": st.column_config.SelectboxColumn("Role", options=ROLES, required=True),
            },
        )
        if st.button("Apply table edits", key="apply_table"):
            _set_roster(dataframe_to_roster(edited, roster))
            _clear_editor_widgets()
            st.rerun()

    st.button("Reset to default roster", key="reset_roster", on_click=_reset_roster)

# -----------------------------
# Court view
# -----------------------------
def court_view():
    ps = _planner_obj()
    roster = _roster_obj()

    cprev, cmid, cnext = st.columns([1, 4, 1])
    with cprev:
        st.button("◀", key="rot_prev", on_click=_go_prev, help="Previous rotation")
    with cmid:
        st.markdown(
            f"<div style='text-align:center'><span class='caption'>ROTATION</span><br>"
            f"<span style='font-size:2rem;font-weight:700'>{ps.rotation}</span>"
            f"<span class='caption'> / {LAST_ROTATION}</span></div>",
            unsafe_allow_html=True,
        )
    with cnext:
        st.button("▶", key="rot_next", on_click=_go_next, help="Next rotation")

    lineup = lineup_at(ps.rotation, roster)
    st.caption(f"Serving: {display_name(server_at(ps.rotation, roster))}")

    st.markdown(court_html(lineup) + bench_html(lineup), unsafe_allow_html=True)

    st.markdown(
        f'<div class="flow"><strong>Rotation flow:</strong> {html.escape(rotation_flow_text())}<br>'
        "Front right (P2) drops to the bench entry (B5); the bench exit (B1) comes on to serve (P1).</div>",
        unsafe_allow_html=True,
    )

# -----------------------------
# Sheet view (all rotations)
# -----------------------------
def sheet_view():
    ps = _planner_obj()
    roster = _roster_obj()
    st.subheader(f"All rotations ({LAST_ROTATION})")

    show = st.radio("Show", ["Numbers", "Names"], horizontal=True, key="sheet_value")
    df = rotation_sheet(roster, value="number" if show == "Numbers" else "name")

    def _highlight(row: pd.Series):
        on = row.name == ps.rotation
        return ["background-color: #dbeafe; font-weight: 700" if on else "" for _ in row]

    st.dataframe(df.style.apply(_highlight, axis=1), use_container_width=True)

    numbers = rotation_sheet(roster)
    c1, c2, c3 = st.columns(3)
    with c1:
        st.download_button("Download Numbers (CSV)", data=sheet_to_csv_bytes(numbers),
                           file_name="rotations_numbers.csv", mime="text/csv", key="dl_csv_numbers")
    with c2:
        st.download_button("Download Numbers + Names (CSV)", data=roster_sheet_csv(roster),
                           file_name="rotations.csv", mime="text/csv", key="dl_csv")
    with c3:
        pdf = render_sheet_pdf(CONFIG.team_name, numbers, current_rotation=ps.rotation)
        st.download_button("Download Sheet (PDF)", data=pdf, file_name="rotations.pdf",
                           mime="application/pdf", key="dl_pdf")

# -----------------------------
# Layout
# -----------------------------
hdr, toggle = st.columns([3, 2])
with hdr:
    st.title(CONFIG.team_name)
    st.caption("Everyone rotates: P2 → bench → P1")
with toggle:
    view = _planner_obj().view_mode
    st.radio("View", ["Court", "Table"], index=0 if view == "court" else 1,
             horizontal=True, key="view_radio", on_change=_on_view_change)

left, right = st.columns([1, 2])
with left:
    member_editor()
with right:
    if _planner_obj().view_mode == "court":
        court_view()
    else:
        sheet_view()
