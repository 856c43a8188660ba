"""
volley_core: seat tables, rotation resolver, roster editing and sheet exports
for the 11-player volleyball rotation planner.
"""
from .constants import (
    SEAT_COUNT, COURT_SEATS, BENCH_SEATS, ALL_SEATS, SEAT_LABELS, SEAT_NAMES,
    SERVE_SEAT, ROTATION_SEQUENCE, CYCLE_POSITION, SHEET_ORDER, ROLES,
)
from .models import Seat, Player, PlannerState, AppConfig
from .engine import resolve, next_rotation, previous_rotation, lineup_at, rotation_sheet
from .roster import default_roster, update_player, sort_for_editor

__all__ = [
    "SEAT_COUNT", "COURT_SEATS", "BENCH_SEATS", "ALL_SEATS", "SEAT_LABELS", "SEAT_NAMES",
    "SERVE_SEAT", "ROTATION_SEQUENCE", "CYCLE_POSITION", "SHEET_ORDER", "ROLES",
    "Seat", "Player", "PlannerState", "AppConfig",
    "resolve", "next_rotation", "previous_rotation", "lineup_at", "rotation_sheet",
    "default_roster", "update_player", "sort_for_editor",
]
