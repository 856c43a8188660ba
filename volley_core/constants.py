from __future__ import annotations
from typing import Dict, List

# -----------------------------
# Seats (court 1-6, bench 7-11)
# -----------------------------
SEAT_COUNT = 11

COURT_SEATS: List[int] = [1, 2, 3, 4, 5, 6]
BENCH_SEATS: List[int] = [7, 8, 9, 10, 11]
ALL_SEATS: List[int] = COURT_SEATS + BENCH_SEATS

SEAT_LABELS: Dict[int, str] = {
    1: "P1", 2: "P2", 3: "P3", 4: "P4", 5: "P5", 6: "P6",
    7: "B1", 8: "B2", 9: "B3", 10: "B4", 11: "B5",
}

SEAT_NAMES: Dict[int, str] = {
    1: "Back Right (Serve)",
    2: "Front Right",
    3: "Front Center",
    4: "Front Left",
    5: "Back Left",
    6: "Back Center",
    7: "Bench 1",
    8: "Bench 2",
    9: "Bench 3",
    10: "Bench 4",
    11: "Bench 5",
}

SERVE_SEAT = 1

# --------------------------------
# Rotation cycle (order players move)
# --------------------------------
# P2 -> B5 -> B4 -> B3 -> B2 -> B1 -> P1 (serve) -> P6 -> P5 -> P4 -> P3 -> P2
# Front right drops to the bench entry (B5); the bench exit (B1) comes on to serve.
ROTATION_SEQUENCE: List[int] = [2, 11, 10, 9, 8, 7, 1, 6, 5, 4, 3]

CYCLE_POSITION: Dict[int, int] = {seat: idx for idx, seat in enumerate(ROTATION_SEQUENCE)}

ROTATION_COUNT = len(ROTATION_SEQUENCE)
FIRST_ROTATION = 1
LAST_ROTATION = ROTATION_COUNT

# ---------------------
# Display orders
# ---------------------
FRONT_ROW: List[int] = [4, 3, 2]
BACK_ROW: List[int] = [5, 6, 1]
BENCH_ORDER: List[int] = [11, 10, 9, 8, 7]  # entry (B5) first, exit (B1) last

# sheet columns / member editor order: P4, P3, P2, P5, P6, P1, B5..B1
SHEET_ORDER: List[int] = FRONT_ROW + BACK_ROW + BENCH_ORDER

# ---------------------
# Roles
# ---------------------
ROLES = ["Any", "S", "OH", "MB", "OP", "L"]
LIBERO_ROLE = "L"
DEFAULT_ROLE = "Any"

EMPTY_CELL = "-"


def seat_kind(seat_id: int) -> str:
    if seat_id in COURT_SEATS:
        return "court"
    if seat_id in BENCH_SEATS:
        return "bench"
    raise ValueError(f"Unknown seat: {seat_id}")


def is_bench(seat_id: int) -> bool:
    return seat_kind(seat_id) == "bench"


# ---------------------
# Normalization helpers
# ---------------------
def normalize_name(s: str) -> str:
    if s is None:
        return ""
    return " ".join(str(s).split())


def normalize_number(n) -> str:
    # jersey numbers stay strings ("07" is a valid jersey)
    if n is None:
        return ""
    return str(n).strip()
