from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .models import Player, Seat
from .constants import (
    ALL_SEATS, CYCLE_POSITION, EMPTY_CELL, FIRST_ROTATION, LAST_ROTATION,
    ROTATION_COUNT, ROTATION_SEQUENCE, SEAT_LABELS, SEAT_NAMES, SERVE_SEAT,
    SHEET_ORDER, seat_kind,
)

logger = logging.getLogger(__name__)

# -----------------------
# Seat lookups
# -----------------------
SEATS: Dict[int, Seat] = {
    sid: Seat(
        id=sid,
        label=SEAT_LABELS[sid],
        name=SEAT_NAMES[sid],
        kind=seat_kind(sid),
        display_order=sid,
    )
    for sid in ALL_SEATS
}


def seat_info(seat_id: int) -> Seat:
    try:
        return SEATS[seat_id]
    except KeyError:
        raise ValueError(f"Unknown seat: {seat_id}") from None


def cycle_position(seat_id: int) -> int:
    """0-based index of a seat in the rotation cycle."""
    try:
        return CYCLE_POSITION[seat_id]
    except KeyError:
        raise ValueError(f"Unknown seat: {seat_id}") from None


def by_home_seat(roster: Iterable[Player]) -> Dict[int, Player]:
    # first player wins when two share a home seat
    out: Dict[int, Player] = {}
    for p in roster:
        out.setdefault(p.start_seat, p)
    return out

# -----------------------
# Rotation mapping
# -----------------------
def home_seat_at(rotation: int, seat_id: int) -> int:
    """
    Home seat of whoever stands at `seat_id` during `rotation`.

    Players advance one cycle position per rotation, so the occupant at
    rotation r started r-1 positions earlier in the cycle. Python's % is
    floored, so the result is non-negative for any integer rotation.
    """
    pos = cycle_position(seat_id)
    offset = rotation - 1
    return ROTATION_SEQUENCE[(pos - offset) % ROTATION_COUNT]


def seat_of(rotation: int, home_seat: int) -> int:
    """Seat occupied during `rotation` by the player whose home seat is `home_seat`."""
    pos = cycle_position(home_seat)
    return ROTATION_SEQUENCE[(pos + rotation - 1) % ROTATION_COUNT]


def resolve(rotation: int, seat_id: int, roster: Iterable[Player]) -> Optional[Player]:
    home = home_seat_at(rotation, seat_id)
    for p in roster:
        if p.start_seat == home:
            return p
    logger.debug(f"Rotation {rotation}: {SEAT_LABELS[seat_id]} is empty (no player from {SEAT_LABELS[home]})")
    return None


def lineup_at(rotation: int, roster: Iterable[Player]) -> Dict[int, Optional[Player]]:
    """seat_id -> occupant (or None) for every seat at one rotation."""
    homes = by_home_seat(roster)
    return {sid: homes.get(home_seat_at(rotation, sid)) for sid in ALL_SEATS}


def server_at(rotation: int, roster: Iterable[Player]) -> Optional[Player]:
    return resolve(rotation, SERVE_SEAT, roster)


def player_path(player: Player) -> List[int]:
    return [seat_of(r, player.start_seat) for r in range(FIRST_ROTATION, LAST_ROTATION + 1)]


def open_seats(roster: Iterable[Player]) -> List[int]:
    """Home seats (in cycle order) nobody starts in."""
    taken = {p.start_seat for p in roster}
    return [sid for sid in ROTATION_SEQUENCE if sid not in taken]

# -----------------------
# Rotation index navigation
# -----------------------
def next_rotation(rotation: int) -> int:
    return FIRST_ROTATION if rotation == LAST_ROTATION else rotation + 1


def previous_rotation(rotation: int) -> int:
    return LAST_ROTATION if rotation == FIRST_ROTATION else rotation - 1

# -----------------------
# Sheet (all rotations)
# -----------------------
def rotation_sheet(roster: List[Player], value: str = "number") -> pd.DataFrame:
    """
    Table of every rotation: index Rot 1..11, one column per seat label in
    sheet order (P4 P3 P2 P5 P6 P1 B5..B1). Cells hold the occupant's `value`
    attribute (jersey number by default), "-" when the seat is empty.
    """
    rows = []
    for rot in range(FIRST_ROTATION, LAST_ROTATION + 1):
        lineup = lineup_at(rot, roster)
        row = {"Rot": rot}
        for sid in SHEET_ORDER:
            p = lineup[sid]
            row[SEAT_LABELS[sid]] = getattr(p, value) if p is not None else EMPTY_CELL
        rows.append(row)
    df = pd.DataFrame(rows).set_index("Rot")
    return df
