from __future__ import annotations
import logging
from typing import Dict, List

import pandas as pd

from .models import Player
from .constants import DEFAULT_ROLE, SEAT_LABELS, SHEET_ORDER

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "number", "role")
EDITOR_COLUMNS = ["id", "start", "number", "name", "role"]

# (name, home seat) for the 11 starters; bench numbering B1 (low) .. B5 (high)
_DEFAULT_LINEUP = [
    ("Player A", 4), ("Player B", 3), ("Player C", 2), ("Player D", 1),
    ("Player E", 6), ("Player F", 5),
    ("Player G", 7), ("Player H", 8), ("Player I", 9), ("Player J", 10), ("Player K", 11),
]


def default_roster() -> List[Player]:
    return [
        Player(id=f"p{i}", name=name, number=str(i), role=DEFAULT_ROLE, start_seat=seat)
        for i, (name, seat) in enumerate(_DEFAULT_LINEUP, start=1)
    ]


def update_player(roster: List[Player], player_id: str, field: str, value) -> List[Player]:
    """
    Return a new roster with one display attribute of `player_id` replaced.
    Home seats are not editable.
    """
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"Field '{field}' is not editable; expected one of {EDITABLE_FIELDS}")

    if not any(p.id == player_id for p in roster):
        logger.warning(f"update_player: unknown player id {player_id!r}; roster unchanged")
        return list(roster)

    out: List[Player] = []
    for p in roster:
        if p.id == player_id:
            # re-validate so the field cleaners run on the new value
            data = p.model_dump()
            data[field] = value
            p = Player(**data)
            logger.debug(f"Updated {player_id}.{field} -> {getattr(p, field)!r}")
        out.append(p)
    return out


def sort_for_editor(roster: List[Player]) -> List[Player]:
    """P4, P3, P2, P5, P6, P1, then bench B5..B1 (by home seat)."""
    order = {sid: i for i, sid in enumerate(SHEET_ORDER)}
    return sorted(roster, key=lambda p: order.get(p.start_seat, len(order)))


def by_id(roster: List[Player]) -> Dict[str, Player]:
    return {p.id: p for p in roster}

# -----------------------
# DataFrame round trip (st.data_editor)
# -----------------------
def roster_to_dataframe(roster: List[Player]) -> pd.DataFrame:
    rows = []
    for p in sort_for_editor(roster):
        rows.append({
            "id": p.id,
            "start": SEAT_LABELS[p.start_seat],
            "number": p.number,
            "name": p.name,
            "role": p.role,
        })
    return pd.DataFrame(rows, columns=EDITOR_COLUMNS)


def dataframe_to_roster(df: pd.DataFrame, roster: List[Player]) -> List[Player]:
    """
    Apply edited display columns back onto `roster`. Rows are matched by id;
    the home seat always comes from the existing player.
    """
    current = by_id(roster)
    edits: Dict[str, Dict[str, str]] = {}
    for _, r in df.iterrows():
        pid = str(r.get("id", "") or "")
        if pid not in current:
            continue
        edits[pid] = {f: ("" if pd.isna(r.get(f)) else str(r.get(f))) for f in EDITABLE_FIELDS if f in df.columns}

    out: List[Player] = []
    for p in roster:
        changes = edits.get(p.id)
        if changes:
            data = p.model_dump()
            data.update(changes)
            p = Player(**data)
        out.append(p)
    return out
