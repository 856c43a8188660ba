"""
Internal helpers for tests (not imported by app).
"""
from __future__ import annotations
from typing import List, Optional
from .models import Player
from .roster import default_roster


def quick_player(pid: str, name: str, start_seat: int, number: str = "", role: str = "Any") -> Player:
    return Player(id=pid, name=name, number=number or pid, role=role, start_seat=start_seat)


def roster_without(*home_seats: int, roster: Optional[List[Player]] = None) -> List[Player]:
    roster = roster if roster is not None else default_roster()
    return [p for p in roster if p.start_seat not in home_seats]


def name_letter(p: Optional[Player]) -> Optional[str]:
    # "Player C" -> "C"
    return None if p is None else p.name.split()[-1]
