"""
Small, UI-agnostic helpers shared by app.py.
"""
from __future__ import annotations
import html
from typing import Dict, Optional

from .models import Player
from .constants import (
    BACK_ROW, BENCH_ORDER, FRONT_ROW, LIBERO_ROLE, ROTATION_SEQUENCE, SEAT_LABELS, SERVE_SEAT,
    is_bench,
)
from .engine import seat_info


def display_name(p: Optional[Player]) -> str:
    if p is None:
        return "Empty"
    if p.number:
        return f"#{p.number} {p.name}".strip()
    return p.name


def is_libero(p: Optional[Player]) -> bool:
    return p is not None and p.role == LIBERO_ROLE


def rotation_flow_text() -> str:
    # "P2 → B5 → ... → B1 → P1 → P6 → P5 → P4 → P3"
    return " → ".join(SEAT_LABELS[sid] for sid in ROTATION_SEQUENCE)


def seat_caption(seat_id: int) -> str:
    # "P4 · Front Left", "B5 · Bench 5 (bench)"
    s = seat_info(seat_id)
    return f"{s.label} · {s.name}{' (bench)' if is_bench(seat_id) else ''}"

# -----------------------------
# Court / bench HTML
# -----------------------------
def _esc(s: str) -> str:
    return html.escape(s or "")


def court_seat_html(seat_id: int, p: Optional[Player]) -> str:
    serve = seat_id == SERVE_SEAT
    parts = [f'<div class="seat{" serve" if serve else ""}" title="{_esc(seat_info(seat_id).name)}">',
             f'<span class="tag">{SEAT_LABELS[seat_id]}</span>']
    if serve:
        parts.append('<span class="serve-tag">Serve</span>')
    if p is not None:
        chip = "chip libero" if is_libero(p) else "chip"
        parts.append(f'<div class="{chip}">{_esc(p.number)}</div>')
        parts.append(f'<div class="pname">{_esc(p.name)}</div>')
    else:
        parts.append('<div class="empty">Empty</div>')
    parts.append("</div>")
    return "".join(parts)


def court_html(lineup: Dict[int, Optional[Player]]) -> str:
    """Net, front row (P4 P3 P2) and back row (P5 P6 P1) inside one court box."""
    seats = "".join(court_seat_html(sid, lineup.get(sid)) for sid in FRONT_ROW + BACK_ROW)
    return (
        '<div class="court"><div class="net">NET / CENTER LINE</div>'
        f'<div class="court-grid">{seats}</div></div>'
    )


def bench_seat_html(seat_id: int, p: Optional[Player]) -> str:
    body = (
        f'<div class="chip bench">{_esc(p.number)}</div><div>{_esc(p.name)}</div>'
        if p is not None else '<div class="empty">-</div>'
    )
    return f'<div class="bench-seat"><span class="tag">{SEAT_LABELS[seat_id]}</span>{body}</div>'


def bench_html(lineup: Dict[int, Optional[Player]]) -> str:
    """Bench strip from entry (B5) to exit (B1)."""
    seats = "".join(bench_seat_html(sid, lineup.get(sid)) for sid in BENCH_ORDER)
    return (
        '<div class="bench-area"><div class="bench-title">Bench / Waiting Area '
        '<span class="caption">(P2 to bench, bench to P1 / serve)</span></div>'
        f'<div class="bench-row">{seats}</div></div>'
    )
