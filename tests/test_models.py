from __future__ import annotations
import pytest
from pydantic import ValidationError

from volley_core.models import Player, PlannerState, AppConfig
from volley_core.engine import seat_info
from volley_core.constants import is_bench


def test_player_requires_known_home_seat():
    with pytest.raises(ValidationError):
        Player(id="x", name="X", start_seat=12)
    with pytest.raises(ValidationError):
        Player(id="x", name="X", start_seat=0)


def test_home_seat_is_frozen():
    p = Player(id="x", name="X", start_seat=3)
    with pytest.raises(ValidationError):
        p.start_seat = 4
    p.name = "Y"
    assert p.name == "Y"


def test_player_normalizes_fields():
    p = Player(id="x", name="  A   B ", number=7, role=None, start_seat=1)
    assert p.name == "A B"
    assert p.number == "7"
    assert p.role == "Any"


def test_planner_state_bounds():
    assert PlannerState().rotation == 1
    assert PlannerState(rotation=11).rotation == 11
    with pytest.raises(ValidationError):
        PlannerState(rotation=12)
    with pytest.raises(ValidationError):
        PlannerState(rotation=0)
    with pytest.raises(ValidationError):
        PlannerState(view_mode="grid")


def test_seat_table():
    s1 = seat_info(1)
    assert (s1.label, s1.kind) == ("P1", "court")
    b5 = seat_info(11)
    assert (b5.label, b5.kind) == ("B5", "bench")


def test_app_config_log_level():
    assert AppConfig(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        AppConfig(log_level="loud")


def test_bench_and_court_kinds():
    assert all(not is_bench(s) for s in range(1, 7))
    assert all(is_bench(s) for s in range(7, 12))
    with pytest.raises(ValueError):
        is_bench(12)
