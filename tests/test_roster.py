from __future__ import annotations
import logging

import pytest

from volley_core.constants import SEAT_LABELS
from volley_core.roster import (
    default_roster, update_player, sort_for_editor, roster_to_dataframe, dataframe_to_roster, by_id,
)


def test_default_roster_fills_every_seat():
    roster = default_roster()
    assert len(roster) == 11
    assert sorted(p.start_seat for p in roster) == list(range(1, 12))
    d = by_id(roster)["p4"]
    assert (d.name, d.number, d.start_seat) == ("Player D", "4", 1)


def test_update_player_changes_only_display_fields():
    roster = default_roster()
    out = update_player(roster, "p3", "name", "  Sato   Yuki ")
    out = update_player(out, "p3", "number", 12)
    out = update_player(out, "p3", "role", "L")
    p = by_id(out)["p3"]
    assert p.name == "Sato Yuki"
    assert p.number == "12"
    assert p.role == "L"
    assert p.start_seat == 2
    # input roster untouched
    assert by_id(roster)["p3"].name == "Player C"


def test_update_player_rejects_home_seat():
    with pytest.raises(ValueError):
        update_player(default_roster(), "p1", "start_seat", 2)
    with pytest.raises(ValueError):
        update_player(default_roster(), "p1", "id", "zz")


def test_update_unknown_player_is_noop(caplog):
    roster = default_roster()
    with caplog.at_level(logging.WARNING, logger="volley_core.roster"):
        assert update_player(roster, "nobody", "name", "X") == roster
    assert "update_player: unknown player id 'nobody'" in caplog.text


def test_blank_role_falls_back_to_any():
    out = update_player(default_roster(), "p1", "role", "  ")
    assert by_id(out)["p1"].role == "Any"


def test_sort_for_editor_order():
    roster = default_roster()
    labels = [SEAT_LABELS[p.start_seat] for p in sort_for_editor(roster)]
    assert labels == ["P4", "P3", "P2", "P5", "P6", "P1", "B5", "B4", "B3", "B2", "B1"]
    # input list order is unchanged
    assert [p.id for p in roster][:3] == ["p1", "p2", "p3"]


def test_dataframe_round_trip_keeps_home_seats():
    roster = default_roster()
    df = roster_to_dataframe(roster)
    assert list(df["start"])[:3] == ["P4", "P3", "P2"]
    df.loc[df["id"] == "p1", "name"] = "Tanaka"
    df.loc[df["id"] == "p1", "start"] = "B5"  # ignored
    df.loc[len(df)] = {"id": "ghost", "start": "P1", "number": "99", "name": "Ghost", "role": "Any"}
    out = dataframe_to_roster(df, roster)
    assert len(out) == 11
    p1 = by_id(out)["p1"]
    assert p1.name == "Tanaka"
    assert p1.start_seat == 4
