from __future__ import annotations

from volley_core.engine import rotation_sheet
from volley_core.roster import default_roster
from volley_core.csv_io import sheet_to_csv_bytes, roster_sheet_csv
from volley_core.export_pdf import (
    render_sheet_pdf, header_colour, SERVE_HEADER, COURT_HEADER, BENCH_HEADER,
)


def test_sheet_csv_header_and_rows():
    text = sheet_to_csv_bytes(rotation_sheet(default_roster())).decode("utf-8")
    lines = text.strip().splitlines()
    assert lines[0] == "Rot,P4,P3,P2,P5,P6,P1,B5,B4,B3,B2,B1"
    assert lines[1] == "1,1,2,3,6,5,4,11,10,9,8,7"
    assert len(lines) == 12


def test_roster_sheet_csv_has_both_blocks():
    text = roster_sheet_csv(default_roster()).decode("utf-8")
    assert text.startswith("Jersey numbers\n")
    assert "\nNames\n" in text
    assert "Player C" in text


def test_pdf_renders():
    pdf = render_sheet_pdf("Tigers", rotation_sheet(default_roster()), current_rotation=3)
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 500


def test_header_colours_by_seat_kind():
    assert header_colour("P1") == SERVE_HEADER
    for label in ("P2", "P3", "P4", "P5", "P6"):
        assert header_colour(label) == COURT_HEADER
    for label in ("B1", "B5"):
        assert header_colour(label) == BENCH_HEADER
