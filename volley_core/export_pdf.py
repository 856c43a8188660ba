# volley_core/export_pdf.py
from __future__ import annotations
from typing import Optional
import io
from reportlab.lib.pagesizes import letter, landscape
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from .constants import COURT_SEATS, SEAT_LABELS, SERVE_SEAT

COURT_HEADER = colors.HexColor("#1e3a8a")
SERVE_HEADER = colors.HexColor("#a16207")
BENCH_HEADER = colors.HexColor("#4b5563")
CURRENT_ROW = colors.HexColor("#dbeafe")

COURT_LABELS = {SEAT_LABELS[sid] for sid in COURT_SEATS}


def header_colour(label: str):
    """Serve seat, other court seats and bench seats each get their own header colour."""
    if label == SEAT_LABELS[SERVE_SEAT]:
        return SERVE_HEADER
    if label in COURT_LABELS:
        return COURT_HEADER
    return BENCH_HEADER


def render_sheet_pdf(title: str, grid_df, current_rotation: Optional[int] = None) -> bytes:
    """
    One landscape page: rotations down, seats across (grid_df from
    engine.rotation_sheet). The current rotation row is shaded.
    """
    buf = io.BytesIO()
    page_size = landscape(letter)
    c = canvas.Canvas(buf, pagesize=page_size)

    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, page_size[1] - 40, f"{title} - All Rotations ({len(grid_df.index)})")

    cols = ["Rot"] + [str(col) for col in grid_df.columns]
    data = [cols]
    for rot in grid_df.index:
        data.append([str(rot)] + [str(v) for v in grid_df.loc[rot, :].values])

    style = [
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("BACKGROUND", (0, 0), (0, 0), colors.black),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    for j, label in enumerate(cols[1:], start=1):
        style.append(("BACKGROUND", (j, 0), (j, 0), header_colour(label)))
    if current_rotation is not None and current_rotation in list(grid_df.index):
        i = list(grid_df.index).index(current_rotation) + 1
        style.append(("BACKGROUND", (0, i), (-1, i), CURRENT_ROW))

    t = Table(data, repeatRows=1)
    t.setStyle(TableStyle(style))

    table_w, table_h = t.wrapOn(c, page_size[0] - 80, page_size[1] - 100)
    x = 40
    y = page_size[1] - 80 - table_h
    t.drawOn(c, x, y)

    c.showPage()
    c.save()
    return buf.getvalue()
