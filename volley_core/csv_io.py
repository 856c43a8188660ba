from __future__ import annotations
import io
from typing import List

import pandas as pd

from .models import Player
from .engine import rotation_sheet


def sheet_to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=True)
    return buf.getvalue().encode("utf-8")


def roster_sheet_csv(roster: List[Player]) -> bytes:
    """
    Two blocks: jersey numbers per rotation, then names per rotation,
    separated by a blank line.
    """
    buf = io.StringIO()
    buf.write("Jersey numbers\n")
    rotation_sheet(roster, value="number").to_csv(buf, index=True)
    buf.write("\nNames\n")
    rotation_sheet(roster, value="name").to_csv(buf, index=True)
    return buf.getvalue().encode("utf-8")
