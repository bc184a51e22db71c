import pandas as pd
from typing import List, Sequence, Tuple

from student_records.backend_logic import format_mark
from student_records.config import SUBJECT_COUNT
from student_records.store import StudentRecord

# ------------------------
# Table helpers (UI-side)
# ------------------------

BADGE_COLOURS = {
    "First Division": "green",
    "Second Division": "blue",
    "Third Division": "orange",
    "Fail": "red",
}

# background / text for the division cell in the records table
_CELL_STYLES = {
    "green": "background-color: #198754; color: white",
    "blue": "background-color: #0d6efd; color: white",
    "orange": "background-color: #ffc107; color: #212529",
    "red": "background-color: #dc3545; color: white",
}

MARK_COLUMNS = [f"M{i + 1}" for i in range(SUBJECT_COUNT)]
COLUMNS = ["#", "Name", "Age", *MARK_COLUMNS, "%", "Division"]


def division_badge(division: str) -> str:
    return BADGE_COLOURS.get(division, "red")


def records_frame(rows: Sequence[Tuple[int, StudentRecord]]) -> pd.DataFrame:
    """
    rows: (store index, record) pairs as returned by filter_records
    returns: one row per record; "#" is the 1-based store position
    """
    data: List[dict] = []
    for index, record in rows:
        row = {"#": index + 1, "Name": record.name, "Age": record.age}
        for col, mark in zip(MARK_COLUMNS, record.marks):
            row[col] = format_mark(mark)
        row["%"] = record.percentage
        row["Division"] = record.division
        data.append(row)
    return pd.DataFrame(data, columns=COLUMNS)


def _division_cell_style(division: str) -> str:
    return _CELL_STYLES[division_badge(division)]


def style_records(df: pd.DataFrame):
    return df.style.map(_division_cell_style, subset=["Division"])
