import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from student_records.config import (
    DIVISION_THRESHOLDS,
    FAIL_DIVISION,
    MAX_AGE,
    MAX_MARK,
    MAX_TOTAL,
    MIN_AGE,
    SUBJECT_COUNT,
)
from student_records.errors import InvalidAge, InvalidMarks, InvalidName

log = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[A-Za-z ]+$")

DIVISION_ORDER = {
    "First Division": 1,
    "Second Division": 2,
    "Third Division": 3,
    FAIL_DIVISION: 4,
}
DIVISIONS = tuple(DIVISION_ORDER)


@dataclass(frozen=True)
class Classification:
    percentage: str  # two decimals, e.g. "60.00"
    division: str


# ------------------------
# Parsing helpers
# ------------------------
def parse_number(value) -> Optional[float]:
    """
    Lenient numeric parse of a raw form value.
    Blank strings, underscores, nan/inf and anything float() rejects give None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        # float() accepts "1_000" digit grouping, which is not a valid form number
        if not value or "_" in value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def format_mark(mark: float) -> str:
    """Display form of a stored mark: 60.0 -> "60", 59.5 -> "59.5"."""
    mark = float(mark)
    if mark.is_integer():
        return str(int(mark))
    return repr(mark)


def _parse_marks(raw_marks: Sequence) -> Optional[np.ndarray]:
    if len(raw_marks) != SUBJECT_COUNT:
        return None

    parsed = [parse_number(m) for m in raw_marks]
    if any(m is None for m in parsed):
        return None

    marks = np.array(parsed, dtype=float)
    if not ((marks >= 0.0) & (marks <= MAX_MARK)).all():
        return None
    return marks


# ------------------------
# Validators
# ------------------------
def validate_name(name: str) -> str:
    trimmed = (name or "").strip()
    if not NAME_PATTERN.match(trimmed):
        raise InvalidName()
    return trimmed


def validate_age(age) -> int:
    number = parse_number(age)
    if number is None or not number.is_integer():
        raise InvalidAge()
    if not MIN_AGE <= number <= MAX_AGE:
        raise InvalidAge()
    return int(number)


def validate_marks(raw_marks: Sequence) -> Tuple[float, ...]:
    marks = _parse_marks(raw_marks)
    if marks is None:
        raise InvalidMarks()
    return tuple(float(m) for m in marks)


# ------------------------
# Classification
# ------------------------
def division_for(percentage: float) -> str:
    for minimum, division in DIVISION_THRESHOLDS:
        if percentage >= minimum:
            return division
    return FAIL_DIVISION


def format_percentage(percentage: float) -> str:
    """Two decimals, exact binary ties rounded up: 0.125 -> "0.13"."""
    return str(Decimal(percentage).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def classify(marks: Iterable[float]) -> Classification:
    """
    marks: five numbers already validated into [0, 100]
    returns: percentage of the maximum total (two decimals) and its division
    """
    total = float(np.sum(np.asarray(list(marks), dtype=float)))
    percentage = (total / MAX_TOTAL) * 100
    return Classification(percentage=format_percentage(percentage), division=division_for(percentage))


def preview_classify(raw_marks: Sequence) -> Optional[Classification]:
    """
    Live preview while the marks are being typed. None means the input is
    incomplete or out of range so far, which is not an error.
    """
    marks = _parse_marks(raw_marks)
    if marks is None:
        return None

    result = classify(marks)
    log.debug("Preview %s -> %s%% %s", list(raw_marks), result.percentage, result.division)
    return result


def is_at_least(division: str, target: str) -> bool:
    """True when `division` is as good as or better than `target`."""
    return DIVISION_ORDER.get(division, 999) <= DIVISION_ORDER[target]
