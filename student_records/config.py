import logging
import os
import sys

# ------------------------
# Marking scheme
# ------------------------
SUBJECT_COUNT = 5
MAX_MARK = 100.0
MAX_TOTAL = SUBJECT_COUNT * MAX_MARK

MIN_AGE = 1
MAX_AGE = 100

# Evaluated top to bottom, first match wins. Lower bounds are inclusive.
DIVISION_THRESHOLDS = (
    (60.0, "First Division"),
    (45.0, "Second Division"),
    (33.0, "Third Division"),
)
FAIL_DIVISION = "Fail"
# lowest division that still counts as a pass
PASS_DIVISION = DIVISION_THRESHOLDS[-1][1]

ALL_DIVISIONS = "All"

# ------------------------
# Page / runtime settings
# ------------------------
PAGE_TITLE = "Student Records | Marks & Division"
PAGE_ICON = "🎓"

LOG_LEVEL = os.getenv("STUDENT_RECORDS_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    root = logging.getLogger()
    # Streamlit reruns the script on every interaction
    if any(getattr(h, "_student_records", False) for h in root.handlers):
        return

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(logging.Formatter("%(asctime)s  %(levelname)s  %(message)s"))
    stream._student_records = True

    root.setLevel(level)
    root.addHandler(stream)
