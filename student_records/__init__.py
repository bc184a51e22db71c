from student_records.backend_logic import (
    DIVISIONS,
    Classification,
    classify,
    preview_classify,
    validate_age,
    validate_marks,
    validate_name,
)
from student_records.errors import (
    InvalidAge,
    InvalidMarks,
    InvalidName,
    RecordValidationError,
    StaleEditError,
)
from student_records.form import FormDraft, begin_edit, clear_draft, filter_records, submit
from student_records.store import RecordStore, StudentRecord
