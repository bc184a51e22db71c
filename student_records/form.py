import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from student_records.backend_logic import (
    format_mark,
    validate_age,
    validate_marks,
    validate_name,
)
from student_records.config import ALL_DIVISIONS, SUBJECT_COUNT
from student_records.errors import RecordValidationError, StaleEditError
from student_records.store import RecordStore, StudentRecord

log = logging.getLogger(__name__)

EMPTY_MARKS = ("",) * SUBJECT_COUNT


@dataclass(frozen=True)
class FormDraft:
    """Raw, unvalidated form input plus the record being edited (if any)."""

    name: str = ""
    age: str = ""
    marks: Tuple[str, ...] = EMPTY_MARKS
    edit_index: Optional[int] = None
    # record at `edit_index` when the edit began, to detect a stale index
    edit_original: Optional[StudentRecord] = None

    @property
    def is_editing(self) -> bool:
        return self.edit_index is not None


@dataclass(frozen=True)
class SubmitResult:
    draft: FormDraft
    error: Optional[str] = None
    record: Optional[StudentRecord] = None
    index: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def clear_draft() -> FormDraft:
    return FormDraft()


def begin_edit(store: RecordStore, index: int) -> FormDraft:
    record = store.get(index)
    if record is None:
        raise StaleEditError()

    return FormDraft(
        name=record.name,
        age=str(record.age),
        marks=tuple(format_mark(m) for m in record.marks),
        edit_index=index,
        edit_original=record,
    )


def _edit_target_is_current(draft: FormDraft, store: RecordStore) -> bool:
    current = store.get(draft.edit_index)
    return current is not None and current is draft.edit_original


def submit(draft: FormDraft, store: RecordStore) -> SubmitResult:
    """
    Validate name, age and marks in that order, stopping at the first failure,
    then classify and commit. An edit draft replaces its record; any other
    draft appends a new one.
    """
    try:
        name = validate_name(draft.name)
        age = validate_age(draft.age)
        marks = validate_marks(draft.marks)
    except RecordValidationError as exc:
        log.warning("Rejected submission: %s", exc)
        return SubmitResult(draft=draft, error=str(exc))

    record = StudentRecord.from_marks(name, age, marks)

    if draft.is_editing:
        if not _edit_target_is_current(draft, store):
            log.warning("Edit target %d is stale, nothing written", draft.edit_index)
            return SubmitResult(
                draft=replace(draft, edit_index=None, edit_original=None),
                error=str(StaleEditError()),
            )
        store.replace_at(draft.edit_index, record)
        index = draft.edit_index
    else:
        index = store.append(record)

    return SubmitResult(draft=clear_draft(), record=record, index=index)


def filter_records(
    store: RecordStore,
    name_query: str = "",
    division: str = ALL_DIVISIONS,
) -> List[Tuple[int, StudentRecord]]:
    """
    Records whose name contains `name_query` (case-insensitive) and whose
    division matches, as (store index, record) pairs in store order.
    """
    needle = (name_query or "").lower()
    return [
        (i, record)
        for i, record in enumerate(store)
        if needle in record.name.lower()
        and (division == ALL_DIVISIONS or record.division == division)
    ]
