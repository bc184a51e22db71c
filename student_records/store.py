import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from student_records.backend_logic import classify

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentRecord:
    name: str
    age: int
    marks: Tuple[float, ...]
    percentage: str
    division: str

    @classmethod
    def from_marks(cls, name: str, age: int, marks: Tuple[float, ...]) -> "StudentRecord":
        """Build a record with percentage and division derived from `marks`."""
        result = classify(marks)
        return cls(
            name=name,
            age=age,
            marks=tuple(marks),
            percentage=result.percentage,
            division=result.division,
        )


class RecordStore:
    """
    Ordered, in-memory list of committed records for one session.
    Indices are positions in the current list; callers must not hold on to
    them across a removal without checking them again.
    """

    def __init__(self, records=None):
        self._records: List[StudentRecord] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(list(self._records))

    @property
    def records(self) -> Tuple[StudentRecord, ...]:
        return tuple(self._records)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._records)

    def get(self, index: int) -> Optional[StudentRecord]:
        if not self._in_range(index):
            return None
        return self._records[index]

    def append(self, record: StudentRecord) -> int:
        self._records.append(record)
        index = len(self._records) - 1
        log.info("Added record %d (%s, %s)", index, record.name, record.division)
        return index

    def replace_at(self, index: int, record: StudentRecord) -> bool:
        if not self._in_range(index):
            log.warning("Ignoring replace at index %d (store has %d records)", index, len(self))
            return False
        self._records[index] = record
        log.info("Updated record %d (%s, %s)", index, record.name, record.division)
        return True

    def remove_at(self, index: int) -> bool:
        if not self._in_range(index):
            log.warning("Ignoring remove at index %d (store has %d records)", index, len(self))
            return False
        removed = self._records.pop(index)
        log.info("Removed record %d (%s)", index, removed.name)
        return True
