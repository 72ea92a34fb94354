"""Manager facade: builds a table and exposes field-value operations.

The manager is what the shell and the command group talk to. It owns one
CourseTable and delegates every operation to it or to Storage.
"""
from pathlib import Path
from typing import Iterable, List, Optional, Union
from models import Course
from course_table import CourseTable
from storage import Storage, LoadReport
from settings import DEFAULT_ESTIMATE


class CourseManager:
    def __init__(self, estimate: int = DEFAULT_ESTIMATE, table: Optional[CourseTable] = None):
        self.table: CourseTable = table if table is not None else CourseTable(estimate)

    # -------------------- mutation --------------------
    def add(self, course_id: str, crn: int, credits: int, room: str, instructor: str) -> None:
        self.table.add(Course(course_id, crn, credits, room, instructor))

    def load_lines(self, lines: Iterable[str]) -> LoadReport:
        return Storage.load_lines(self.table, lines)

    def read_file(self, path: Union[str, Path]) -> LoadReport:
        return Storage.read_file(self.table, path)

    # -------------------- queries --------------------
    def get(self, crn: int) -> Course:
        """Raises CourseNotFoundError when the CRN is absent."""
        return self.table.get(crn)

    def show_all(self, sorted_output: bool = True) -> List[str]:
        """Display strings for every course: sorted by CRN, or bucket order."""
        if sorted_output:
            return self.table.show_all()
        return [str(c) for c in self.table.all_courses()]

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, crn: object) -> bool:
        return crn in self.table

    def __str__(self) -> str:
        return str(self.table)
