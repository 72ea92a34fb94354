"""Bulk-load helpers: parse course lines and feed them into a table.

Input format, one course per line:

    <course_id> <crn> <credits> <room> <instructor...>

The line is split on whitespace into at most five fields, so everything
after the room is the instructor verbatim ("Gloria Divine" stays whole).
Blank lines are skipped silently; malformed lines are logged and skipped.
Only a source that cannot be opened fails the whole load.
"""
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, Union
from models import Course, INT32_MIN, INT32_MAX
from course_table import CourseTable
from logging_utils import get_logger

log = get_logger(__name__)

FIELD_COUNT = 5
INT_RE = re.compile(r"[+-]?[0-9]+")

SkippedLine = Tuple[int, str, str]  # (line number, stripped line, reason)


class MalformedLineError(ValueError):
    """A non-blank input line that cannot become a Course."""


@dataclass
class LoadReport:
    loaded: int = 0
    skipped: List[SkippedLine] = field(default_factory=list)

    def __str__(self) -> str:
        return f'{self.loaded} loaded, {len(self.skipped)} skipped'


def parse_int32(text: str, label: str) -> int:
    if not INT_RE.fullmatch(text):
        raise MalformedLineError(f"{label} is not an integer: {text!r}")
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise MalformedLineError(f'{label} out of range: {text}')
    return value


def parse_line(line: str) -> Course:
    """Build a Course from one stripped, non-blank line."""
    parts = line.split(None, FIELD_COUNT - 1)
    if len(parts) != FIELD_COUNT:
        raise MalformedLineError(f'not {FIELD_COUNT} parts')
    course_id, crn_raw, credits_raw, room, instructor = parts
    return Course(
        course_id=course_id,
        crn=parse_int32(crn_raw, 'CRN'),
        credits=parse_int32(credits_raw, 'credits'),
        room=room,
        instructor=instructor,
    )


class Storage:
    @staticmethod
    def load_lines(table: CourseTable, lines: Iterable[str]) -> LoadReport:
        """Add every well-formed line to ``table``.

        Later lines with an already loaded CRN replace the earlier course.
        """
        report = LoadReport()
        for lineno, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line:
                continue
            try:
                course = parse_line(line)
            except MalformedLineError as exc:
                log.warning('Skipping line %d (%s): %s', lineno, exc, line)
                report.skipped.append((lineno, line, str(exc)))
                continue
            table.add(course)
            report.loaded += 1
        return report

    @staticmethod
    def read_file(table: CourseTable, path: Union[str, Path]) -> LoadReport:
        """Load a course file into ``table``.

        The file is opened before any line is read; OSError (missing file,
        permission) propagates and the table is left untouched. Undecodable
        bytes become U+FFFD and the line goes through the normal checks.
        """
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return Storage.load_lines(table, f)
