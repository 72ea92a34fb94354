"""Data models for the course registration store.

Currently only exposes the Course dataclass. The CRN is the record's only
identity: hashing, ordering and replace-on-insert in the table all look at
the CRN and nothing else.
"""
from __future__ import annotations
from dataclasses import dataclass

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def key_hash(crn: int) -> int:
    """Identity hash of a 32-bit CRN (builtin hash() maps -1 to -2)."""
    return crn


@dataclass
class Course:
    """A single course record.

    Fields:
        course_id: Course identifier, e.g. "CMSC204".
        crn: Course registration number; unique within a table.
        credits: Credit hours.
        room: Room / location label.
        instructor: Instructor name; may contain spaces.
    """
    course_id: str = ""
    crn: int = 0
    credits: int = 0
    room: str = ""
    instructor: str = ""

    def __hash__(self) -> int:
        return key_hash(self.crn)

    def compare_to(self, other: Course) -> int:
        """Compare by CRN only: -1, 0 or 1."""
        return (self.crn > other.crn) - (self.crn < other.crn)

    def __lt__(self, other: Course) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self.crn < other.crn

    def __str__(self) -> str:
        return (f"Course:{self.course_id} CRN:{self.crn} Credits:{self.credits} "
                f"Instructor:{self.instructor} Room:{self.room}")
