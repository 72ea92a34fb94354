"""Table logic: fixed bucket count, chaining, replace-on-insert, enumeration.

Bucket count is chosen once at construction and never revisited. With an
estimate the table picks the smallest prime p >= ceil(n / 1.5) with
p % 4 == 3; the exact-size constructor takes the count as given so that
collisions can be forced in tests.
"""
import math
from dataclasses import replace
from typing import List, Iterator
from models import Course, key_hash

LOAD_FACTOR = 1.5


class CourseNotFoundError(LookupError):
    """Raised by lookups on a CRN the table does not hold."""

    def __init__(self, crn: int):
        super().__init__(f"Course not found: CRN {crn}")
        self.crn = crn


def is_prime(num: int) -> bool:
    if num <= 1:
        return False
    for i in range(2, math.isqrt(num) + 1):
        if num % i == 0:
            return False
    return True


def next_table_size(estimate: int) -> int:
    """Smallest 4k+3 prime not below ceil(estimate / 1.5)."""
    prime = math.ceil(estimate / LOAD_FACTOR)
    while not (is_prime(prime) and prime % 4 == 3):
        prime += 1
    return prime


class CourseTable:
    def __init__(self, estimate: int):
        self._allocate(next_table_size(estimate))

    @classmethod
    def with_size(cls, size: int) -> 'CourseTable':
        """Build a table with exactly ``size`` buckets (no prime adjustment)."""
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        table = cls.__new__(cls)
        table._allocate(size)
        return table

    def _allocate(self, size: int) -> None:
        self._size: int = size
        self._buckets: List[List[Course]] = [[] for _ in range(size)]

    # -------------------- sizing / inspection --------------------
    @property
    def table_size(self) -> int:
        return self._size

    def bucket_of(self, crn: int) -> int:
        return abs(key_hash(crn)) % self._size

    def chain(self, index: int) -> List[Course]:
        """Copies of the records in one bucket, in chain order."""
        return [replace(c) for c in self._buckets[index]]

    def __len__(self) -> int:
        return sum(len(b) for b in self._buckets)

    def __contains__(self, crn: object) -> bool:
        if not isinstance(crn, int):
            return False
        return any(c.crn == crn for c in self._buckets[self.bucket_of(crn)])

    # -------------------- mutation --------------------
    def add(self, course: Course) -> None:
        """Store a copy of ``course``; an existing record with the same CRN
        is dropped and the new one goes to the end of the chain."""
        bucket = self._buckets[self.bucket_of(course.crn)]
        for existing in bucket:
            if existing.crn == course.crn:
                bucket.remove(existing)
                break
        bucket.append(replace(course))

    # -------------------- queries --------------------
    def get(self, crn: int) -> Course:
        for course in self._buckets[self.bucket_of(crn)]:
            if course.crn == crn:
                return replace(course)
        raise CourseNotFoundError(crn)

    def _iter_stored(self) -> Iterator[Course]:
        for bucket in self._buckets:
            yield from bucket

    def all_courses(self) -> List[Course]:
        """Every record, bucket order then chain order. Not sorted."""
        return [replace(c) for c in self._iter_stored()]

    def show_all(self) -> List[str]:
        """Every record sorted by CRN, rendered as display strings."""
        return [str(c) for c in sorted(self._iter_stored())]

    def __str__(self) -> str:
        return f'CourseTable: {len(self)} courses in {self._size} buckets'
