import pytest

from course_table import CourseTable, CourseNotFoundError
from manager import CourseManager


def test_default_manager_sizes_for_twenty_courses():
    assert CourseManager().table.table_size == 19


def test_manager_accepts_ready_table():
    m = CourseManager(table=CourseTable.with_size(10))
    assert m.table.table_size == 10


def test_add_and_get_course():
    m = CourseManager()
    m.add("CMSC210", 40001, 3, "HT100", "Gloria Divine")
    c = m.get(40001)
    assert c.course_id == "CMSC210"
    assert c.credits == 3
    assert c.room == "HT100"
    assert c.instructor == "Gloria Divine"
    assert 40001 in m
    assert len(m) == 1


def test_get_missing_propagates():
    with pytest.raises(CourseNotFoundError):
        CourseManager().get(12345)


def test_show_all_sorted_whatever_the_insert_order():
    m = CourseManager()
    m.add("CMSC202", 30005, 4, "SC201", "Taylor")
    m.add("CMSC201", 30002, 4, "SC202", "Jordan")
    m.add("CMSC203", 30007, 4, "SC203", "Morgan")
    all_courses = m.show_all()
    assert len(all_courses) == 3
    assert "CRN:30002" in all_courses[0]
    assert "CRN:30005" in all_courses[1]
    assert "CRN:30007" in all_courses[2]


def test_show_all_raw_is_bucket_order():
    m = CourseManager(table=CourseTable.with_size(10))
    for crn in (15, 3, 23):
        m.add("C", crn, 1, "R", "I")
    assert [line.split()[1] for line in m.show_all(sorted_output=False)] == ["CRN:3", "CRN:23", "CRN:15"]
    assert [line.split()[1] for line in m.show_all()] == ["CRN:3", "CRN:15", "CRN:23"]


def test_no_special_casing_of_particular_crns():
    m = CourseManager()
    for crn in (30504, 30503, 30559, 30001):
        m.add("CMSC", crn, 4, "R", "I")
    assert [line.split()[1] for line in m.show_all()] == [
        "CRN:30001", "CRN:30503", "CRN:30504", "CRN:30559"]


def test_load_lines_and_read_file(course_file):
    m = CourseManager()
    report = m.load_lines(["CMSC110 22222 3 MT100 S. Lee", "short line"])
    assert report.loaded == 1 and len(report.skipped) == 1
    report = m.read_file(course_file("CMSC111 22223 3 MT101 A. Lee\n"))
    assert report.loaded == 1
    assert len(m) == 2
