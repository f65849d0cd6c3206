"""
Course conversion for swim times.

A time swum in a 25-yard pool is not comparable to one swum in a 25 or
50-metre pool. The factors below are the empirically fitted conversion
tables the results screens have always used, bucketed by distance so
that distance events (where yards and metres races differ in length,
e.g. 500y vs 400m) get their own factors.

The factor pairs are exact reciprocals, so converting SCY to SCM and back
through the matching bucket returns the original time.
"""

import logging

from .models import ConvertedResult, Course, CourseTime, PerformanceRecord


logger = logging.getLogger(__name__)


# Yards-to-metres factors (SCY -> SCM); SCM -> SCY divides by the same value
YARDS_MID_DISTANCE_FACTOR = 0.875   # 500y / 1000y  <->  400m / 800m
YARDS_MILE_FACTOR = 0.997           # 1650y  <->  1500m
YARDS_SPRINT_FACTOR = 1.11          # everything else

# SCY 500/1000 straight to long course
YARDS_MID_DISTANCE_TO_LCM = 0.8925

# Short course metres to long course metres
SHORT_TO_LONG_FACTOR = 1.02

YARDS_MID_DISTANCES = frozenset({500, 1000})
YARDS_MILE_DISTANCES = frozenset({1650})
METRES_MID_DISTANCES = frozenset({400, 800})
METRES_MILE_DISTANCES = frozenset({1500})


def _from_scy(distance: float, time: float) -> tuple[CourseTime, ...]:
    if distance in YARDS_MID_DISTANCES:
        scm = time * YARDS_MID_DISTANCE_FACTOR
        lcm = time * YARDS_MID_DISTANCE_TO_LCM
    elif distance in YARDS_MILE_DISTANCES:
        scm = time * YARDS_MILE_FACTOR
        lcm = time * SHORT_TO_LONG_FACTOR
    else:
        scm = time * YARDS_SPRINT_FACTOR
        lcm = scm * SHORT_TO_LONG_FACTOR
    return (CourseTime(Course.SCM, scm), CourseTime(Course.LCM, lcm))


def _from_scm(distance: float, time: float) -> tuple[CourseTime, ...]:
    if distance in METRES_MID_DISTANCES:
        scy = time / YARDS_MID_DISTANCE_FACTOR
    elif distance in METRES_MILE_DISTANCES:
        scy = time / YARDS_MILE_FACTOR
    else:
        scy = time / YARDS_SPRINT_FACTOR
    return (CourseTime(Course.SCY, scy), CourseTime(Course.LCM, time * SHORT_TO_LONG_FACTOR))


def _from_lcm(distance: float, time: float) -> tuple[CourseTime, ...]:
    scm = time / SHORT_TO_LONG_FACTOR
    if distance in METRES_MID_DISTANCES:
        scy = scm / YARDS_MID_DISTANCE_FACTOR
    elif distance in METRES_MILE_DISTANCES:
        scy = scm / YARDS_MILE_FACTOR
    else:
        scy = scm / YARDS_SPRINT_FACTOR
    # SCM first for long course sources
    return (CourseTime(Course.SCM, scm), CourseTime(Course.SCY, scy))


_CONVERTERS = {
    Course.SCY: _from_scy,
    Course.SCM: _from_scm,
    Course.LCM: _from_lcm,
}


def convert(record: PerformanceRecord) -> ConvertedResult:
    """
    Express a record's time in the two other course standards.

    Returns a degenerate result (no conversions) when the record's
    course isn't one we know; callers should show that as "not
    convertible", never as a zero time.
    """
    course = record.course
    if course is None:
        logger.warning(
            "Cannot convert record with unrecognized course",
            extra={"record_id": record.id, "course_type": record.course_type},
        )
        return ConvertedResult(source_course=record.course_type, original_time=record.time)

    conversions = _CONVERTERS[course](record.distance, record.time)

    logger.debug(
        "Converted record",
        extra={
            "record_id": record.id,
            "source_course": course.value,
            "conversions": {c.course.value: c.time for c in conversions},
        },
    )

    return ConvertedResult(
        source_course=course.value,
        original_time=record.time,
        conversions=conversions,
    )
