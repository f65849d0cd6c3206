"""
Domain models for swim performance results.

These models represent an athlete's recorded swims and the values we
derive from them. They have no dependencies on external frameworks or on
the document store the records come from. Records arrive already
validated by the boundary schemas; the checks here guard the numeric
invariants the engine relies on.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union


class PerformanceError(Exception):
    """Base class for performance engine errors."""
    pass


class InvalidPerformanceError(PerformanceError, ValueError):
    """Raised when a record carries non-numeric or out-of-range values."""
    pass


class InvalidEventKeyError(PerformanceError, ValueError):
    """Raised when an event key is not of the form distance-stroke-course."""
    pass


class Course(Enum):
    """The three competitive pool configurations."""
    SCY = "scy"
    SCM = "scm"
    LCM = "lcm"

    @property
    def label(self) -> str:
        return self.value.upper()

    @property
    def display_name(self) -> str:
        return {
            Course.SCY: "Short Course Yards",
            Course.SCM: "Short Course Meters",
            Course.LCM: "Long Course Meters",
        }[self]

    @classmethod
    def lookup(cls, code: Optional[str]) -> Optional["Course"]:
        """Return the course for a code, or None if it isn't recognized."""
        if not isinstance(code, str):
            return None
        try:
            return cls(code.strip().lower())
        except ValueError:
            return None


class Stroke(Enum):
    """Stroke codes as stored with each result."""
    FREESTYLE = "fr"
    BACKSTROKE = "bk"
    BREASTSTROKE = "br"
    BUTTERFLY = "fl"
    IM = "im"

    @property
    def display_name(self) -> str:
        return {
            Stroke.FREESTYLE: "Freestyle",
            Stroke.BACKSTROKE: "Backstroke",
            Stroke.BREASTSTROKE: "Breaststroke",
            Stroke.BUTTERFLY: "Butterfly",
            Stroke.IM: "Individual Medley",
        }[self]


class ResultType(Enum):
    """Where a result was swum. Passed through, not used by the engine."""
    PRACTICE = "practice"
    COMPETITION = "competition"


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a valid distance or time
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class EventKey:
    """
    A parsed event identifier such as ``100-fr-scy``.

    Stroke and course are kept as raw codes; the catalog decides which
    combinations are recognized.
    """
    distance: int
    stroke: str
    course: str

    @classmethod
    def parse(cls, key: str) -> "EventKey":
        if not isinstance(key, str):
            raise InvalidEventKeyError(f"Event key must be a string, got {key!r}")
        parts = key.strip().split("-")
        if len(parts) != 3 or not all(parts):
            raise InvalidEventKeyError(f"Malformed event key: {key!r}")
        distance, stroke, course = parts
        if not distance.isdigit() or int(distance) <= 0:
            raise InvalidEventKeyError(f"Event distance must be a positive integer: {key!r}")
        return cls(distance=int(distance), stroke=stroke.lower(), course=course.lower())

    def __str__(self) -> str:
        return f"{self.distance}-{self.stroke}-{self.course}"


@dataclass(frozen=True)
class PerformanceRecord:
    """
    A single recorded swim for one athlete.

    Frozen because records are owned by the data store; the engine
    only ever reads them. ``course_type`` stays a raw code so that an
    unknown course still reaches the converter, which reports it as
    not convertible instead of failing.
    """
    id: str
    event_type: str
    distance: Union[int, float]
    stroke: str
    course_type: str
    time: float
    date: Union[date, datetime]
    result_type: str = ResultType.PRACTICE.value
    notes: str = ""

    def __post_init__(self) -> None:
        if not _is_number(self.distance) or not math.isfinite(self.distance):
            raise InvalidPerformanceError(
                f"Record {self.id}: distance must be numeric, got {self.distance!r}"
            )
        if self.distance <= 0:
            raise InvalidPerformanceError(f"Record {self.id}: distance must be positive")
        if not _is_number(self.time) or not math.isfinite(self.time):
            raise InvalidPerformanceError(
                f"Record {self.id}: time must be numeric, got {self.time!r}"
            )
        if self.time < 0:
            raise InvalidPerformanceError(f"Record {self.id}: time cannot be negative")

    @property
    def course(self) -> Optional[Course]:
        return Course.lookup(self.course_type)


@dataclass(frozen=True)
class CourseTime:
    """A time expressed in one course standard."""
    course: Course
    time: float

    @property
    def label(self) -> str:
        return self.course.label


@dataclass(frozen=True)
class ConvertedResult:
    """
    One record's time expressed in the two courses it wasn't swum in.

    Conversions keep the order the results screen has always shown:
    SCY gives (SCM, LCM), SCM gives (SCY, LCM), LCM gives (SCM, SCY).
    Look values up by course with ``time_for`` rather than by position.
    An unrecognized source course yields no conversions at all.
    """
    source_course: str
    original_time: float
    conversions: tuple[CourseTime, ...] = ()

    @property
    def is_convertible(self) -> bool:
        return bool(self.conversions)

    @property
    def primary(self) -> Optional[CourseTime]:
        return self.conversions[0] if self.conversions else None

    @property
    def secondary(self) -> Optional[CourseTime]:
        return self.conversions[1] if len(self.conversions) > 1 else None

    def time_for(self, course: Union[Course, str]) -> Optional[float]:
        """Converted time for a course, or None if it wasn't produced."""
        if not isinstance(course, Course):
            course = Course.lookup(course)
        for converted in self.conversions:
            if converted.course is course:
                return converted.time
        return None


@dataclass(frozen=True)
class PBAnnotation:
    """
    Personal-best flags for one record.

    ``is_pb``: fastest for its event at the moment it was swum.
    ``curr_pb``: the record holding the event's best time today.
    """
    is_pb: bool = False
    curr_pb: bool = False


@dataclass(frozen=True)
class EventCatalogEntry:
    """A distance, stroke and course combination the application recognizes."""
    distance: int
    stroke: Stroke
    course: Course

    @property
    def key(self) -> str:
        return f"{self.distance}-{self.stroke.value}-{self.course.value}"

    @property
    def label(self) -> str:
        return f"{self.distance} {self.stroke.display_name} ({self.course.label})"
