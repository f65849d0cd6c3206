"""
Boundary schemas.

Inbound: the raw record shape the document store hands us, validated
and coerced by Pydantic (distances are stored as text there).

Outbound: the view models the results screens render. They are built
from domain objects and carry display strings alongside raw numbers so
the UI never formats times itself.
"""

from datetime import date, datetime, time as clock_time, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.performance.models import PerformanceRecord, ResultType


# ---------------------------------------------------------------------------
# Inbound
# ---------------------------------------------------------------------------

class PerformanceRecordIn(BaseModel):
    """A performance document as stored for one athlete."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(description="Document identifier, unique per athlete")
    event_type: str = Field(alias="eventType", description="Event key, e.g. 100-fr-scy")
    distance: float = Field(gt=0, description="Distance in the record's course (stored as text)")
    stroke: str = Field(description="Stroke code: fr, bk, br, fl or im")
    course_type: str = Field(alias="courseType", description="Course code: scy, scm or lcm")
    time: float = Field(ge=0, allow_inf_nan=False, description="Elapsed time in seconds")
    date: datetime = Field(description="When the result was swum")
    result_type: ResultType = Field(
        default=ResultType.PRACTICE,
        alias="type",
        description="practice or competition",
    )
    notes: Optional[str] = Field(default="", description="Free-text notes from the coach")

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_datetime(cls, value: object) -> object:
        # results are sorted by date, so keep every record a datetime
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, clock_time.min)
        return value

    @field_validator("date")
    @classmethod
    def _to_naive_utc(cls, value: datetime) -> datetime:
        # aware and naive datetimes can't be compared, so store UTC wall time
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @field_validator("stroke", "course_type")
    @classmethod
    def _lower_code(cls, value: str) -> str:
        return value.strip().lower()

    def to_domain(self) -> PerformanceRecord:
        distance: Union[int, float] = self.distance
        if distance.is_integer():
            distance = int(distance)
        return PerformanceRecord(
            id=self.id,
            event_type=self.event_type,
            distance=distance,
            stroke=self.stroke,
            course_type=self.course_type,
            time=self.time,
            date=self.date,
            result_type=self.result_type.value,
            notes=self.notes or "",
        )


# ---------------------------------------------------------------------------
# Outbound
# ---------------------------------------------------------------------------

class ResultRow(BaseModel):
    """One row of the results table."""
    id: str
    date: Union[datetime, date]
    result_type: str
    event_type: str
    time: float
    time_display: str
    notes: str = ""
    is_pb: bool = Field(description="Personal best when it was swum")
    curr_pb: bool = Field(description="Holds the event's best time today")


class ResultsView(BaseModel):
    """An athlete's results, newest first, with PB flags."""
    athlete_id: str
    result_type: str
    total: int
    practice_count: int
    competition_count: int
    results: list[ResultRow]


class CourseTimeView(BaseModel):
    """A time in one course standard."""
    course: str = Field(description="Course code, e.g. scm")
    label: str = Field(description="Course label, e.g. SCM")
    time: float
    time_display: str


class ConvertedResultView(BaseModel):
    """A result shown in the two other course standards."""
    record_id: str
    source_course: str
    original_time: float
    original_display: str
    convertible: bool
    conversions: list[CourseTimeView] = Field(
        default_factory=list,
        description="Tagged by course; do not rely on position",
    )


class CatalogEventView(BaseModel):
    """A recognized event the athlete can pick."""
    key: str
    label: str
    distance: int
    stroke: str
    course: str


class EstimateView(BaseModel):
    """Estimated time for an event the athlete hasn't swum."""
    event_key: str
    label: Optional[str] = None
    estimated_time: Optional[float] = None
    time_display: Optional[str] = None
    enough_data: bool


class ImprovementView(BaseModel):
    """Progression for one event."""
    event_type: str
    result_count: int
    first_time: float
    latest_time: float
    best_time: float
    total_improvement: float
    total_percent: float
    improvement_to_best: float
    percent_to_best: float


class PredictionView(BaseModel):
    """Predicted time for an event on a future date."""
    event_type: str
    label: Optional[str] = None
    on_date: Union[datetime, date]
    predicted_time: Optional[float] = None
    time_display: Optional[str] = None
    enough_data: bool
    model: str = Field(default="exponential_plateau", description="Curve used for the prediction")
