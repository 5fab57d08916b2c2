"""
todo_gateway/schemas.py

Pydantic data models for the gateway layer.
- Coordinate: immutable latitude/longitude value
- TriggerZone: circular region attached to a task
- Task: stored todo record; TaskCreate / TaskUpdate: request bodies
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from todo_gateway.constants import (
    COMPLETION_PERCENTAGE_MAX,
    COMPLETION_PERCENTAGE_MIN,
    LATITUDE_MAX,
    LATITUDE_MIN,
    LONGITUDE_MAX,
    LONGITUDE_MIN,
)


class Coordinate(BaseModel):
    """A point on the Earth's surface in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=LATITUDE_MIN, le=LATITUDE_MAX, allow_inf_nan=False)
    longitude: float = Field(ge=LONGITUDE_MIN, le=LONGITUDE_MAX, allow_inf_nan=False)


class TriggerZone(BaseModel):
    """
    A named circular region; entering it should surface the owning task.

    The center is carried flat as latitude/longitude on the wire.
    """

    id: Optional[int] = None
    name: str
    latitude: float = Field(ge=LATITUDE_MIN, le=LATITUDE_MAX, allow_inf_nan=False)
    longitude: float = Field(ge=LONGITUDE_MIN, le=LONGITUDE_MAX, allow_inf_nan=False)
    radius: float = Field(ge=0, allow_inf_nan=False)  # meters

    @property
    def center(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class TaskFields(BaseModel):
    """Fields shared by stored tasks and request bodies."""

    title: str
    description: Optional[str] = None
    due_date: Optional[str] = None
    personal_notes: Optional[str] = None
    completion_percentage: Optional[int] = Field(
        default=None,
        ge=COMPLETION_PERCENTAGE_MIN,
        le=COMPLETION_PERCENTAGE_MAX,
    )
    location_triggers: Optional[list[TriggerZone]] = None


class TaskCreate(TaskFields):
    """Payload for creating a task; the store assigns the id."""


class TaskUpdate(TaskFields):
    """Full replacement payload for an existing task."""

    completed: bool = False


class Task(TaskFields):
    """A stored todo record."""

    id: int
    completed: bool = False

    @property
    def zones(self) -> list[TriggerZone]:
        return self.location_triggers or []
