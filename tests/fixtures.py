"""
tests/fixtures.py

Shared test data and helper functions for constructing test records.
All tests must use these fixtures instead of hardcoding test values.
"""

from todo_gateway.schemas import Coordinate, Task, TaskCreate, TaskUpdate, TriggerZone

# ── Reference locations ─────────────────────────────────────

SF_LAT: float = 37.7749
SF_LNG: float = -122.4194
# Roughly 100 m north of SF_LAT / SF_LNG
SF_NORTH_100M_LAT: float = 37.7758
# Oakland, roughly 13 km from SF_LAT / SF_LNG
OAKLAND_LAT: float = 37.8044
OAKLAND_LNG: float = -122.2712


def sf_point() -> Coordinate:
    return Coordinate(latitude=SF_LAT, longitude=SF_LNG)


def build_zone(
    zone_id: int | None = 1,
    name: str = "Home",
    latitude: float = SF_LAT,
    longitude: float = SF_LNG,
    radius: float = 100.0,
) -> TriggerZone:
    """Build a TriggerZone with sensible defaults for testing."""
    return TriggerZone(
        id=zone_id,
        name=name,
        latitude=latitude,
        longitude=longitude,
        radius=radius,
    )


def build_task(
    task_id: int = 1,
    title: str = "Buy groceries",
    completed: bool = False,
    zones: list[TriggerZone] | None = None,
) -> Task:
    """Build a stored Task; zones=None means no trigger list at all."""
    return Task(
        id=task_id,
        title=title,
        completed=completed,
        description="Milk, eggs, bread",
        due_date="2024-07-01",
        completion_percentage=0,
        location_triggers=zones,
    )


def build_create(
    title: str = "Buy groceries",
    zones: list[TriggerZone] | None = None,
) -> TaskCreate:
    """Build a TaskCreate payload for store and API tests."""
    return TaskCreate(
        title=title,
        description="Milk, eggs, bread",
        personal_notes="Made the list",
        completion_percentage=10,
        location_triggers=zones,
    )


def build_update(
    title: str = "Buy groceries",
    completed: bool = False,
    zones: list[TriggerZone] | None = None,
) -> TaskUpdate:
    """Build a TaskUpdate payload for store and API tests."""
    return TaskUpdate(
        title=title,
        completed=completed,
        completion_percentage=100 if completed else 50,
        location_triggers=zones,
    )
