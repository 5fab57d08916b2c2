"""
todo_gateway/services/proximity.py

Proximity matching: which incomplete tasks have a trigger zone
containing the live coordinate.
"""

from collections.abc import Iterable

import structlog

from todo_gateway.schemas import Coordinate, Task
from todo_gateway.services.geo import distance

logger = structlog.get_logger(__name__)


def is_nearby(point: Coordinate, task: Task) -> bool:
    """
    True if the task is incomplete and any of its zones contains the point.

    A point exactly `radius` meters from a zone center counts as inside.
    """
    if task.completed or not task.zones:
        return False
    return any(
        distance(point, zone.center) <= zone.radius for zone in task.zones
    )


def nearby(point: Coordinate, tasks: Iterable[Task]) -> list[Task]:
    """Return the tasks near the point, preserving input order."""
    scanned = 0
    matched: list[Task] = []
    for task in tasks:
        scanned += 1
        if is_nearby(point, task):
            matched.append(task)

    logger.info(
        "nearby_tasks_matched",
        latitude=point.latitude,
        longitude=point.longitude,
        scanned=scanned,
        matched=len(matched),
    )
    return matched
