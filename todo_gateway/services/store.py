"""
todo_gateway/services/store.py

Task storage behind the TaskStore protocol.
- InMemoryTaskStore: lock-guarded dict with copy-on-read snapshots
- SqlTaskStore: SQLAlchemy 2.0 async sessions, ids from autoincrement

Stores signal a missing task by returning None / False, never by raising.
"""

import itertools
import threading
from typing import Optional, Protocol

import structlog
from sqlalchemy import select

from db.models import TaskRecord, TriggerZoneRecord
from todo_gateway.constants import (
    SAMPLE_HOME_LAT,
    SAMPLE_HOME_LNG,
    SAMPLE_HOME_RADIUS_M,
)
from todo_gateway.schemas import (
    Task,
    TaskCreate,
    TaskFields,
    TaskUpdate,
    TriggerZone,
)

logger = structlog.get_logger(__name__)


class TaskStore(Protocol):
    """Storage capability consumed by the HTTP layer."""

    backend: str

    async def snapshot(self) -> list[Task]: ...

    async def get(self, task_id: int) -> Optional[Task]: ...

    async def insert(self, payload: TaskCreate) -> Task: ...

    async def update(self, task_id: int, payload: TaskUpdate) -> Optional[Task]: ...

    async def delete(self, task_id: int) -> bool: ...


def number_zones(
    zones: Optional[list[TriggerZone]],
) -> Optional[list[TriggerZone]]:
    """Give every zone without an id the next free id within its task."""
    if zones is None:
        return None
    next_id = max((z.id for z in zones if z.id is not None), default=0) + 1
    numbered: list[TriggerZone] = []
    for zone in zones:
        if zone.id is None:
            zone = zone.model_copy(update={"id": next_id})
            next_id += 1
        numbered.append(zone)
    return numbered


def _build_task(task_id: int, payload: TaskFields, completed: bool) -> Task:
    return Task(
        id=task_id,
        completed=completed,
        location_triggers=number_zones(payload.location_triggers),
        **payload.model_dump(exclude={"id", "completed", "location_triggers"}),
    )


class InMemoryTaskStore:
    """Process-local store; every read returns deep copies."""

    backend = "memory"

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._lock = threading.Lock()
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    async def snapshot(self) -> list[Task]:
        with self._lock:
            tasks = sorted(self._tasks.values(), key=lambda t: t.id)
            return [t.model_copy(deep=True) for t in tasks]

    async def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy(deep=True) if task is not None else None

    async def insert(self, payload: TaskCreate) -> Task:
        task = _build_task(self.next_id(), payload, completed=False)
        with self._lock:
            self._tasks[task.id] = task
        logger.info("task_created", task_id=task.id, backend=self.backend)
        return task.model_copy(deep=True)

    async def update(self, task_id: int, payload: TaskUpdate) -> Optional[Task]:
        task = _build_task(task_id, payload, completed=payload.completed)
        with self._lock:
            if task_id not in self._tasks:
                return None
            self._tasks[task_id] = task
        logger.info("task_updated", task_id=task_id, backend=self.backend)
        return task.model_copy(deep=True)

    async def delete(self, task_id: int) -> bool:
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is None:
            return False
        logger.info("task_deleted", task_id=task_id, backend=self.backend)
        return True


def _zone_records(zones: Optional[list[TriggerZone]]) -> list[TriggerZoneRecord]:
    return [
        TriggerZoneRecord(
            position=position,
            zone_id=zone.id,
            name=zone.name,
            gps_lat=zone.latitude,
            gps_lng=zone.longitude,
            radius_m=zone.radius,
        )
        for position, zone in enumerate(number_zones(zones) or [])
    ]


def _apply_fields(record: TaskRecord, payload: TaskFields) -> None:
    record.title = payload.title
    record.description = payload.description
    record.due_date = payload.due_date
    record.personal_notes = payload.personal_notes
    record.completion_percentage = payload.completion_percentage
    record.has_triggers = payload.location_triggers is not None
    record.zones = _zone_records(payload.location_triggers)


def _to_task(record: TaskRecord) -> Task:
    zones: Optional[list[TriggerZone]] = None
    if record.has_triggers:
        zones = [
            TriggerZone(
                id=z.zone_id,
                name=z.name,
                latitude=z.gps_lat,
                longitude=z.gps_lng,
                radius=z.radius_m,
            )
            for z in record.zones
        ]
    return Task(
        id=record.id,
        title=record.title,
        completed=record.completed,
        description=record.description,
        due_date=record.due_date,
        personal_notes=record.personal_notes,
        completion_percentage=record.completion_percentage,
        location_triggers=zones,
    )


class SqlTaskStore:
    """Relational store; one AsyncSession per operation."""

    backend = "sql"

    def __init__(self, session_factory) -> None:
        self._session_factory = session_factory

    async def snapshot(self) -> list[Task]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(TaskRecord).order_by(TaskRecord.id)
                )
                return [_to_task(r) for r in result.scalars().all()]
        except Exception as exc:
            logger.error("task_snapshot_failed", error=str(exc))
            raise

    async def get(self, task_id: int) -> Optional[Task]:
        try:
            async with self._session_factory() as session:
                record = await session.get(TaskRecord, task_id)
                return _to_task(record) if record is not None else None
        except Exception as exc:
            logger.error("task_get_failed", task_id=task_id, error=str(exc))
            raise

    async def insert(self, payload: TaskCreate) -> Task:
        try:
            async with self._session_factory() as session:
                record = TaskRecord(completed=False)
                _apply_fields(record, payload)
                session.add(record)
                await session.commit()
                logger.info("task_created", task_id=record.id, backend=self.backend)
                return _to_task(record)
        except Exception as exc:
            logger.error("task_create_failed", title=payload.title, error=str(exc))
            raise

    async def update(self, task_id: int, payload: TaskUpdate) -> Optional[Task]:
        try:
            async with self._session_factory() as session:
                record = await session.get(TaskRecord, task_id)
                if record is None:
                    return None
                _apply_fields(record, payload)
                record.completed = payload.completed
                await session.commit()
                logger.info("task_updated", task_id=task_id, backend=self.backend)
                return _to_task(record)
        except Exception as exc:
            logger.error("task_update_failed", task_id=task_id, error=str(exc))
            raise

    async def delete(self, task_id: int) -> bool:
        try:
            async with self._session_factory() as session:
                record = await session.get(TaskRecord, task_id)
                if record is None:
                    return False
                await session.delete(record)
                await session.commit()
                logger.info("task_deleted", task_id=task_id, backend=self.backend)
                return True
        except Exception as exc:
            logger.error("task_delete_failed", task_id=task_id, error=str(exc))
            raise


async def seed_sample_tasks(store: TaskStore) -> Task:
    """Insert the demo task used to exercise the nearby endpoint."""
    task = await store.insert(
        TaskCreate(
            title="Finish Rust project",
            description="Complete the Rust project for the client.",
            due_date="2024-07-01",
            personal_notes=(
                "Have completed the initial setup and basic functionality."
            ),
            completion_percentage=50,
            location_triggers=[
                TriggerZone(
                    id=1,
                    name="Home",
                    latitude=SAMPLE_HOME_LAT,
                    longitude=SAMPLE_HOME_LNG,
                    radius=SAMPLE_HOME_RADIUS_M,
                )
            ],
        )
    )
    logger.info("sample_task_seeded", task_id=task.id)
    return task
