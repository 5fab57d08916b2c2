"""
todo_gateway/routers/todos.py

/todos endpoints: CRUD over task records plus the nearby query that
drives location-based notifications on the client.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from todo_gateway.constants import (
    LATITUDE_MAX,
    LATITUDE_MIN,
    LONGITUDE_MAX,
    LONGITUDE_MIN,
)
from todo_gateway.schemas import Coordinate, Task, TaskCreate, TaskUpdate
from todo_gateway.services.proximity import nearby
from todo_gateway.services.store import TaskStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])


def get_store(request: Request) -> TaskStore:
    """Task store built during application startup."""
    return request.app.state.store


def _not_found(task_id: int) -> HTTPException:
    logger.info("task_not_found", task_id=task_id)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Todo {task_id} not found",
    )


@router.get("", response_model=list[Task])
async def list_todos(store: TaskStore = Depends(get_store)) -> list[Task]:
    """Return every todo, for full client sync."""
    return await store.snapshot()


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_todo(
    payload: TaskCreate,
    store: TaskStore = Depends(get_store),
) -> Task:
    """Create a todo; new todos always start incomplete."""
    return await store.insert(payload)


@router.get("/nearby", response_model=list[Task])
async def get_nearby_todos(
    lat: float = Query(ge=LATITUDE_MIN, le=LATITUDE_MAX, allow_inf_nan=False),
    lng: float = Query(ge=LONGITUDE_MIN, le=LONGITUDE_MAX, allow_inf_nan=False),
    store: TaskStore = Depends(get_store),
) -> list[Task]:
    """
    Return incomplete todos with a trigger zone containing (lat, lng).

    Flow:
    1. Coordinates are range-checked by FastAPI before this runs
    2. Take a snapshot of the store
    3. Filter the snapshot with the proximity matcher
    """
    point = Coordinate(latitude=lat, longitude=lng)
    tasks = await store.snapshot()
    return nearby(point, tasks)


@router.get("/{task_id}", response_model=Task)
async def get_todo(task_id: int, store: TaskStore = Depends(get_store)) -> Task:
    task = await store.get(task_id)
    if task is None:
        raise _not_found(task_id)
    return task


@router.put("/{task_id}", response_model=Task)
async def update_todo(
    task_id: int,
    payload: TaskUpdate,
    store: TaskStore = Depends(get_store),
) -> Task:
    """Replace a todo; the path id wins over any id in the body."""
    task = await store.update(task_id, payload)
    if task is None:
        raise _not_found(task_id)
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(task_id: int, store: TaskStore = Depends(get_store)) -> Response:
    if not await store.delete(task_id):
        raise _not_found(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
