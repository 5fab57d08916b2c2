"""
todo_gateway/main.py

FastAPI application entry point for the todo gateway.
Builds the configured task store during startup and registers routers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from db.models import build_engine, build_session_factory, init_schema
from todo_gateway.logging_config import configure_logging
from todo_gateway.routers.todos import router as todos_router
from todo_gateway.services.store import (
    InMemoryTaskStore,
    SqlTaskStore,
    seed_sample_tasks,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle: startup and shutdown."""
    configure_logging(settings.log_level, json_output=settings.log_json)
    engine = None
    if settings.store_backend == "sql":
        engine = build_engine(settings.database_url)
        await init_schema(engine)
        app.state.store = SqlTaskStore(build_session_factory(engine))
    else:
        app.state.store = InMemoryTaskStore()

    if settings.seed_sample_data:
        await seed_sample_tasks(app.state.store)

    logger.info(
        "gateway_starting",
        host=settings.host,
        port=settings.port,
        store_backend=settings.store_backend,
    )
    yield
    logger.info("gateway_shutting_down")
    if engine is not None:
        await engine.dispose()


app = FastAPI(
    title="Todo Location Gateway",
    description="Todo CRUD with location-triggered nearby lookup",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def log_rejected_request(request: Request, exc: RequestValidationError):
    """Log requests that fail validation, then answer with FastAPI's 422."""
    logger.warning(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return await request_validation_exception_handler(request, exc)


@app.get("/health")
async def health(request: Request) -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok", "store_backend": request.app.state.store.backend}


app.include_router(todos_router)


def run() -> None:
    """Console entry point: serve the gateway with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
