"""
db/models.py

SQLAlchemy 2.0 async ORM model definitions for the SQL task store.
Tables are created on startup via init_schema().
"""

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
    sessionmaker,
)


def build_engine(database_url: str) -> AsyncEngine:
    """Create the async engine for the configured database URL."""
    return create_async_engine(database_url, pool_pre_ping=True)


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class TaskRecord(Base):
    """A todo item."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    personal_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    completion_percentage: Mapped[int | None] = mapped_column(
        Integer, nullable=True
    )
    # False when the client sent no trigger list at all
    has_triggers: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    zones: Mapped[list["TriggerZoneRecord"]] = relationship(
        back_populates="task",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="TriggerZoneRecord.position",
    )


class TriggerZoneRecord(Base):
    """A trigger zone owned by exactly one task."""

    __tablename__ = "trigger_zones"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task_id: Mapped[int] = mapped_column(
        ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    zone_id: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    gps_lat: Mapped[float] = mapped_column(Float, nullable=False)
    gps_lng: Mapped[float] = mapped_column(Float, nullable=False)
    radius_m: Mapped[float] = mapped_column(Float, nullable=False)

    task: Mapped[TaskRecord] = relationship(back_populates="zones")
