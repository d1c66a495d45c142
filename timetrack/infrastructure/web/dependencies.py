"""
FastAPI dependencies wiring a request's database session to the domain services.
"""

from datetime import datetime
from typing import Annotated, Callable
from fastapi import Depends
from sqlalchemy.orm import Session

from timetrack.application.service_container import ServiceContainer
from timetrack.config import Settings, get_settings
from timetrack.domain.collaborators import TaskDirectory
from timetrack.infrastructure.db.database import get_db
from timetrack.infrastructure.directory import get_directory
from timetrack.infrastructure.unit_of_work import SQLAlchemyUnitOfWork


def get_task_directory() -> TaskDirectory:
    """Dependency to get the task directory."""
    return get_directory()


def get_clock() -> Callable[[], datetime]:
    """Dependency to get the clock; overridden in tests."""
    return datetime.utcnow


def get_unit_of_work(session: Annotated[Session, Depends(get_db)]) -> SQLAlchemyUnitOfWork:
    return SQLAlchemyUnitOfWork(session)


def get_services(
    uow: Annotated[SQLAlchemyUnitOfWork, Depends(get_unit_of_work)],
    tasks: Annotated[TaskDirectory, Depends(get_task_directory)],
    clock: Annotated[Callable[[], datetime], Depends(get_clock)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ServiceContainer:
    """Dependency building the domain services for one request."""
    return ServiceContainer.build(
        uow,
        tasks,
        clock=clock,
        min_timer_seconds=settings.min_timer_seconds,
        max_daily_hours=settings.max_daily_hours,
        timer_default_description=settings.timer_default_description,
    )
