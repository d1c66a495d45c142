"""
Shared fixtures: in-memory SQLite, a seeded directory and a controllable clock.
"""

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from timetrack.application.service_container import ServiceContainer
from timetrack.domain.events.base import get_event_dispatcher
from timetrack.infrastructure.db.database import build_engine, init_db
from timetrack.infrastructure.directory.memory_directory import InMemoryDirectory
from timetrack.infrastructure.unit_of_work import SQLAlchemyUnitOfWork
from tests.support import FakeClock, WORKER, OTHER_WORKER, MANAGER, ADMIN, LEADER


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def uow(session):
    return SQLAlchemyUnitOfWork(session)


@pytest.fixture
def directory():
    directory = InMemoryDirectory()
    for actor in (WORKER, OTHER_WORKER, MANAGER, ADMIN, LEADER):
        directory.set_role(actor.user_id, actor.role)
    directory.add_task("t-design", "p-web", title="Design", assignees=[WORKER.user_id, OTHER_WORKER.user_id])
    directory.add_task("t-build", "p-web", title="Build", assignees=[WORKER.user_id])
    directory.add_task("t-audit", "p-ops", title="Audit", assignees=[])
    return directory


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def services(uow, directory, clock):
    return ServiceContainer.build(uow, directory, clock=clock, min_timer_seconds=60, max_daily_hours=24.0)


@pytest.fixture(autouse=True)
def clean_event_dispatcher():
    """Keep handlers registered by one test from leaking into the next."""
    dispatcher = get_event_dispatcher()
    dispatcher.clear_handlers()
    dispatcher.clear_event_log()
    yield
    dispatcher.clear_handlers()
    dispatcher.clear_event_log()
