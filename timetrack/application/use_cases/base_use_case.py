"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar
from datetime import datetime

from timetrack.application.service_container import ServiceContainer
from timetrack.domain.events.base import DomainEvent, publish_event
from timetrack.domain.models.base import BaseEntity
from timetrack.domain.models.user import Actor


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Domain exceptions propagate to the caller unchanged.
    """

    def __init__(self, services: ServiceContainer):
        self.services = services

    async def execute(self, actor: Actor, request: T) -> R:
        """
        Execute the use case and log how long it took.
        """
        started = datetime.utcnow()
        try:
            return await self._run(actor, request)
        finally:
            elapsed = (datetime.utcnow() - started).total_seconds()
            logger.debug(f"{self.__class__.__name__} finished in {elapsed:.3f}s for user {actor.user_id}")

    @abstractmethod
    async def _run(self, actor: Actor, request: T) -> R:
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """

    async def _run(self, actor: Actor, request: T) -> R:
        return await self._execute_query(actor, request)

    @abstractmethod
    async def _execute_query(self, actor: Actor, request: T) -> R:
        pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).

    The command runs inside the unit of work: commit on success, rollback on
    any exception. Domain events collected during the command are published
    only after the commit, and a failing publication never undoes it.
    """

    def __init__(self, services: ServiceContainer):
        super().__init__(services)
        self.events: List[DomainEvent] = []

    async def _run(self, actor: Actor, request: T) -> R:
        uow = self.services.uow
        try:
            result = await self._execute_command_logic(actor, request)
            uow.commit()
        except Exception:
            uow.rollback()
            self.events.clear()
            raise

        await self._publish_events()
        return result

    @abstractmethod
    async def _execute_command_logic(self, actor: Actor, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass

    def collect_events(self, entity: BaseEntity) -> None:
        self.events.extend(entity.pull_events())

    async def _publish_events(self) -> None:
        """Publish collected domain events."""
        events, self.events = self.events, []
        for event in events:
            try:
                await publish_event(event)
            except Exception as e:
                logger.error(
                    f"Failed to publish {event.event_type} (ID: {event.event_id}): {str(e)}",
                    exc_info=True
                )
