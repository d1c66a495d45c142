"""
Timer use cases for the application layer.
"""

from typing import Optional

from timetrack.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from timetrack.application.dto.timer_dto import (
    StartTimerRequestDTO,
    ActiveTimerResponseDTO,
    TimerDiscardedResponseDTO,
)
from timetrack.application.dto.time_log_dto import TimeLogResponseDTO
from timetrack.domain.models.user import Actor


class StartTimerUseCase(CommandUseCase[StartTimerRequestDTO, ActiveTimerResponseDTO]):
    """Use case for starting a timer."""

    async def _execute_command_logic(self, actor: Actor, request: StartTimerRequestDTO) -> ActiveTimerResponseDTO:
        session = self.services.timers.start(
            actor,
            task_id=request.task_id,
            project_id=request.project_id,
            description=request.description,
        )
        return ActiveTimerResponseDTO.from_domain(session, self.services.clock())


class StopTimerUseCase(CommandUseCase[None, TimeLogResponseDTO]):
    """Use case for stopping the running timer and recording its time."""

    async def _execute_command_logic(self, actor: Actor, request: None = None) -> TimeLogResponseDTO:
        time_log = self.services.timers.stop(actor)
        return TimeLogResponseDTO.from_domain(time_log)


class DiscardTimerUseCase(CommandUseCase[None, TimerDiscardedResponseDTO]):
    """Use case for throwing the running timer away."""

    async def _execute_command_logic(self, actor: Actor, request: None = None) -> TimerDiscardedResponseDTO:
        session = self.services.timers.discard(actor)
        return TimerDiscardedResponseDTO(id=session.id, message="Timer discarded")


class GetActiveTimerUseCase(QueryUseCase[None, Optional[ActiveTimerResponseDTO]]):
    """Use case for reading the running timer, if any."""

    async def _execute_query(self, actor: Actor, request: None = None) -> Optional[ActiveTimerResponseDTO]:
        session = self.services.timers.get_active(actor)
        if session is None:
            return None
        return ActiveTimerResponseDTO.from_domain(session, self.services.clock())
