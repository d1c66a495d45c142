"""
Time log use cases for the application layer.
Manual entry, editing and the read-side listings of finalized time.
"""

from dataclasses import dataclass
from typing import List, Optional

from timetrack.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from timetrack.application.dto.time_log_dto import (
    CreateTimeLogRequestDTO,
    UpdateTimeLogRequestDTO,
    TimeLogResponseDTO,
    DeletedTimeLogResponseDTO,
    WeekGridResponseDTO,
)
from timetrack.domain.models.base import ValidationError
from timetrack.domain.models.user import Actor
from timetrack.domain.models.value_objects import WeekId


@dataclass(frozen=True)
class TimeLogUpdate:
    log_id: int
    changes: UpdateTimeLogRequestDTO


@dataclass(frozen=True)
class WeekGridQuery:
    user_id: str
    week_id: Optional[str] = None


class CreateTimeLogUseCase(CommandUseCase[CreateTimeLogRequestDTO, TimeLogResponseDTO]):
    """Use case for recording a manual time log."""

    async def _execute_command_logic(self, actor: Actor, request: CreateTimeLogRequestDTO) -> TimeLogResponseDTO:
        # Timer logs are only created by stopping a timer
        if not request.is_manual:
            raise ValidationError("Only manual time logs can be created directly; stop a timer instead", "isManual")

        time_log = self.services.time_logs.create_manual(
            actor,
            task_id=request.task_id,
            log_date=request.log_date,
            started_at=request.start_time,
            ended_at=request.end_time,
            description=request.description,
        )
        return TimeLogResponseDTO.from_domain(time_log)


class UpdateTimeLogUseCase(CommandUseCase[TimeLogUpdate, TimeLogResponseDTO]):
    """Use case for editing one's own time log."""

    async def _execute_command_logic(self, actor: Actor, request: TimeLogUpdate) -> TimeLogResponseDTO:
        changes = request.changes
        time_log = self.services.time_logs.update(
            actor,
            request.log_id,
            started_at=changes.start_time,
            ended_at=changes.end_time,
            description=changes.description,
        )
        return TimeLogResponseDTO.from_domain(time_log)


class DeleteTimeLogUseCase(CommandUseCase[int, DeletedTimeLogResponseDTO]):
    """Use case for deleting one's own time log."""

    async def _execute_command_logic(self, actor: Actor, request: int) -> DeletedTimeLogResponseDTO:
        time_log = self.services.time_logs.delete(actor, request)
        return DeletedTimeLogResponseDTO(id=time_log.id)


class ListUserTimeLogsUseCase(QueryUseCase[str, List[TimeLogResponseDTO]]):
    """Use case for listing a user's time logs, newest first."""

    async def _execute_query(self, actor: Actor, request: str) -> List[TimeLogResponseDTO]:
        logs = self.services.time_logs.list_for_user(actor, request)
        return [TimeLogResponseDTO.from_domain(log) for log in logs]


class ListTaskTimeLogsUseCase(QueryUseCase[str, List[TimeLogResponseDTO]]):
    """Use case for listing every time log booked on a task."""

    async def _execute_query(self, actor: Actor, request: str) -> List[TimeLogResponseDTO]:
        logs = self.services.time_logs.list_for_task(actor, request)
        return [TimeLogResponseDTO.from_domain(log) for log in logs]


class GetWeekGridUseCase(QueryUseCase[WeekGridQuery, WeekGridResponseDTO]):
    """Use case for the task x weekday view of a week (current week by default)."""

    async def _execute_query(self, actor: Actor, request: WeekGridQuery) -> WeekGridResponseDTO:
        week_id = request.week_id or WeekId.from_date(self.services.clock().date())
        grid = self.services.aggregator.week_grid(actor, request.user_id, week_id)
        return WeekGridResponseDTO.from_domain(grid)
