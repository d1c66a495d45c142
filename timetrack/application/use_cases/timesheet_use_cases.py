"""
Timesheet use cases for the application layer.
Weekly sheets, bulk grid saves and the approval workflow.
"""

from dataclasses import dataclass
from typing import List, Optional

from timetrack.application.use_cases.base_use_case import CommandUseCase, QueryUseCase
from timetrack.application.dto.timesheet_dto import (
    SaveTimesheetRequestDTO,
    SubmitTimesheetRequestDTO,
    TimesheetResponseDTO,
)
from timetrack.domain.models.user import Actor


@dataclass(frozen=True)
class TimesheetWeekQuery:
    user_id: str
    week_id: str


@dataclass(frozen=True)
class TimesheetReview:
    timesheet_id: int
    reason: Optional[str] = None


class GetWeeklyTimesheetUseCase(CommandUseCase[TimesheetWeekQuery, TimesheetResponseDTO]):
    """
    Use case for reading a user's sheet for a week with its entries.
    A command because the first read of a week creates the draft sheet.
    """

    async def _execute_command_logic(self, actor: Actor, request: TimesheetWeekQuery) -> TimesheetResponseDTO:
        weekly = self.services.aggregator.get_timesheet(actor, request.user_id, request.week_id)
        return TimesheetResponseDTO.from_weekly(weekly)


class SaveTimesheetEntriesUseCase(CommandUseCase[SaveTimesheetRequestDTO, TimesheetResponseDTO]):
    """Use case for the bulk grid save. The whole batch commits or none of it."""

    async def _execute_command_logic(self, actor: Actor, request: SaveTimesheetRequestDTO) -> TimesheetResponseDTO:
        timesheet = self.services.aggregator.save_entries(
            actor,
            request.timesheet_id,
            [entry.to_domain() for entry in request.entries],
        )
        return TimesheetResponseDTO.from_domain(timesheet)


class SubmitTimesheetUseCase(CommandUseCase[SubmitTimesheetRequestDTO, TimesheetResponseDTO]):
    """Use case for submitting a sheet for review."""

    async def _execute_command_logic(self, actor: Actor, request: SubmitTimesheetRequestDTO) -> TimesheetResponseDTO:
        timesheet = self.services.approvals.submit(
            actor,
            timesheet_id=request.timesheet_id,
            week_id=request.week_id,
        )
        self.collect_events(timesheet)
        return TimesheetResponseDTO.from_domain(timesheet)


class ApproveTimesheetUseCase(CommandUseCase[TimesheetReview, TimesheetResponseDTO]):
    """Use case for approving a submitted sheet."""

    async def _execute_command_logic(self, actor: Actor, request: TimesheetReview) -> TimesheetResponseDTO:
        timesheet = self.services.approvals.approve(actor, request.timesheet_id)
        self.collect_events(timesheet)
        return TimesheetResponseDTO.from_domain(timesheet)


class RejectTimesheetUseCase(CommandUseCase[TimesheetReview, TimesheetResponseDTO]):
    """Use case for sending a submitted sheet back to its owner."""

    async def _execute_command_logic(self, actor: Actor, request: TimesheetReview) -> TimesheetResponseDTO:
        timesheet = self.services.approvals.reject(actor, request.timesheet_id, request.reason)
        self.collect_events(timesheet)
        return TimesheetResponseDTO.from_domain(timesheet)


class ListPendingTimesheetsUseCase(QueryUseCase[None, List[TimesheetResponseDTO]]):
    """Use case for the reviewers' queue."""

    async def _execute_query(self, actor: Actor, request: None = None) -> List[TimesheetResponseDTO]:
        timesheets = self.services.approvals.list_pending(actor)
        return [TimesheetResponseDTO.from_domain(timesheet) for timesheet in timesheets]
