"""
Timesheet router.
Weekly sheets, the grid save, and the submit/approve/reject workflow.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends

from timetrack.infrastructure.auth import get_current_actor
from timetrack.infrastructure.web.dependencies import get_services
from timetrack.application.service_container import ServiceContainer
from timetrack.application.use_cases.timesheet_use_cases import (
    TimesheetWeekQuery,
    TimesheetReview,
    GetWeeklyTimesheetUseCase,
    SaveTimesheetEntriesUseCase,
    SubmitTimesheetUseCase,
    ApproveTimesheetUseCase,
    RejectTimesheetUseCase,
    ListPendingTimesheetsUseCase,
)
from timetrack.application.dto.timesheet_dto import (
    SaveTimesheetRequestDTO,
    SubmitTimesheetRequestDTO,
    RejectTimesheetRequestDTO,
    TimesheetResponseDTO,
)
from timetrack.domain.models.user import Actor


router = APIRouter()


@router.get("/pending", response_model=List[TimesheetResponseDTO])
async def list_pending_timesheets(
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Submitted timesheets awaiting review, newest submission first.
    """
    return await ListPendingTimesheetsUseCase(services).execute(actor, None)


@router.get("/user/{user_id}/week/{week_id}", response_model=TimesheetResponseDTO)
async def get_weekly_timesheet(
    user_id: str,
    week_id: str,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Get a user's timesheet for an ISO week (e.g. 2026-W05) with its entries.
    The draft sheet is created on first access.
    """
    query = TimesheetWeekQuery(user_id=user_id, week_id=week_id)
    return await GetWeeklyTimesheetUseCase(services).execute(actor, query)


@router.post("/save", response_model=TimesheetResponseDTO)
async def save_timesheet_entries(
    request: SaveTimesheetRequestDTO,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Save grid cells of your timesheet.

    - **timesheetId**: Sheet to edit (draft or rejected)
    - **entries**: Cells `{taskId, dayIndex, duration, projectId}`; duration
      in hours, 0 clears the cell, dayIndex 0 is Monday
    """
    return await SaveTimesheetEntriesUseCase(services).execute(actor, request)


@router.post("/submit", response_model=TimesheetResponseDTO)
async def submit_timesheet(
    request: SubmitTimesheetRequestDTO,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Submit one of your timesheets for review, by **timesheetId** or **weekId**.
    """
    return await SubmitTimesheetUseCase(services).execute(actor, request)


@router.put("/{timesheet_id}/approve", response_model=TimesheetResponseDTO)
async def approve_timesheet(
    timesheet_id: int,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Approve a submitted timesheet. Approved weeks are locked.
    """
    return await ApproveTimesheetUseCase(services).execute(actor, TimesheetReview(timesheet_id))


@router.put("/{timesheet_id}/reject", response_model=TimesheetResponseDTO)
async def reject_timesheet(
    timesheet_id: int,
    request: RejectTimesheetRequestDTO,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Send a submitted timesheet back to its owner with a **reason**.
    """
    review = TimesheetReview(timesheet_id, reason=request.reason)
    return await RejectTimesheetUseCase(services).execute(actor, review)
