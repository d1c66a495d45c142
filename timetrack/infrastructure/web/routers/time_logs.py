"""
Time log router.
Manual entries, edits and listings of recorded time.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, status, Query

from timetrack.infrastructure.auth import get_current_actor
from timetrack.infrastructure.web.dependencies import get_services
from timetrack.application.service_container import ServiceContainer
from timetrack.application.use_cases.time_log_use_cases import (
    TimeLogUpdate,
    WeekGridQuery,
    CreateTimeLogUseCase,
    UpdateTimeLogUseCase,
    DeleteTimeLogUseCase,
    ListUserTimeLogsUseCase,
    ListTaskTimeLogsUseCase,
    GetWeekGridUseCase,
)
from timetrack.application.dto.time_log_dto import (
    CreateTimeLogRequestDTO,
    UpdateTimeLogRequestDTO,
    TimeLogResponseDTO,
    DeletedTimeLogResponseDTO,
    WeekGridResponseDTO,
)
from timetrack.domain.models.user import Actor


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TimeLogResponseDTO)
async def create_time_log(
    request: CreateTimeLogRequestDTO,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Create a manual time log.

    - **taskId**: Task to log time for
    - **date**: Day the work belongs to (not in the future)
    - **startTime** / **endTime**: Interval, end after start
    - **description**: Optional note
    - **isManual**: Must be true; timer logs come from stopping a timer
    """
    return await CreateTimeLogUseCase(services).execute(actor, request)


@router.get("/weekly", response_model=WeekGridResponseDTO)
async def get_week_grid(
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)],
    week_id: Optional[str] = Query(None, alias="weekId", description="ISO week, e.g. 2026-W05; defaults to the current week")
):
    """
    Hours per task and weekday for one of your weeks.
    """
    query = WeekGridQuery(user_id=actor.user_id, week_id=week_id)
    return await GetWeekGridUseCase(services).execute(actor, query)


@router.get("/user/{user_id}", response_model=List[TimeLogResponseDTO])
async def list_user_time_logs(
    user_id: str,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    List a user's time logs, newest first. Reviewers may list other users.
    """
    return await ListUserTimeLogsUseCase(services).execute(actor, user_id)


@router.get("/task/{task_id}", response_model=List[TimeLogResponseDTO])
async def list_task_time_logs(
    task_id: str,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    List the time logged on a task by everyone.
    """
    return await ListTaskTimeLogsUseCase(services).execute(actor, task_id)


@router.put("/{log_id}", response_model=TimeLogResponseDTO)
async def update_time_log(
    log_id: int,
    request: UpdateTimeLogRequestDTO,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Edit one of your time logs while its week is still editable.
    """
    return await UpdateTimeLogUseCase(services).execute(actor, TimeLogUpdate(log_id, request))


@router.delete("/{log_id}", response_model=DeletedTimeLogResponseDTO)
async def delete_time_log(
    log_id: int,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Delete one of your time logs while its week is still editable.
    """
    return await DeleteTimeLogUseCase(services).execute(actor, log_id)
