"""
Timer router.
Starts, stops and discards the caller's running timer.
"""

from typing import Annotated, Optional
from fastapi import APIRouter, Depends, status

from timetrack.infrastructure.auth import get_current_actor
from timetrack.infrastructure.web.dependencies import get_services
from timetrack.application.service_container import ServiceContainer
from timetrack.application.use_cases.timer_use_cases import (
    StartTimerUseCase,
    StopTimerUseCase,
    DiscardTimerUseCase,
    GetActiveTimerUseCase,
)
from timetrack.application.dto.timer_dto import (
    StartTimerRequestDTO,
    ActiveTimerResponseDTO,
    TimerDiscardedResponseDTO,
)
from timetrack.application.dto.time_log_dto import TimeLogResponseDTO
from timetrack.domain.models.user import Actor


router = APIRouter()


@router.post("/start", status_code=status.HTTP_201_CREATED, response_model=ActiveTimerResponseDTO)
async def start_timer(
    request: StartTimerRequestDTO,
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Start a timer.

    - **taskId**: Task to track (you must be assigned to it)
    - **projectId**: Optional, defaults to the task's project
    - **description**: Optional note carried over to the time log

    Only one timer may run per user.
    """
    return await StartTimerUseCase(services).execute(actor, request)


@router.get("/active", response_model=Optional[ActiveTimerResponseDTO])
async def get_active_timer(
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Get the running timer with its elapsed time, or null when none is running.
    """
    return await GetActiveTimerUseCase(services).execute(actor, None)


@router.post("/stop", response_model=TimeLogResponseDTO)
async def stop_timer(
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Stop the running timer and record it as a time log.
    """
    return await StopTimerUseCase(services).execute(actor, None)


@router.delete("/discard", response_model=TimerDiscardedResponseDTO)
async def discard_timer(
    actor: Annotated[Actor, Depends(get_current_actor)],
    services: Annotated[ServiceContainer, Depends(get_services)]
):
    """
    Discard the running timer without recording any time.
    """
    return await DiscardTimerUseCase(services).execute(actor, None)
