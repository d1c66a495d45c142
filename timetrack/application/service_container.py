"""
Wires the domain services around one unit of work.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from timetrack.domain.collaborators import TaskDirectory
from timetrack.domain.repositories.unit_of_work import UnitOfWork
from timetrack.domain.services.approval_workflow import ApprovalWorkflow
from timetrack.domain.services.time_log_service import TimeLogService
from timetrack.domain.services.timer_service import TimerService
from timetrack.domain.services.timesheet_aggregator import TimesheetAggregator


@dataclass
class ServiceContainer:
    """Domain services sharing a unit of work, a task directory and a clock."""

    uow: UnitOfWork
    aggregator: TimesheetAggregator
    timers: TimerService
    time_logs: TimeLogService
    approvals: ApprovalWorkflow
    clock: Callable[[], datetime]

    @classmethod
    def build(
        cls,
        uow: UnitOfWork,
        tasks: TaskDirectory,
        clock: Optional[Callable[[], datetime]] = None,
        min_timer_seconds: int = 60,
        max_daily_hours: float = 24.0,
        timer_default_description: str = "Timer session",
    ) -> "ServiceContainer":
        clock = clock or datetime.utcnow
        aggregator = TimesheetAggregator(uow, tasks, clock=clock, max_daily_hours=max_daily_hours)
        return cls(
            uow=uow,
            aggregator=aggregator,
            timers=TimerService(
                uow,
                tasks,
                aggregator,
                clock=clock,
                min_timer_seconds=min_timer_seconds,
                default_description=timer_default_description,
            ),
            time_logs=TimeLogService(uow, aggregator, clock=clock),
            approvals=ApprovalWorkflow(uow, aggregator, clock=clock),
            clock=clock,
        )
