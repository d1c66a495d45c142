"""
Timesheet approval workflow.
Role-gated transitions between draft, submitted, approved and rejected.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from timetrack.domain.models.base import ValidationError, EntityNotFoundError
from timetrack.domain.models.timesheet import Timesheet, TimesheetStatus
from timetrack.domain.models.user import Actor
from timetrack.domain.models.value_objects import WeekId
from timetrack.domain.repositories.unit_of_work import UnitOfWork
from timetrack.domain.services.authorization import TimesheetAction, authorize, require_owner
from timetrack.domain.services.timesheet_aggregator import TimesheetAggregator


logger = logging.getLogger(__name__)


class ApprovalWorkflow:
    """
    Drives timesheet status changes.

    Checks run in a fixed order: permission, then input, then state. The
    workflow never touches time logs; an approved sheet is protected because
    every log writer asks the sheet whether it accepts changes.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        aggregator: TimesheetAggregator,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.uow = uow
        self.aggregator = aggregator
        self.clock = clock or datetime.utcnow

    def submit(
        self,
        actor: Actor,
        timesheet_id: Optional[int] = None,
        week_id: Optional[Union[WeekId, str]] = None,
    ) -> Timesheet:
        """Owner submits a sheet, addressed by id or by one of their weeks."""
        if timesheet_id is not None:
            timesheet = self._get(timesheet_id)
            require_owner(actor, timesheet.user_id, "Only the owner can submit this timesheet")
        elif week_id is not None:
            timesheet = self.aggregator.get_or_create(actor.user_id, week_id)
        else:
            raise ValidationError("Either a timesheet id or a week id is required", "timesheet_id")

        timesheet = self.aggregator.recompute(timesheet)
        timesheet.submit(actor.user_id, self.clock())
        timesheet = self.uow.timesheets.save(timesheet)

        logger.info(
            f"Timesheet {timesheet.id} ({timesheet.week_id}) submitted by user {actor.user_id} "
            f"with {timesheet.total_hours}h"
        )
        return timesheet

    def approve(self, actor: Actor, timesheet_id: int) -> Timesheet:
        authorize(actor, TimesheetAction.APPROVE)

        timesheet = self._get(timesheet_id)
        timesheet.approve(actor.user_id, self.clock())
        timesheet = self.uow.timesheets.save(timesheet)

        logger.info(f"Timesheet {timesheet.id} approved by user {actor.user_id}")
        return timesheet

    def reject(self, actor: Actor, timesheet_id: int, reason: Optional[str]) -> Timesheet:
        authorize(actor, TimesheetAction.REJECT)

        if reason is None or not reason.strip():
            raise ValidationError("Rejection reason is required", "reason")

        timesheet = self._get(timesheet_id)
        timesheet.reject(actor.user_id, reason, self.clock())
        timesheet = self.uow.timesheets.save(timesheet)

        logger.info(f"Timesheet {timesheet.id} rejected by user {actor.user_id}: {timesheet.rejection_reason}")
        return timesheet

    def list_pending(self, actor: Actor) -> List[Timesheet]:
        """Submitted sheets awaiting review, newest submission first."""
        authorize(actor, TimesheetAction.VIEW_PENDING)
        return self.uow.timesheets.list_by_status(TimesheetStatus.SUBMITTED)

    def _get(self, timesheet_id: int) -> Timesheet:
        timesheet = self.uow.timesheets.get_by_id(timesheet_id)
        if not timesheet:
            raise EntityNotFoundError("Timesheet", timesheet_id)
        return timesheet
