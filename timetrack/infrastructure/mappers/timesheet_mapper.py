"""
Timesheet mapper for converting between domain entities and database models.
"""

from timetrack.domain.models.timesheet import Timesheet, TimesheetStatus
from timetrack.domain.models.value_objects import WeekId
from timetrack.infrastructure.db.models import TimesheetModel


class TimesheetMapper:
    """Maps between Timesheet domain entity and TimesheetModel database model."""

    def domain_to_model(self, timesheet: Timesheet) -> TimesheetModel:
        """Convert Timesheet domain entity to a new TimesheetModel."""
        model = TimesheetModel(id=timesheet.id, created_at=timesheet.created_at)
        self.update_model(model, timesheet)
        return model

    def update_model(self, model: TimesheetModel, timesheet: Timesheet) -> None:
        """Copy mutable entity state onto an existing row."""
        model.user_id = timesheet.user_id
        model.week_id = str(timesheet.week_id)
        model.week_start = timesheet.week_start
        model.week_end = timesheet.week_end
        model.total_seconds = timesheet.total_seconds
        model.total_hours = timesheet.total_hours
        model.entry_count = timesheet.entry_count
        model.status = timesheet.status
        model.rejection_reason = timesheet.rejection_reason
        model.submitted_at = timesheet.submitted_at
        model.approved_at = timesheet.approved_at
        model.approved_by = timesheet.approved_by
        model.reviewed_by = timesheet.reviewed_by
        model.updated_at = timesheet.updated_at

    def model_to_domain(self, model: TimesheetModel) -> Timesheet:
        """Convert TimesheetModel to Timesheet domain entity."""
        return Timesheet(
            id=model.id,
            user_id=model.user_id,
            week_id=WeekId.parse(model.week_id),
            status=TimesheetStatus(model.status) if model.status else TimesheetStatus.DRAFT,
            total_seconds=model.total_seconds or 0,
            entry_count=model.entry_count or 0,
            rejection_reason=model.rejection_reason,
            submitted_at=model.submitted_at,
            approved_at=model.approved_at,
            approved_by=model.approved_by,
            reviewed_by=model.reviewed_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
