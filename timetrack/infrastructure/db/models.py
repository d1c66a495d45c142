"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean, Date, Numeric,
    Enum as SQLEnum, Index, UniqueConstraint, CheckConstraint,
)
from sqlalchemy.sql import func

from timetrack.domain.models.time_log import TimeLogSource
from timetrack.domain.models.timesheet import TimesheetStatus
from timetrack.infrastructure.db.database import Base


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class TimeLogModel(Base):
    """Time log table"""
    __tablename__ = 'time_logs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False)
    task_id = Column(String(64), nullable=False)
    project_id = Column(String(64), nullable=False)

    log_date = Column(Date, nullable=False)
    started_at = Column(DateTime, nullable=False)
    ended_at = Column(DateTime, nullable=False)
    duration_seconds = Column(Integer, nullable=False)

    source = Column(
        SQLEnum(TimeLogSource, values_callable=_enum_values, name="time_log_source"),
        nullable=False,
        default=TimeLogSource.MANUAL,
    )
    description = Column(Text)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Indexes
    __table_args__ = (
        CheckConstraint('ended_at > started_at', name='ck_time_logs_range'),
        CheckConstraint('duration_seconds > 0', name='ck_time_logs_duration'),
        Index('idx_time_logs_user_date', 'user_id', 'log_date'),
        Index('idx_time_logs_cell', 'user_id', 'task_id', 'log_date'),
        Index('idx_time_logs_task', 'task_id'),
    )


class TimerSessionModel(Base):
    """Active timer table. Rows exist only while a timer runs."""
    __tablename__ = 'timer_sessions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False)
    task_id = Column(String(64), nullable=False)
    project_id = Column(String(64), nullable=False)

    started_at = Column(DateTime, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    description = Column(Text)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint('user_id', name='uq_timer_sessions_user'),
    )


class TimesheetModel(Base):
    """Weekly timesheet table"""
    __tablename__ = 'timesheets'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False)
    week_id = Column(String(8), nullable=False)
    week_start = Column(DateTime, nullable=False)
    week_end = Column(DateTime, nullable=False)

    # Cached totals
    total_seconds = Column(Integer, nullable=False, default=0)
    total_hours = Column(Numeric(8, 2, asdecimal=False), nullable=False, default=0)
    entry_count = Column(Integer, nullable=False, default=0)

    # Approval workflow
    status = Column(
        SQLEnum(TimesheetStatus, values_callable=_enum_values, name="timesheet_status"),
        nullable=False,
        default=TimesheetStatus.DRAFT,
    )
    rejection_reason = Column(Text)
    submitted_at = Column(DateTime)
    approved_at = Column(DateTime)
    approved_by = Column(String(64))
    reviewed_by = Column(String(64))

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint('user_id', 'week_id', name='uq_timesheets_user_week'),
        CheckConstraint('total_seconds >= 0', name='ck_timesheets_total'),
        Index('idx_timesheets_status_submitted', 'status', 'submitted_at'),
    )
