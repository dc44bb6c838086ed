from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .core.constants import DEFAULT_TIMEZONE, LEAVE_BADGE_TTL_SECONDS, TIMEZONE_CACHE_TTL_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .duty.mysql_duty_repository import MySQLDutyRepository
from .leaves.badge import LeaveBadgeCounter
from .leaves.events import LeaveEventChannel
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.service import LeaveService
from .recap.service import RecapService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.service import TimezoneService
from .tukin.mysql_tukin_repository import MySQLTukinRepository
from .tukin.service import TukinService
from .users.mysql_user_repository import MySQLUserRepository
from .workdays.mysql_calendar_repository import MySQLCalendarRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    calendar_repo: MySQLCalendarRepository
    attendance_repo: MySQLAttendanceRepository
    leaves_repo: MySQLLeaveRepository
    duty_repo: MySQLDutyRepository
    settings_repo: MySQLSettingsRepository
    tukin_repo: MySQLTukinRepository
    users_repo: MySQLUserRepository

    leave_events: LeaveEventChannel
    timezone_service: TimezoneService
    recap_service: RecapService
    tukin_service: TukinService
    leave_service: LeaveService
    leave_badge: LeaveBadgeCounter


def build_container(
    *,
    db_config: dict,
    default_timezone: str = DEFAULT_TIMEZONE,
    timezone_ttl_seconds: int = TIMEZONE_CACHE_TTL_SECONDS,
    badge_ttl_seconds: int = LEAVE_BADGE_TTL_SECONDS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    calendar_repo = MySQLCalendarRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    duty_repo = MySQLDutyRepository(conn)
    settings_repo = MySQLSettingsRepository(conn)
    tukin_repo = MySQLTukinRepository(conn)
    users_repo = MySQLUserRepository(conn)

    leave_events = LeaveEventChannel()
    timezone_service = TimezoneService(
        settings_repo,
        default_timezone=default_timezone,
        ttl_seconds=timezone_ttl_seconds,
    )
    recap_service = RecapService(calendar_repo, attendance_repo, leaves_repo, duty_repo, timezone_service)
    tukin_service = TukinService(tukin_repo, timezone_service)
    leave_service = LeaveService(leaves_repo, leave_events)
    leave_badge = LeaveBadgeCounter(
        leaves_repo,
        leave_events,
        today_provider=timezone_service.today,
        ttl_seconds=badge_ttl_seconds,
    )

    return Container(
        conn=conn,
        calendar_repo=calendar_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        duty_repo=duty_repo,
        settings_repo=settings_repo,
        tukin_repo=tukin_repo,
        users_repo=users_repo,
        leave_events=leave_events,
        timezone_service=timezone_service,
        recap_service=recap_service,
        tukin_service=tukin_service,
        leave_service=leave_service,
        leave_badge=leave_badge,
    )
