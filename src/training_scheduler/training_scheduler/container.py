from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.mysql_analytics_repository import MySQLAnalyticsRepository
from .analytics.repository import AnalyticsRepository
from .analytics.service import AnalyticsService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .categories.mysql_category_repository import MySQLCategoryRepository
from .categories.repository import CategoryRepository
from .categories.service import CategoryService
from .database.connection import DBConfig, DatabaseConnection
from .sessions.mysql_session_repository import MySQLTrainingSessionRepository
from .sessions.registration import RegistrationService
from .sessions.repository import TrainingSessionRepository
from .sessions.service import TrainingSessionService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    sessions_repo: TrainingSessionRepository
    attendance_repo: AttendanceRepository
    categories_repo: CategoryRepository
    analytics_repo: AnalyticsRepository

    auth_service: AuthService
    user_service: UserService
    session_service: TrainingSessionService
    registration_service: RegistrationService
    attendance_service: AttendanceService
    category_service: CategoryService
    analytics_service: AnalyticsService


def wire_container(
    *,
    users_repo: UserRepository,
    sessions_repo: TrainingSessionRepository,
    attendance_repo: AttendanceRepository,
    categories_repo: CategoryRepository,
    analytics_repo: AnalyticsRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        users_repo=users_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        categories_repo=categories_repo,
        analytics_repo=analytics_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        session_service=TrainingSessionService(sessions_repo, categories_repo),
        registration_service=RegistrationService(sessions_repo, attendance_repo),
        attendance_service=AttendanceService(attendance_repo, sessions_repo),
        category_service=CategoryService(categories_repo),
        analytics_service=AnalyticsService(analytics_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    return wire_container(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        sessions_repo=MySQLTrainingSessionRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        categories_repo=MySQLCategoryRepository(conn),
        analytics_repo=MySQLAnalyticsRepository(conn),
    )
