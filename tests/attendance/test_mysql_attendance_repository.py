from __future__ import annotations

import pytest
from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from training_scheduler.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from training_scheduler.attendance.repository import RegistrationOutcome


class ScriptedCursor:
    """Answers fetchone() from a fixed list and records every statement."""

    def __init__(self, rows, insert_error=None):
        self.rows = list(rows)
        self.insert_error = insert_error
        self.statements = []
        self.rowcount = 0

    def execute(self, sql, params=None):
        self.statements.append(" ".join(sql.split()))
        if self.insert_error is not None and sql.strip().upper().startswith("INSERT"):
            raise self.insert_error
        self.rowcount = 1

    def fetchone(self):
        return self.rows.pop(0)

    def close(self):
        pass


class ScriptedConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.isolation_level = None
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def start_transaction(self, isolation_level=None):
        self.isolation_level = isolation_level

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class ScriptedFactory:
    def __init__(self, cursor):
        self.conn = ScriptedConnection(cursor)

    def connect(self):
        return self.conn


SESSION_ROW = {"session_id": 7, "max_participants": 2}
USER_ROW = {"user_id": 3}


def _register(rows, insert_error=None):
    cur = ScriptedCursor(rows, insert_error=insert_error)
    factory = ScriptedFactory(cur)
    outcome = MySQLAttendanceRepository(factory).register(session_id=7, user_id=3)
    return outcome, cur, factory.conn


def test_register_locks_session_row_first():
    outcome, cur, conn = _register([SESSION_ROW, USER_ROW, None, {"n": 0}])

    assert outcome == RegistrationOutcome.REGISTERED
    assert "FOR UPDATE" in cur.statements[0]
    assert "training_sessions" in cur.statements[0]
    assert cur.statements[-1].startswith("INSERT INTO attendance_records")
    assert conn.isolation_level == "READ COMMITTED"
    assert conn.committed and conn.closed


def test_register_existing_record_is_checked_before_count():
    outcome, cur, conn = _register([SESSION_ROW, USER_ROW, {"record_id": 11}])

    assert outcome == RegistrationOutcome.ALREADY_REGISTERED
    assert not any("COUNT(*)" in s for s in cur.statements)
    assert not any(s.startswith("INSERT") for s in cur.statements)


@pytest.mark.parametrize("taken", [2, 3])
def test_register_full_session(taken):
    outcome, cur, conn = _register([SESSION_ROW, USER_ROW, None, {"n": taken}])

    assert outcome == RegistrationOutcome.SESSION_FULL
    assert not any(s.startswith("INSERT") for s in cur.statements)


def test_register_duplicate_key_means_already_registered():
    dup = IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)

    outcome, cur, conn = _register([SESSION_ROW, USER_ROW, None, {"n": 0}], insert_error=dup)

    assert outcome == RegistrationOutcome.ALREADY_REGISTERED
    assert conn.committed
    assert not conn.rolled_back


def test_register_other_integrity_error_rolls_back():
    fk = IntegrityError(msg="Cannot add or update a child row", errno=errorcode.ER_NO_REFERENCED_ROW_2)

    factory = ScriptedFactory(ScriptedCursor([SESSION_ROW, USER_ROW, None, {"n": 0}], insert_error=fk))

    with pytest.raises(IntegrityError):
        MySQLAttendanceRepository(factory).register(session_id=7, user_id=3)
    assert factory.conn.rolled_back
    assert not factory.conn.committed


def test_register_missing_session():
    outcome, cur, conn = _register([None])

    assert outcome == RegistrationOutcome.SESSION_NOT_FOUND
    assert len(cur.statements) == 1


def test_register_missing_user():
    outcome, cur, conn = _register([SESSION_ROW, None])

    assert outcome == RegistrationOutcome.USER_NOT_FOUND
    assert "FROM users" in cur.statements[1]
    assert not any(s.startswith("INSERT") for s in cur.statements)
