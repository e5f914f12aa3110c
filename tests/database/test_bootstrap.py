from pathlib import Path

from training_scheduler.database.bootstrap import _strip_create_db_and_use, iter_sql_statements

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_splitter_handles_escaped_quotes():
    sql = "INSERT INTO t VALUES ('it\\'s; fine');"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('it\\'s; fine')"]


def test_schema_declares_attendance_uniqueness():
    sql = _strip_create_db_and_use((REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8"))
    statements = list(iter_sql_statements(sql))

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    attendance = next(s for s in statements if "attendance_records" in s.split("(")[0])
    assert "UNIQUE KEY uq_attendance_session_user (training_session_id, user_id)" in attendance
