from hr_payroll.database.bootstrap import DEFAULT_SCHEMA_PATH, iter_sql_statements, prepare_schema_sql


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;y\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'SELECT "x;y"',
        "SELECT 1",
    ]


def test_prepare_drops_database_statements_and_comments():
    sql = "-- header\nCREATE DATABASE IF NOT EXISTS foo;\nUSE foo;\nCREATE TABLE a (id INT);\n"

    assert prepare_schema_sql(sql) == ["CREATE TABLE a (id INT)"]


def test_bundled_schema_defines_both_tables():
    statements = prepare_schema_sql(DEFAULT_SCHEMA_PATH.read_text(encoding="utf-8"))
    joined = "\n".join(statements)

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    assert "employees" in joined
    assert "attendance_records" in joined
    assert "UNIQUE KEY uq_attendance_employee_day (employee_id, work_date)" in joined
