"""Schema and seed steps. Nothing here runs unless explicitly invoked."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from ..auth.credentials import CredentialVerifier
from ..core.constants import (
    DEFAULT_ADMIN_CODE,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_SALARY,
    DEFAULT_ADMIN_USERNAME,
)
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def prepare_schema_sql(sql: str) -> list[str]:
    return list(iter_sql_statements(_strip_create_db_and_use(_strip_line_comments(sql))))


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = DEFAULT_SCHEMA_PATH) -> None:
    ensure_database_exists(db_config)
    statements = prepare_schema_sql(Path(schema_path).read_text(encoding="utf-8"))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema applied (%d statements)", len(statements))


def ensure_default_admin(db_config: dict, verifier: CredentialVerifier) -> None:
    """Insert the default admin, or restore its role and password if it exists."""

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute(
            """
            INSERT INTO employees (emp_code, name, username, password, role, salary)
            VALUES (%s, %s, %s, %s, 'admin', %s)
            ON DUPLICATE KEY UPDATE password=VALUES(password), role='admin'
            """,
            (
                DEFAULT_ADMIN_CODE,
                "System Admin",
                DEFAULT_ADMIN_USERNAME,
                verifier.encode(DEFAULT_ADMIN_PASSWORD),
                DEFAULT_ADMIN_SALARY,
            ),
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("default admin ready (username=%s)", DEFAULT_ADMIN_USERNAME)


def reset_data(db_config: dict) -> None:
    """Delete every attendance and employee row. Destructive; opt-in only."""

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("DELETE FROM attendance_records")
        cur.execute("DELETE FROM employees")
        conn.commit()
    finally:
        conn.close()
    logger.warning("all employee and attendance data deleted")


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
