"""
Low-level database helpers (SQLite by default, Postgres when DATABASE_URL says so).
"""
from __future__ import annotations

import os
import sqlite3
from typing import Iterable

try:
    import psycopg
    from psycopg.rows import dict_row
except Exception as exc:  # pragma: no cover - required dependency
    raise RuntimeError("psycopg is required for Postgres") from exc


DEFAULT_DATABASE_URL = "sqlite:///sarkarijob.db"

# Errors raised by either driver; the store layer converts these into StoreFailure.
DRIVER_ERRORS = (sqlite3.Error, psycopg.Error)


def _resolve_database_url() -> str:
    url = os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
    if url.startswith("postgres://") or url.startswith("postgresql://"):
        return url
    if url.startswith("sqlite:///"):
        return url
    raise RuntimeError("DATABASE_URL must start with sqlite:///, postgres:// or postgresql://")


database_url = _resolve_database_url()


def dialect_for(url: str) -> str:
    return "sqlite" if url.startswith("sqlite:///") else "postgres"


def _sqlite_path(url: str) -> str:
    # sqlite:///relative.db -> relative.db, sqlite:////abs/path.db -> /abs/path.db
    return url[len("sqlite:///"):]


def _convert_qmarks(sql: str) -> str:
    if "?" not in sql:
        return sql
    return sql.replace("?", "%s")


class _CursorWrapper:
    def __init__(self, cursor, dialect: str):
        self._cursor = cursor
        self._dialect = dialect

    def execute(self, sql: str, params: Iterable | None = None):
        if self._dialect == "postgres":
            sql = _convert_qmarks(sql)
        if params is None:
            return self._cursor.execute(sql)
        return self._cursor.execute(sql, params)

    def executemany(self, sql: str, seq_of_params: Iterable):
        if self._dialect == "postgres":
            sql = _convert_qmarks(sql)
        return self._cursor.executemany(sql, seq_of_params)

    def fetchone(self):
        return self._cursor.fetchone()

    def fetchall(self):
        return self._cursor.fetchall()

    def __iter__(self):
        return iter(self._cursor)

    @property
    def rowcount(self):
        return getattr(self._cursor, "rowcount", 0)

    @property
    def description(self):
        return self._cursor.description


class _ConnWrapper:
    def __init__(self, conn, dialect: str):
        self._conn = conn
        self.dialect = dialect

    def cursor(self):
        return _CursorWrapper(self._conn.cursor(), self.dialect)

    def commit(self):
        return self._conn.commit()

    def rollback(self):
        return self._conn.rollback()

    def close(self):
        return self._conn.close()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def get_conn():
    """
    Return a DB connection for the configured DATABASE_URL.

    Rows come back as mappings on both dialects (sqlite3.Row / psycopg dict_row),
    so callers can use row["col"] and dict(row) without caring which one is live.
    """
    if dialect_for(database_url) == "postgres":
        conn = psycopg.connect(database_url, row_factory=dict_row)
        return _ConnWrapper(conn, "postgres")

    conn = sqlite3.connect(_sqlite_path(database_url))
    conn.row_factory = sqlite3.Row
    # SQLite's built-in lower() only folds ASCII; match Postgres for search.
    conn.create_function("lower", 1, _unicode_lower, deterministic=True)
    return _ConnWrapper(conn, "sqlite")
