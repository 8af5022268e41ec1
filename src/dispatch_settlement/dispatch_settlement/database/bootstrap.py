"""Apply database/schema.sql and database/seed.sql to the configured MySQL target."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, Optional

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

_DEFAULTS = {"host": "localhost", "port": 3306, "user": "root", "password": "", "database": "dispatch_settlement"}

# schema.sql may pin a database name; the configured one always wins.
_PINNED_DB = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$")
_LINE_COMMENT = re.compile(r"(?m)^\s*--.*$")


def _target(db_config: dict) -> DBConfig:
    return DBConfig.from_dict({**_DEFAULTS, **db_config})


def _clean(sql: str) -> str:
    return _LINE_COMMENT.sub("", _PINNED_DB.sub("", sql))


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' outside quoted literals."""

    start = 0
    quote: Optional[str] = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if ch == "\\":
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            statement = sql[start:i].strip()
            if statement:
                yield statement
            start = i + 1
        i += 1

    statement = sql[start:].strip()
    if statement:
        yield statement


def _connect(target: DBConfig, *, with_database: bool = True):
    params = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "use_pure": True,
    }
    if with_database:
        params["database"] = target.database
    return mysql.connector.connect(**params)


def _execute_script(db_config: dict, path: Path) -> int:
    statements = list(iter_sql_statements(_clean(path.read_text(encoding="utf-8"))))
    conn = _connect(_target(db_config))
    try:
        cur = conn.cursor()
        for statement in statements:
            cur.execute(statement)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %s (%d statements)", path.name, len(statements))
    return len(statements)


def ensure_database_exists(db_config: dict) -> None:
    target = _target(db_config)
    conn = _connect(target, with_database=False)
    try:
        conn.cursor().execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> int:
    ensure_database_exists(db_config)
    return _execute_script(db_config, Path(schema_path))


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> int:
    return _execute_script(db_config, Path(seed_path))


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(_target(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
