"""Test fixtures: sample DDL, seed rows and helpers for running queries."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Literal

from buildql.render.base import RenderedQuery

_FIXTURES_DIR = Path(__file__).parent

#: ``(id, org, full_name)``
REPOS = [
    (1, "acme", "acme/api"),
    (2, "acme", "acme/web"),
    (3, "globex", "globex/cli"),
]

#: ``(id, repo_id, number, event, status, branch, created)``
#:
#: Ids interleave across acme's two repos so ordering by ``id`` and ordering
#: by ``number`` disagree.
BUILDS = [
    (1, 1, 1, "push", "success", "main", 1000),
    (2, 2, 1, "push", "failure", "main", 1100),
    (3, 1, 2, "pull_request", "running", "feature", 1200),
    (4, 1, 3, "push", "pending", "main", 1300),
    (5, 2, 2, "tag", "running", "main", 1400),
    (6, 3, 1, "push", "running", "main", 1500),
]


def load_ddl(target: Literal["sqlite"] = "sqlite") -> str:
    """Return the sample DDL SQL string for the given backend.

    Args:
        target: ``'sqlite'`` (the only backend shipped).

    Returns:
        DDL string ready to execute against the target backend.
    """
    filename = f"ddl_{target}.sql"
    return (_FIXTURES_DIR / filename).read_text()


def connect(
    repos: Iterable[tuple] = REPOS,
    builds: Iterable[tuple] = BUILDS,
) -> sqlite3.Connection:
    """Open an in-memory database holding the sample schema and rows."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript(load_ddl("sqlite"))
    conn.executemany("INSERT INTO repos VALUES (?,?,?)", list(repos))
    conn.executemany("INSERT INTO builds VALUES (?,?,?,?,?,?,?)", list(builds))
    conn.commit()
    return conn


def execute(conn: sqlite3.Connection, query: RenderedQuery, *args: Any) -> sqlite3.Cursor:
    """Run a rendered query against SQLite.

    ``?`` renderings bind a tuple.  ``$N`` renderings are valid SQLite named
    parameters, bound by their ordinal (``{"1": ..., "2": ...}``).
    """
    values = query.bind(*args)
    if query.dialect == "postgres":
        return conn.execute(query.sql, {str(i): v for i, v in enumerate(values, start=1)})
    return conn.execute(query.sql, values)
