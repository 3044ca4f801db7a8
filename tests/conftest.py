"""Shared pytest fixtures for buildQL unit and integration tests."""
from __future__ import annotations

import sqlite3
from collections.abc import Iterator

import pytest

import buildql
from buildql.service import BuildService
from tests.fixtures import connect

ALL_TARGETS = ["postgres", "sqlite", "mysql"]


@pytest.fixture(scope="session")
def pg_service() -> BuildService:
    """Ordinal (``$N``) rendering."""
    return buildql.create_build_service("postgres")


@pytest.fixture(scope="session")
def sq_service() -> BuildService:
    """``?`` rendering."""
    return buildql.create_build_service("sqlite")


@pytest.fixture(scope="session")
def my_service() -> BuildService:
    """``%s`` rendering."""
    return buildql.create_build_service("mysql")


@pytest.fixture(scope="session", params=ALL_TARGETS)
def service(request: pytest.FixtureRequest) -> BuildService:
    """Each built-in dialect in turn."""
    return buildql.create_build_service(request.param)


@pytest.fixture()
def db() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database seeded with the sample repos and builds."""
    conn = connect()
    yield conn
    conn.close()
