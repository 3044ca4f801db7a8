"""Unit tests for RegistryConfig."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildql.errors import ConfigError
from buildql.schema.config import DIALECT_ENV_VAR, RegistryConfig


def test_defaults_to_postgres():
    assert RegistryConfig().target == "postgres"


def test_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        RegistryConfig(target="sqlite", colour="blue")  # type: ignore[call-arg]


def test_from_env():
    assert RegistryConfig.from_env({DIALECT_ENV_VAR: " SQLite "}).target == "sqlite"


def test_from_env_unset():
    assert RegistryConfig.from_env({}).target == "postgres"


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv(DIALECT_ENV_VAR, "mysql")
    assert RegistryConfig.from_env().target == "mysql"


@pytest.mark.parametrize(
    ("url", "target"),
    [
        ("postgresql+psycopg://ci:secret@db:5432/vela", "postgres"),
        ("postgresql://localhost/vela", "postgres"),
        ("sqlite:///vela.db", "sqlite"),
        ("sqlite://", "sqlite"),
        ("mysql+pymysql://ci@db/vela", "mysql"),
        ("mariadb://ci@db/vela", "mysql"),
    ],
)
def test_from_url(url, target):
    pytest.importorskip("sqlalchemy")
    assert RegistryConfig.from_url(url).target == target


def test_from_url_unknown_backend():
    pytest.importorskip("sqlalchemy")
    with pytest.raises(ConfigError) as exc_info:
        RegistryConfig.from_url("oracle://scott@db/orcl")
    assert exc_info.value.value == "oracle://scott@db/orcl"


def test_from_url_unparseable():
    pytest.importorskip("sqlalchemy")
    with pytest.raises(ConfigError, match="Cannot parse"):
        RegistryConfig.from_url("not a url")
