"""Registry configuration.

:class:`RegistryConfig` selects the dialect the registry renders for.  It can
be built directly, from the process environment, or from a database URL::

    from buildql import RegistryConfig, create_build_service

    config = RegistryConfig.from_url("postgresql+psycopg://ci@db/vela")
    service = create_build_service(config)

Resolving a URL uses SQLAlchemy's URL parser.  Install the optional
dependency before calling :meth:`RegistryConfig.from_url`::

    pip install "buildql[sqlalchemy]"
"""
from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from buildql.errors import ConfigError

#: Environment variable read by :meth:`RegistryConfig.from_env`.
DIALECT_ENV_VAR = "BUILDQL_DIALECT"

#: Default dialect tag.
DEFAULT_TARGET = "postgres"

# SQLAlchemy backend names mapped to buildQL dialect tags.
_BACKEND_TARGETS: dict[str, str] = {
    "postgresql": "postgres",
    "postgres": "postgres",
    "sqlite": "sqlite",
    "mysql": "mysql",
    "mariadb": "mysql",
}


class RegistryConfig(BaseModel):
    """Construction-time settings for a :class:`~buildql.service.BuildService`.

    Attributes:
        target: Dialect tag the registry renders placeholders for
            (``'postgres'``, ``'sqlite'`` or ``'mysql'`` out of the box).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str = DEFAULT_TARGET

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RegistryConfig":
        """Read the dialect tag from ``BUILDQL_DIALECT``.

        Args:
            environ: Mapping to read from; defaults to ``os.environ``.

        Returns:
            A config for the named dialect, or the default when unset.
        """
        if environ is None:
            environ = os.environ
        target = environ.get(DIALECT_ENV_VAR, "").strip().lower()
        return cls(target=target or DEFAULT_TARGET)

    @classmethod
    def from_url(cls, url: str) -> "RegistryConfig":
        """Derive the dialect tag from a SQLAlchemy database URL.

        Driver suffixes are ignored, so ``postgresql+psycopg://...`` and
        ``postgresql://...`` both resolve to ``'postgres'``.

        Args:
            url: Database URL, e.g. ``'sqlite:///vela.db'``.

        Returns:
            A config targeting the URL's backend.

        Raises:
            ConfigError: If the URL cannot be parsed or names a backend with
                no known dialect tag.
        """
        from sqlalchemy.engine import make_url
        from sqlalchemy.exc import ArgumentError

        try:
            backend = make_url(url).get_backend_name()
        except ArgumentError as exc:
            raise ConfigError(f"Cannot parse database URL: {exc}", value=url) from exc

        target = _BACKEND_TARGETS.get(backend)
        if target is None:
            raise ConfigError(
                f"No dialect known for database backend '{backend}'. "
                f"Known backends: {sorted(_BACKEND_TARGETS)}.",
                value=url,
            )
        return cls(target=target)
