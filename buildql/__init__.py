"""buildQL – the query surface for a CI system's builds table.

Write Queries Once. Render Them Everywhere.

Public API
----------
``create_build_service``
    Render every build query for one dialect and return the immutable
    registry that publishes them.

Re-exported types
-----------------
``BuildService``, ``RenderedQuery``, ``BuildOperation``, ``OperationClass``,
``ResultShape``, ``QueryTemplate``, ``RegistryConfig``, and all error classes.

Extensibility
-------------
New placeholder styles can be registered via::

    from buildql.render.registry import RendererFactory

    @RendererFactory.register("oracle")
    class OracleRenderer(PlaceholderRenderer):
        ...

After registration, ``create_build_service("oracle")`` picks it up
automatically.
"""

from __future__ import annotations

from collections.abc import Iterable

from buildql.catalog.builds import BUILD_TEMPLATES
from buildql.errors import (
    ArityError,
    BuildQLError,
    ConfigError,
    NotFoundError,
    TemplateError,
    UnsupportedDialectError,
)
from buildql.render.base import PlaceholderRenderer, RenderedQuery
from buildql.render.mysql import MySQLRenderer
from buildql.render.postgres import PostgresRenderer
from buildql.render.registry import RendererFactory
from buildql.render.sqlite import SQLiteRenderer
from buildql.schema.config import RegistryConfig
from buildql.schema.operations import BuildOperation, OperationClass, ResultShape
from buildql.schema.template import QueryTemplate
from buildql.service import BuildService

# ---------------------------------------------------------------------------
# Register built-in renderers with RendererFactory
# ---------------------------------------------------------------------------

RendererFactory.register_class("postgres", PostgresRenderer)
RendererFactory.register_class("sqlite", SQLiteRenderer)
RendererFactory.register_class("mysql", MySQLRenderer)

__all__ = [
    # Core pipeline
    "create_build_service",
    # Registry
    "BuildService",
    "RenderedQuery",
    # Schema types
    "BuildOperation",
    "OperationClass",
    "ResultShape",
    "QueryTemplate",
    "RegistryConfig",
    # Rendering
    "PlaceholderRenderer",
    "RendererFactory",
    "MySQLRenderer",
    "PostgresRenderer",
    "SQLiteRenderer",
    # Errors
    "BuildQLError",
    "NotFoundError",
    "UnsupportedDialectError",
    "TemplateError",
    "ArityError",
    "ConfigError",
]


def create_build_service(
    config: RegistryConfig | str | None = None,
    templates: Iterable[QueryTemplate] = BUILD_TEMPLATES,
    *,
    partial: bool = False,
) -> BuildService:
    """Render the build queries for a dialect and return the registry.

    This is the main entry point for buildQL::

        service = buildql.create_build_service("postgres")
        query = service.lookup("list", "org")
        rows = await conn.fetch(query.sql, *query.bind("acme", 10, 0))

    Args:
        config: A :class:`RegistryConfig`, a bare dialect tag, or ``None``
            for ``RegistryConfig()`` (PostgreSQL).
        templates: Canonical templates to publish; defaults to the builds
            catalog.
        partial: Accept ``templates`` that cover only some operations.

    Returns:
        An immutable :class:`BuildService`.

    Raises:
        UnsupportedDialectError: If no renderer is registered for the target.
        TemplateError: If a template's placeholders and parameters disagree,
            an operation has two templates, or (unless ``partial``) none.
    """
    if config is None:
        config = RegistryConfig()
    elif isinstance(config, str):
        config = RegistryConfig(target=config)

    renderer = RendererFactory.create(config.target)
    return BuildService.from_templates(templates, renderer, partial=partial)
