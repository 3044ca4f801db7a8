"""buildQL rendering layer: canonical template → dialect-specific SQL."""
from buildql.render.base import PlaceholderRenderer, RenderedQuery
from buildql.render.mysql import MySQLRenderer
from buildql.render.postgres import PostgresRenderer
from buildql.render.registry import RendererFactory
from buildql.render.sqlite import SQLiteRenderer

__all__ = [
    "PlaceholderRenderer",
    "RenderedQuery",
    "RendererFactory",
    "MySQLRenderer",
    "PostgresRenderer",
    "SQLiteRenderer",
]
