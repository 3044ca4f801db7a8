"""SQLite dialect renderer."""
from __future__ import annotations

from buildql.render.base import PlaceholderRenderer


class SQLiteRenderer(PlaceholderRenderer):
    """Renders templates with ``?`` placeholders.

    Parameter style: ``qmark`` – compatible with Python's built-in
    ``sqlite3`` positional execution (``cursor.execute(sql, tuple)``).

    Note: every ``?`` consumes the next value, so a parameter used twice is
    bound twice; :meth:`RenderedQuery.bind` handles the repetition.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def placeholder(self, position: int) -> str:
        return "?"
