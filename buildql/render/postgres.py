"""PostgreSQL dialect renderer."""
from __future__ import annotations

from buildql.render.base import PlaceholderRenderer


class PostgresRenderer(PlaceholderRenderer):
    """Renders templates with ordinal ``$1, $2, ...`` placeholders.

    Parameter style: the server-side ordinal style used by ``asyncpg`` and by
    PostgreSQL prepared statements.  A parameter that appears twice in the
    template is written with the same ordinal both times, so callers always
    bind exactly one value per declared parameter.
    """

    reuses_positions = True

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def placeholder(self, position: int) -> str:
        return f"${position}"
