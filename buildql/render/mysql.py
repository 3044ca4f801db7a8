"""MySQL dialect renderer."""
from __future__ import annotations

from buildql.render.base import PlaceholderRenderer


class MySQLRenderer(PlaceholderRenderer):
    """Renders templates with ``%s`` placeholders.

    Parameter style: ``format`` – compatible with ``PyMySQL`` and
    ``mysql-connector-python`` positional execution.

    Note: those drivers apply ``%`` formatting to the whole statement, so a
    literal ``%`` elsewhere in the SQL (e.g. in a ``LIKE`` pattern) is
    doubled.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def placeholder(self, position: int) -> str:
        return "%s"

    def escape_text(self, text: str) -> str:
        return text.replace("%", "%%")
