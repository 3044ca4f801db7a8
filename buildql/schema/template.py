"""Canonical query templates.

A :class:`QueryTemplate` is written once, in a dialect-neutral form that uses
named placeholders (``:repo_id``), and declares the order its parameters are
bound in.  Renderers (:mod:`buildql.render`) turn it into one dialect's
positional placeholder style.

Placeholder scanning skips quoted string literals (``'running'``), quoted
identifiers and the PostgreSQL ``::`` cast operator, so none of those are
ever mistaken for parameters.
"""
from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from buildql.schema.operations import BuildOperation, ResultShape

_TOKEN_RE = re.compile(
    r"""
      '(?:[^']|'')*'                    # string literal
    | "(?:[^"]|"")*"                    # quoted identifier
    | ::                                # cast operator
    | :(?P<name>[A-Za-z_][A-Za-z0-9_]*) # named placeholder
    """,
    re.VERBOSE,
)


def split_placeholders(sql: str) -> list[str]:
    """Split ``sql`` around its named placeholders.

    The result alternates text and parameter names, starting and ending with
    text (possibly empty), in the same way :func:`re.split` does with one
    capturing group::

        >>> split_placeholders("WHERE id = :id LIMIT 1")
        ['WHERE id = ', 'id', ' LIMIT 1']

    Args:
        sql: Canonical SQL text.

    Returns:
        ``[text, name, text, name, ..., text]``.
    """
    parts: list[str] = []
    pos = 0
    for match in _TOKEN_RE.finditer(sql):
        name = match.group("name")
        if name is None:
            continue
        parts.append(sql[pos : match.start()])
        parts.append(name)
        pos = match.end()
    parts.append(sql[pos:])
    return parts


class QueryTemplate(BaseModel):
    """One logical query in canonical form.

    Attributes:
        operation: The operation this template implements.
        sql: SQL text with ``:name`` placeholders.
        params: Parameter names in the order callers supply values.
        result: What executing the query yields.
        description: Short human-readable summary.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    operation: BuildOperation
    sql: str
    params: tuple[str, ...] = Field(default_factory=tuple)
    result: ResultShape
    description: str = ""

    @property
    def arity(self) -> int:
        """Number of values a caller binds."""
        return len(self.params)

    def placeholder_names(self) -> list[str]:
        """Parameter names in order of appearance (repeats included)."""
        return split_placeholders(self.sql)[1::2]
