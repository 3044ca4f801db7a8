"""Renderer abstractions: RenderedQuery and the PlaceholderRenderer ABC.

The Template Method pattern (GoF) is used:
- ``PlaceholderRenderer.render`` defines the algorithm skeleton: split the
  canonical template around its placeholders, check them against the
  declared parameters, and reassemble the text.
- ``PostgresRenderer``, ``SQLiteRenderer`` and ``MySQLRenderer`` override the
  dialect-specific steps (placeholder text, whether a repeated parameter
  reuses its position, escaping of the surrounding text).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from buildql.errors import ArityError, TemplateError
from buildql.schema.operations import BuildOperation, ResultShape
from buildql.schema.template import QueryTemplate, split_placeholders


@dataclass(frozen=True)
class RenderedQuery:
    """A query ready for a database driver.

    Attributes:
        operation: The operation this query implements.
        sql: Dialect-specific SQL text with positional placeholders.
        params: Parameter names in the order callers supply values.
        bind_order: Parameter names in the order the driver consumes values.
            Equal to ``params`` for ordinal dialects; follows placeholder
            occurrences for ``?`` and ``%s`` dialects.
        result: What executing the query yields.
        dialect: The dialect tag the SQL was rendered for.
    """

    operation: BuildOperation
    sql: str
    params: tuple[str, ...]
    bind_order: tuple[str, ...]
    result: ResultShape
    dialect: str

    @property
    def arity(self) -> int:
        """Number of values a caller binds."""
        return len(self.params)

    def bind(self, *args: Any, **kwargs: Any) -> tuple[Any, ...]:
        """Arrange caller values into the driver's positional parameters.

        Values are given either positionally, in ``params`` order, or by
        name -- not both::

            q = service.lookup("list", "repo")
            cursor.execute(q.sql, q.bind(repo_id, 10, 0))
            cursor.execute(q.sql, q.bind(repo_id=repo_id, limit=10, offset=0))

        Args:
            *args: Values in declared parameter order.
            **kwargs: Values keyed by parameter name.

        Returns:
            A tuple to pass straight to ``cursor.execute``.

        Raises:
            ArityError: If the values do not cover the parameters exactly.
        """
        op = self.operation.value
        if args and kwargs:
            raise ArityError(op, self.arity, len(args) + len(kwargs))
        if kwargs:
            missing = [name for name in self.params if name not in kwargs]
            unexpected = sorted(set(kwargs) - set(self.params))
            if missing or unexpected:
                raise ArityError(
                    op, self.arity, len(kwargs), missing=missing, unexpected=unexpected
                )
            values = kwargs
        else:
            if len(args) != self.arity:
                raise ArityError(op, self.arity, len(args))
            values = dict(zip(self.params, args))
        return tuple(values[name] for name in self.bind_order)


class PlaceholderRenderer(ABC):
    """Abstract base for dialect-specific placeholder renderers.

    Subclasses implement the dialect-specific methods; :meth:`render` uses
    them via the Template Method pattern.  Renderers hold no state and may
    be shared freely.
    """

    #: Whether every occurrence of a parameter reuses the same placeholder
    #: (``$1 ... $1``) instead of taking the next position (``? ... ?``).
    reuses_positions: bool = False

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect tag (e.g. ``'postgres'``)."""

    @abstractmethod
    def placeholder(self, position: int) -> str:
        """Return the placeholder text for a 1-based parameter position.

        Args:
            position: 1-based position of the value in the bound tuple.

        Returns:
            Dialect-specific placeholder string.
        """

    def escape_text(self, text: str) -> str:
        """Escape non-placeholder SQL text for the driver.

        The default returns ``text`` unchanged.  Drivers that run the query
        string through ``%`` formatting override this.
        """
        return text

    def render(self, template: QueryTemplate) -> RenderedQuery:
        """Render a canonical template into this dialect.

        Args:
            template: The canonical template.

        Returns:
            The dialect-specific :class:`RenderedQuery`.

        Raises:
            TemplateError: If the template's placeholders and declared
                parameters disagree.
        """
        self._check(template)
        parts = split_placeholders(template.sql)
        out: list[str] = []
        bind_order: list[str] = []
        for i, part in enumerate(parts):
            if i % 2 == 0:
                out.append(self.escape_text(part))
                continue
            if self.reuses_positions:
                out.append(self.placeholder(template.params.index(part) + 1))
            else:
                bind_order.append(part)
                out.append(self.placeholder(len(bind_order)))

        return RenderedQuery(
            operation=template.operation,
            sql="".join(out).strip(),
            params=template.params,
            bind_order=template.params if self.reuses_positions else tuple(bind_order),
            result=template.result,
            dialect=self.dialect_name,
        )

    # ------------------------------------------------------------------
    # Internal validation
    # ------------------------------------------------------------------

    @staticmethod
    def _check(template: QueryTemplate) -> None:
        """Raise :class:`TemplateError` when placeholders and ``params`` differ.

        Rules
        -----
        Declared parameter names are unique.
            A duplicate would make positional binding ambiguous.

        Every placeholder is declared.
            An undeclared name has no value to bind.

        Every declared parameter is used.
            An unused name would shift every later positional value.
        """
        op = template.operation.value
        declared = template.params
        used = template.placeholder_names()

        duplicates = sorted({name for name in declared if declared.count(name) > 1})
        if duplicates:
            raise TemplateError(f"'{op}' declares {duplicates} more than once.", operation=op)

        undeclared = sorted(set(used) - set(declared))
        if undeclared:
            raise TemplateError(
                f"'{op}' uses undeclared parameter(s) {undeclared}.", operation=op
            )

        unused = [name for name in declared if name not in used]
        if unused:
            raise TemplateError(
                f"'{op}' declares parameter(s) {unused} that its SQL never uses.",
                operation=op,
            )
