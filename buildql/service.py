"""The build query registry.

:class:`BuildService` is an immutable value holding every build query,
rendered for one dialect and partitioned into ``list``, ``select`` and
``delete`` classes.  Build it once at startup with
:func:`buildql.create_build_service` and hand it to whatever executes
queries::

    service = create_build_service("sqlite")
    query = service.lookup("select", "countByRepo")
    (count,) = conn.execute(query.sql, query.bind(repo_id)).fetchone()

Nothing here is global: tests and callers can build as many services, for as
many dialects, as they need.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from buildql.errors import NotFoundError, TemplateError
from buildql.render.base import PlaceholderRenderer, RenderedQuery
from buildql.schema.operations import BuildOperation, OperationClass
from buildql.schema.template import QueryTemplate

log = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class BuildService:
    """Rendered build queries for a single dialect.

    Attributes:
        dialect: The dialect tag every query was rendered for.
        list: ``list`` queries by short key (``'repo'``, ``'orgByEvent'``...).
        select: ``select`` queries by short key.
        delete: ``delete`` queries by short key.
    """

    dialect: str
    list: Mapping[str, RenderedQuery]
    select: Mapping[str, RenderedQuery]
    delete: Mapping[str, RenderedQuery]

    @classmethod
    def from_templates(
        cls,
        templates: Iterable[QueryTemplate],
        renderer: PlaceholderRenderer,
        *,
        partial: bool = False,
    ) -> "BuildService":
        """Render ``templates`` with ``renderer`` and file them by class.

        Args:
            templates: Canonical templates, one per operation.
            renderer: Renderer for the target dialect.
            partial: Accept a catalog that covers only some operations.
                By default every :class:`BuildOperation` must be present.

        Returns:
            A new, immutable :class:`BuildService`.

        Raises:
            TemplateError: If any template fails to render, two templates
                implement the same operation, or (unless ``partial``) an
                operation has no template.
        """
        groups: dict[OperationClass, dict[str, RenderedQuery]] = {
            op_class: {} for op_class in OperationClass
        }
        for template in templates:
            op = template.operation
            group = groups[op.operation_class]
            if op.key in group:
                raise TemplateError(
                    f"'{op.value}' has more than one template.", operation=op.value
                )
            group[op.key] = renderer.render(template)

        if not partial:
            missing = [
                op.value for op in BuildOperation if op.key not in groups[op.operation_class]
            ]
            if missing:
                raise TemplateError(f"No template for {missing}.")

        service = cls(
            dialect=renderer.dialect_name,
            list=MappingProxyType(groups[OperationClass.LIST]),
            select=MappingProxyType(groups[OperationClass.SELECT]),
            delete=MappingProxyType(groups[OperationClass.DELETE]),
        )
        log.debug(
            "Built %s service for dialect '%s' with %d queries",
            cls.__name__,
            service.dialect,
            len(service),
        )
        return service

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, operation_class: OperationClass | str, key: str) -> RenderedQuery:
        """Return the query published under ``operation_class`` / ``key``.

        Args:
            operation_class: ``'list'``, ``'select'`` or ``'delete'`` in any
                case (``'List'`` works too), or the matching
                :class:`OperationClass`.
            key: Short key within the class, e.g. ``'countByOrg'``.
                Keys are case-sensitive.

        Returns:
            The rendered query.

        Raises:
            NotFoundError: If the class or key is not published.
        """
        try:
            op_class = OperationClass(operation_class.lower())
        except (AttributeError, ValueError):
            raise NotFoundError(str(operation_class), key) from None

        queries = self._group(op_class)
        try:
            return queries[key]
        except KeyError:
            raise NotFoundError(op_class.value, key, sorted(queries)) from None

    def get(self, operation: BuildOperation | str) -> RenderedQuery:
        """Return the query for a :class:`BuildOperation` or its dotted key.

        Raises:
            NotFoundError: If ``operation`` is a string that names no query.
        """
        if isinstance(operation, BuildOperation):
            return self.lookup(operation.operation_class, operation.key)
        op_class, _, key = str(operation).partition(".")
        return self.lookup(op_class, key)

    def __getitem__(self, operation: BuildOperation | str) -> RenderedQuery:
        return self.get(operation)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def operations(self) -> list[BuildOperation]:
        """Return every operation this service publishes."""
        return [query.operation for query in self]

    def __iter__(self) -> Iterator[RenderedQuery]:
        for op_class in OperationClass:
            yield from self._group(op_class).values()

    def __len__(self) -> int:
        return len(self.list) + len(self.select) + len(self.delete)

    def _group(self, op_class: OperationClass) -> Mapping[str, RenderedQuery]:
        if op_class is OperationClass.LIST:
            return self.list
        if op_class is OperationClass.SELECT:
            return self.select
        return self.delete
