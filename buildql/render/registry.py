"""Renderer registry (Open/Closed Principle).

``RendererFactory``
    Central registry for :class:`~buildql.render.base.PlaceholderRenderer`
    implementations.  Register a renderer once; :func:`buildql.create_build_service`
    looks it up by dialect tag.

Usage::

    from buildql.render.registry import RendererFactory

    @RendererFactory.register("oracle")
    class OracleRenderer(PlaceholderRenderer):
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

from buildql.errors import UnsupportedDialectError
from buildql.render.base import PlaceholderRenderer

log = logging.getLogger(__name__)


class RendererFactory:
    """Registry mapping dialect tags to :class:`PlaceholderRenderer` classes.

    Callers register a renderer class once; the registry creates instances
    on demand via :meth:`create`.

    Example::

        @RendererFactory.register("oracle")
        class OracleRenderer(PlaceholderRenderer):
            ...

        renderer = RendererFactory.create("oracle")
    """

    _renderers: ClassVar[dict[str, type[PlaceholderRenderer]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[PlaceholderRenderer]], type[PlaceholderRenderer]]:
        """Decorator that registers a renderer class under ``name``.

        Args:
            name: The dialect tag (e.g. ``"postgres"``). Tags are matched
                case-insensitively; ``"Postgres"`` and ``"postgres"`` are one tag.

        Returns:
            A decorator that registers and returns the renderer class.
        """

        def decorator(renderer_cls: type[PlaceholderRenderer]) -> type[PlaceholderRenderer]:
            cls.register_class(name, renderer_cls)
            return renderer_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, renderer_cls: type[PlaceholderRenderer]) -> None:
        """Register a renderer class without using the decorator form.

        Args:
            name: The dialect tag.
            renderer_cls: The :class:`PlaceholderRenderer` subclass to register.
        """
        tag = cls._normalise(name)
        log.debug("Registering renderer %s for dialect '%s'", renderer_cls.__name__, tag)
        cls._renderers[tag] = renderer_cls

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove the renderer registered for ``name``, if any."""
        cls._renderers.pop(cls._normalise(name), None)

    @classmethod
    def create(cls, name: str) -> PlaceholderRenderer:
        """Instantiate the renderer registered for ``name``.

        Args:
            name: The dialect tag.

        Returns:
            A fresh :class:`PlaceholderRenderer` instance.

        Raises:
            UnsupportedDialectError: If no renderer is registered for ``name``.
        """
        renderer_cls = cls._renderers.get(cls._normalise(name))
        if renderer_cls is None:
            raise UnsupportedDialectError(name, sorted(cls._renderers))
        return renderer_cls()

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect tags."""
        return sorted(cls._renderers)

    @staticmethod
    def _normalise(name: str) -> str:
        # tags match case-insensitively, ignoring surrounding whitespace
        return name.strip().lower()
