"""Custom exception hierarchy for buildQL.

All public errors inherit from :class:`BuildQLError` so callers can catch the
base class for any buildQL-specific failure.  Every error here describes a
wiring or configuration mistake; data-level failures (no rows, constraint
violations, lost connections) come from the database driver, never from
buildQL.
"""
from __future__ import annotations


class BuildQLError(Exception):
    """Base exception for all buildQL errors."""


class NotFoundError(BuildQLError):
    """Raised when a registry lookup names an unknown operation.

    Args:
        operation_class: The requested operation class (``'list'``,
            ``'select'`` or ``'delete'``).
        key: The requested key within that class.
        available: Keys published for the class (empty when the class
            itself is unknown).
    """

    def __init__(
        self,
        operation_class: str,
        key: str,
        available: list[str] | None = None,
    ) -> None:
        self.operation_class = operation_class
        self.key = key
        self.available: list[str] = available or []
        if self.available:
            message = (
                f"No '{operation_class}' query named '{key}'. "
                f"Available: {self.available}."
            )
        else:
            message = f"Unknown operation class '{operation_class}'."
        super().__init__(message)


class UnsupportedDialectError(BuildQLError):
    """Raised when no placeholder renderer is registered for a dialect tag.

    Args:
        target: The requested dialect tag.
        registered: Dialect tags that do have a renderer.
    """

    def __init__(self, target: str, registered: list[str]) -> None:
        super().__init__(
            f"Unsupported dialect target: '{target}'. Registered targets: {registered}."
        )
        self.target = target
        self.registered = registered


class TemplateError(BuildQLError):
    """Raised when a canonical template's placeholders disagree with its
    declared parameters.

    Args:
        message: Human-readable description.
        operation: Dotted key of the offending template, when known.
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class ArityError(BuildQLError):
    """Raised when the number of bind values does not match a query's arity.

    Args:
        operation: Dotted key of the query being bound.
        expected: Number of parameters the query declares.
        got: Number of values supplied.
        missing: Parameter names with no value (keyword binding only).
        unexpected: Supplied names the query does not declare.
    """

    def __init__(
        self,
        operation: str,
        expected: int,
        got: int,
        missing: list[str] | None = None,
        unexpected: list[str] | None = None,
    ) -> None:
        message = f"'{operation}' takes {expected} parameter(s) but {got} were given."
        if missing:
            message += f" Missing: {missing}."
        if unexpected:
            message += f" Unexpected: {unexpected}."
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.got = got
        self.missing: list[str] = missing or []
        self.unexpected: list[str] = unexpected or []


class ConfigError(BuildQLError):
    """Raised when a :class:`~buildql.schema.config.RegistryConfig` cannot be
    resolved (e.g. a database URL for an unknown backend).

    Args:
        message: Human-readable description.
        value: The raw value that could not be resolved.
    """

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value
