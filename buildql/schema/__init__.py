"""buildQL schema layer: operation identifiers, templates and configuration."""
from buildql.schema.config import RegistryConfig
from buildql.schema.operations import BuildOperation, OperationClass, ResultShape
from buildql.schema.template import QueryTemplate, split_placeholders

__all__ = [
    "BuildOperation",
    "OperationClass",
    "QueryTemplate",
    "RegistryConfig",
    "ResultShape",
    "split_placeholders",
]
