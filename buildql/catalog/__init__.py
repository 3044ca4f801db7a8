"""buildQL query catalog: canonical templates per entity."""
from buildql.catalog.builds import BUILD_TEMPLATES

__all__ = ["BUILD_TEMPLATES"]
