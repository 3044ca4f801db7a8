"""Closed sets of identifiers for build queries.

Every query the registry publishes is named by a :class:`BuildOperation`
member.  The dotted value (``"list.repo"``) is the published string key; the
part before the dot is the :class:`OperationClass` the query is filed under.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Operation classes
# ---------------------------------------------------------------------------


class OperationClass(str, Enum):
    """The three groups the registry partitions its queries into."""

    LIST = "list"
    SELECT = "select"
    DELETE = "delete"


# ---------------------------------------------------------------------------
# Result shapes
# ---------------------------------------------------------------------------


class ResultShape(str, Enum):
    """What executing a query yields."""

    ROWS = "rows"  # zero or more full build rows
    ROW = "row"  # zero or one full build row
    SCALAR = "scalar"  # exactly one row with a single ``count`` column
    PROJECTION = "projection"  # zero or more rows of selected columns
    ROWCOUNT = "rowcount"  # no rows; the driver's affected-row count


# ---------------------------------------------------------------------------
# Build operations
# ---------------------------------------------------------------------------


class BuildOperation(str, Enum):
    """Every logical query published for the builds table."""

    LIST_ALL = "list.all"
    LIST_REPO = "list.repo"
    LIST_REPO_BY_EVENT = "list.repoByEvent"
    LIST_ORG = "list.org"
    LIST_ORG_BY_EVENT = "list.orgByEvent"

    SELECT_REPO = "select.repo"
    SELECT_LAST = "select.last"
    SELECT_LAST_BY_BRANCH = "select.lastByBranch"
    SELECT_COUNT = "select.count"
    SELECT_COUNT_BY_STATUS = "select.countByStatus"
    SELECT_COUNT_BY_REPO = "select.countByRepo"
    SELECT_COUNT_BY_REPO_AND_EVENT = "select.countByRepoAndEvent"
    SELECT_COUNT_BY_ORG = "select.countByOrg"
    SELECT_COUNT_BY_ORG_AND_EVENT = "select.countByOrgAndEvent"
    SELECT_PENDING_AND_RUNNING = "select.pendingAndRunning"

    DELETE_BUILD = "delete.build"

    @property
    def operation_class(self) -> OperationClass:
        """The class this operation is filed under."""
        return OperationClass(self.value.split(".", 1)[0])

    @property
    def key(self) -> str:
        """The short key within the operation class (e.g. ``'repoByEvent'``)."""
        return self.value.split(".", 1)[1]
