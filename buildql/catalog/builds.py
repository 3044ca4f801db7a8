"""Canonical queries for the ``builds`` table.

Ordering
--------
Queries scoped to one repository order by ``number`` where a per-repo
sequence is meaningful (``list.repoByEvent``, ``select.last*``).
``list.repo`` orders by ``id``.  Queries that span repositories (org scope)
order by ``builds.id``: build numbers restart in every repo, so only the
global surrogate key gives chronological order across them.

Org-scoped queries join ``repos`` and always qualify ``builds`` columns,
since both tables have an ``id`` column.
"""

from __future__ import annotations

from buildql.schema.operations import BuildOperation as Op
from buildql.schema.operations import ResultShape
from buildql.schema.template import QueryTemplate

# ---------------------------------------------------------------------------
# List queries
# ---------------------------------------------------------------------------

LIST_BUILDS = QueryTemplate(
    operation=Op.LIST_ALL,
    description="All builds.",
    result=ResultShape.ROWS,
    sql="""
SELECT *
FROM builds;
""",
)

LIST_REPO_BUILDS = QueryTemplate(
    operation=Op.LIST_REPO,
    description="One page of a repo's builds, newest first.",
    result=ResultShape.ROWS,
    params=("repo_id", "limit", "offset"),
    sql="""
SELECT *
FROM builds
WHERE repo_id = :repo_id
ORDER BY id DESC
LIMIT :limit
OFFSET :offset;
""",
)

LIST_REPO_BUILDS_BY_EVENT = QueryTemplate(
    operation=Op.LIST_REPO_BY_EVENT,
    description="One page of a repo's builds for an event type.",
    result=ResultShape.ROWS,
    params=("repo_id", "event", "limit", "offset"),
    sql="""
SELECT *
FROM builds
WHERE repo_id = :repo_id
AND event = :event
ORDER BY number DESC
LIMIT :limit
OFFSET :offset;
""",
)

LIST_ORG_BUILDS = QueryTemplate(
    operation=Op.LIST_ORG,
    description="One page of builds across every repo in an org.",
    result=ResultShape.ROWS,
    params=("org", "limit", "offset"),
    sql="""
SELECT builds.*
FROM builds JOIN repos
ON repos.id = builds.repo_id
WHERE repos.org = :org
ORDER BY builds.id DESC
LIMIT :limit
OFFSET :offset;
""",
)

LIST_ORG_BUILDS_BY_EVENT = QueryTemplate(
    operation=Op.LIST_ORG_BY_EVENT,
    description="One page of an org's builds for an event type.",
    result=ResultShape.ROWS,
    params=("org", "event", "limit", "offset"),
    sql="""
SELECT builds.*
FROM builds JOIN repos
ON repos.id = builds.repo_id
WHERE repos.org = :org
AND builds.event = :event
ORDER BY builds.id DESC
LIMIT :limit
OFFSET :offset;
""",
)

# ---------------------------------------------------------------------------
# Select queries
# ---------------------------------------------------------------------------

SELECT_REPO_BUILD = QueryTemplate(
    operation=Op.SELECT_REPO,
    description="A repo's build by number.",
    result=ResultShape.ROW,
    params=("repo_id", "number"),
    sql="""
SELECT *
FROM builds
WHERE repo_id = :repo_id
AND number = :number
LIMIT 1;
""",
)

SELECT_LAST_REPO_BUILD = QueryTemplate(
    operation=Op.SELECT_LAST,
    description="A repo's highest-numbered build.",
    result=ResultShape.ROW,
    params=("repo_id",),
    sql="""
SELECT *
FROM builds
WHERE repo_id = :repo_id
ORDER BY number DESC
LIMIT 1;
""",
)

SELECT_LAST_REPO_BUILD_BY_BRANCH = QueryTemplate(
    operation=Op.SELECT_LAST_BY_BRANCH,
    description="A repo's highest-numbered build on a branch.",
    result=ResultShape.ROW,
    params=("repo_id", "branch"),
    sql="""
SELECT *
FROM builds
WHERE repo_id = :repo_id
AND branch = :branch
ORDER BY number DESC
LIMIT 1;
""",
)

SELECT_BUILDS_COUNT = QueryTemplate(
    operation=Op.SELECT_COUNT,
    description="Number of builds.",
    result=ResultShape.SCALAR,
    sql="""
SELECT count(*) AS count
FROM builds;
""",
)

SELECT_BUILDS_COUNT_BY_STATUS = QueryTemplate(
    operation=Op.SELECT_COUNT_BY_STATUS,
    description="Number of builds in a status.",
    result=ResultShape.SCALAR,
    params=("status",),
    sql="""
SELECT count(*) AS count
FROM builds
WHERE status = :status;
""",
)

SELECT_REPO_BUILD_COUNT = QueryTemplate(
    operation=Op.SELECT_COUNT_BY_REPO,
    description="Number of builds for a repo.",
    result=ResultShape.SCALAR,
    params=("repo_id",),
    sql="""
SELECT count(*) AS count
FROM builds
WHERE repo_id = :repo_id;
""",
)

SELECT_REPO_BUILD_COUNT_BY_EVENT = QueryTemplate(
    operation=Op.SELECT_COUNT_BY_REPO_AND_EVENT,
    description="Number of builds for a repo and event type.",
    result=ResultShape.SCALAR,
    params=("repo_id", "event"),
    sql="""
SELECT count(*) AS count
FROM builds
WHERE repo_id = :repo_id
AND event = :event;
""",
)

SELECT_ORG_BUILD_COUNT = QueryTemplate(
    operation=Op.SELECT_COUNT_BY_ORG,
    description="Number of builds across an org.",
    result=ResultShape.SCALAR,
    params=("org",),
    sql="""
SELECT count(*) AS count
FROM builds JOIN repos
ON repos.id = builds.repo_id
WHERE repos.org = :org;
""",
)

SELECT_ORG_BUILD_COUNT_BY_EVENT = QueryTemplate(
    operation=Op.SELECT_COUNT_BY_ORG_AND_EVENT,
    description="Number of builds across an org for an event type.",
    result=ResultShape.SCALAR,
    params=("org", "event"),
    sql="""
SELECT count(*) AS count
FROM builds JOIN repos
ON repos.id = builds.repo_id
WHERE repos.org = :org
AND builds.event = :event;
""",
)

# Feeds stale-build monitoring: both statuses are filtered by ``created``.
SELECT_PENDING_AND_RUNNING_BUILDS = QueryTemplate(
    operation=Op.SELECT_PENDING_AND_RUNNING,
    description="Pending and running builds created after a timestamp.",
    result=ResultShape.PROJECTION,
    params=("created",),
    sql="""
SELECT builds.created, builds.number, builds.status, repos.full_name
FROM builds INNER JOIN repos ON (builds.repo_id = repos.id)
WHERE builds.created > :created
AND builds.status IN ('pending', 'running');
""",
)

# ---------------------------------------------------------------------------
# Delete queries
# ---------------------------------------------------------------------------

DELETE_BUILD = QueryTemplate(
    operation=Op.DELETE_BUILD,
    description="Remove a build by id.",
    result=ResultShape.ROWCOUNT,
    params=("id",),
    sql="""
DELETE
FROM builds
WHERE id = :id;
""",
)

#: Every build template, in publication order.
BUILD_TEMPLATES: tuple[QueryTemplate, ...] = (
    LIST_BUILDS,
    LIST_REPO_BUILDS,
    LIST_REPO_BUILDS_BY_EVENT,
    LIST_ORG_BUILDS,
    LIST_ORG_BUILDS_BY_EVENT,
    SELECT_REPO_BUILD,
    SELECT_LAST_REPO_BUILD,
    SELECT_LAST_REPO_BUILD_BY_BRANCH,
    SELECT_BUILDS_COUNT,
    SELECT_BUILDS_COUNT_BY_STATUS,
    SELECT_REPO_BUILD_COUNT,
    SELECT_REPO_BUILD_COUNT_BY_EVENT,
    SELECT_ORG_BUILD_COUNT,
    SELECT_ORG_BUILD_COUNT_BY_EVENT,
    SELECT_PENDING_AND_RUNNING_BUILDS,
    DELETE_BUILD,
)
