"""Unit tests for BuildService and create_build_service."""
from __future__ import annotations

import dataclasses

import pytest

import buildql
from buildql import RegistryConfig
from buildql.catalog.builds import BUILD_TEMPLATES, LIST_REPO_BUILDS, LIST_REPO_BUILDS_BY_EVENT
from buildql.errors import NotFoundError, TemplateError, UnsupportedDialectError
from buildql.schema.operations import BuildOperation, OperationClass, ResultShape
from buildql.schema.template import QueryTemplate


def test_default_service_is_postgres():
    assert buildql.create_build_service().dialect == "postgres"


def test_accepts_config():
    service = buildql.create_build_service(RegistryConfig(target="sqlite"))
    assert service.dialect == "sqlite"
    assert all(q.dialect == "sqlite" for q in service)


def test_dialect_tag_is_case_insensitive():
    assert buildql.create_build_service("SQLite").dialect == "sqlite"


def test_unsupported_dialect_fails_at_construction():
    with pytest.raises(UnsupportedDialectError):
        buildql.create_build_service("oracle")


def test_bad_template_fails_at_construction():
    bad = QueryTemplate(
        operation=BuildOperation.DELETE_BUILD,
        sql="DELETE FROM builds WHERE id = :build_id;",
        params=("id",),
        result=ResultShape.ROWCOUNT,
    )
    with pytest.raises(TemplateError):
        buildql.create_build_service("sqlite", templates=[bad])


def test_duplicate_operation_fails_at_construction():
    retagged = LIST_REPO_BUILDS_BY_EVENT.model_copy(update={"operation": BuildOperation.LIST_REPO})
    with pytest.raises(TemplateError, match="more than one template") as exc_info:
        buildql.create_build_service("sqlite", templates=[*BUILD_TEMPLATES, retagged])
    assert exc_info.value.operation == "list.repo"


def test_incomplete_catalog_fails_at_construction():
    with pytest.raises(TemplateError, match="No template for") as exc_info:
        buildql.create_build_service("sqlite", templates=[LIST_REPO_BUILDS])
    assert "select.countByOrg" in str(exc_info.value)
    assert "'list.repo'" not in str(exc_info.value)


def test_partial_catalog_when_requested():
    service = buildql.create_build_service("sqlite", templates=[LIST_REPO_BUILDS], partial=True)
    assert service.operations() == [BuildOperation.LIST_REPO]
    with pytest.raises(NotFoundError):
        service.lookup("select", "count")


def test_publishes_every_operation(service):
    assert len(service) == len(BuildOperation)
    assert set(service.operations()) == set(BuildOperation)


def test_partitions(service):
    assert sorted(service.list) == ["all", "org", "orgByEvent", "repo", "repoByEvent"]
    assert sorted(service.delete) == ["build"]
    assert len(service.select) == 10


def test_lookup_by_string_and_enum(sq_service):
    by_str = sq_service.lookup("select", "countByOrg")
    by_enum = sq_service.lookup(OperationClass.SELECT, "countByOrg")
    assert by_str is by_enum
    assert by_str.operation is BuildOperation.SELECT_COUNT_BY_ORG


def test_get_by_operation(sq_service):
    q = sq_service.get(BuildOperation.LIST_ORG_BY_EVENT)
    assert q is sq_service.lookup("list", "orgByEvent")
    assert sq_service.get("list.orgByEvent") is q
    assert sq_service[BuildOperation.LIST_ORG_BY_EVENT] is q


def test_unknown_key(sq_service):
    with pytest.raises(NotFoundError) as exc_info:
        sq_service.lookup("select", "byColour")
    err = exc_info.value
    assert err.operation_class == "select"
    assert err.key == "byColour"
    assert "countByOrg" in err.available


def test_key_in_wrong_class(sq_service):
    with pytest.raises(NotFoundError):
        sq_service.lookup("list", "countByOrg")


def test_class_name_is_case_insensitive(sq_service):
    q = sq_service.lookup("list", "repo")
    assert sq_service.lookup("List", "repo") is q
    assert sq_service.lookup("LIST", "repo") is q
    assert sq_service.get("Select.countByOrg") is sq_service.lookup("select", "countByOrg")


def test_key_is_case_sensitive(sq_service):
    with pytest.raises(NotFoundError):
        sq_service.lookup("list", "Repo")


def test_unknown_class(sq_service):
    with pytest.raises(NotFoundError, match="Unknown operation class"):
        sq_service.lookup("update", "build")


def test_get_malformed_dotted_key(sq_service):
    with pytest.raises(NotFoundError):
        sq_service.get("delete")


def test_service_is_immutable(sq_service):
    with pytest.raises(dataclasses.FrozenInstanceError):
        sq_service.dialect = "postgres"  # type: ignore[misc]
    with pytest.raises(TypeError):
        sq_service.list["all"] = sq_service.list["repo"]  # type: ignore[index]


def test_service_hashes_by_identity(sq_service):
    other = buildql.create_build_service("sqlite")
    assert hash(sq_service) == hash(sq_service)
    assert sq_service != other
    assert len({sq_service, other}) == 2


def test_services_are_independent(pg_service, sq_service):
    assert pg_service.lookup("list", "repo").sql != sq_service.lookup("list", "repo").sql
    assert pg_service.dialect == "postgres"
