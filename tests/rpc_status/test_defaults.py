"""Tests for the built-in registry table and module-level conversions."""

from __future__ import annotations

import pytest

from packages.rpc_status.errors import catalog, codes, with_metadata, wrap
from packages.rpc_status.status import (
    DEFAULT_TABLE,
    StatusCategory,
    category_name,
    default_converter,
    default_registry,
    stable_code_of,
    to_status_error,
)


def test_default_registry_is_built_once() -> None:
    """The default registry and converter should be process-wide singletons."""
    assert default_registry() is default_registry()
    assert default_converter() is default_converter()
    assert len(default_registry()) == len(DEFAULT_TABLE)


@pytest.mark.parametrize(("sentinel", "category", "code"), DEFAULT_TABLE)
def test_default_table_rows_resolve_through_wrappers(
    sentinel: BaseException, category: StatusCategory, code: str | None
) -> None:
    """Every catalogue sentinel should classify as documented."""
    status = to_status_error(wrap(sentinel, "handler"))

    assert status is not None
    assert status.category is category
    assert status.code == (code or "")
    assert stable_code_of(sentinel) == (code or "")


def test_default_table_covers_every_category() -> None:
    """Each status category should have at least one registered sentinel."""
    assert {row[1] for row in DEFAULT_TABLE} == set(StatusCategory)


def test_default_codes_are_unique() -> None:
    """Stable codes must identify exactly one sentinel."""
    registered = [row[2] for row in DEFAULT_TABLE if row[2] is not None]

    assert len(registered) == len(set(registered))


def test_classified_sentinels_without_codes() -> None:
    """Some sentinels are classified but expose no stable code."""
    without_code = {row[0] for row in DEFAULT_TABLE if row[2] is None}

    assert without_code == {
        catalog.UNSUPPORTED_DATE_RANGE,
        catalog.INVALID_YSON,
        catalog.UNSUPPORTED_YSON,
        catalog.DOCUMENT_NOT_REMOVED,
        catalog.CANCELED,
    }


def test_module_level_helpers_use_default_registry() -> None:
    """Module-level helpers should classify catalogue sentinels."""
    error = with_metadata(catalog.DOCUMENT_NOT_FOUND, {"documentKey": "notes"})
    status = to_status_error(error)

    assert status is not None
    assert status.category is StatusCategory.NOT_FOUND
    assert status.error_info is not None
    assert dict(status.error_info.metadata) == {
        "code": codes.DOCUMENT_NOT_FOUND,
        "documentKey": "notes",
    }
    assert category_name(error) == "not_found"
    assert category_name(wrap(catalog.CANCELED, "watch")) == "canceled"
    assert stable_code_of(None) == "ok"
    assert to_status_error(None) is None
