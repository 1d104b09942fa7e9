"""Tests for reverse-navigation loaders against the seeded store."""

import pytest

from northwind.data.navigation import (
    load_employee_hierarchy,
    load_products_by_category,
    load_products_by_supplier,
)


@pytest.mark.asyncio
async def test_load_employee_hierarchy(test_session):
    """Test direct reports are derived from reports_to."""
    hierarchy = await load_employee_hierarchy(test_session)

    assert len(hierarchy) == 4
    assert hierarchy.top_level() == {2}
    assert hierarchy.direct_reports(2) == {1, 5}
    assert hierarchy.direct_reports(5) == {6}
    assert hierarchy.direct_reports(6) == set()
    assert hierarchy.chain_of_command(6) == [5, 2]


@pytest.mark.asyncio
async def test_load_products_by_category_and_supplier(test_session):
    """Test products are indexed under their parents on demand."""
    by_category = await load_products_by_category(test_session)
    by_supplier = await load_products_by_supplier(test_session)

    assert by_category.children_of(1) == {1, 2}
    assert by_category.children_of(2) == {3, 4, 5}
    assert by_supplier.children_of(2) == {4, 5}
    assert by_supplier.parent_of(3) == 1
