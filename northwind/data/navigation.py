"""
Reverse navigation computed on demand.

Models only hold many-to-one links (product -> category, employee ->
manager). The one-to-many direction is an index built from flat key
pairs the first time it is asked for.
"""
import logging
from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Optional, Set, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import EmployeeModel, ProductModel

logger = logging.getLogger(__name__)


class ForeignKeyIndex:
    """
    Lazily built ``parent key -> child keys`` index.

    Args:
        rows: Iterable of ``(child_key, parent_key)`` pairs; parent may be None
    """

    def __init__(self, rows: Iterable[Tuple[Hashable, Optional[Hashable]]]):
        self._parents: Dict[Hashable, Optional[Hashable]] = dict(rows)
        self._children: Optional[Dict[Hashable, Set[Hashable]]] = None

    def _build(self) -> Dict[Hashable, Set[Hashable]]:
        if self._children is None:
            children: Dict[Hashable, Set[Hashable]] = defaultdict(set)
            for child, parent in self._parents.items():
                if parent is not None:
                    children[parent].add(child)
            self._children = dict(children)
        return self._children

    def __contains__(self, key: Hashable) -> bool:
        return key in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def keys(self) -> List[Hashable]:
        return list(self._parents)

    def parent_of(self, key: Hashable) -> Optional[Hashable]:
        """Parent key of a child, or None at the top or for unknown keys."""
        return self._parents.get(key)

    def children_of(self, key: Hashable) -> Set[Hashable]:
        """Child keys pointing at ``key``. Returns a copy."""
        return set(self._build().get(key, ()))


class EmployeeHierarchy:
    """
    Employee reporting lines from ``(employee_id, reports_to)`` pairs.

    Cycles are not validated; ``chain_of_command`` stops when it sees an
    employee twice.
    """

    def __init__(self, pairs: Iterable[Tuple[int, Optional[int]]]):
        self._index = ForeignKeyIndex(pairs)

    def __contains__(self, employee_id: int) -> bool:
        return employee_id in self._index

    def __len__(self) -> int:
        return len(self._index)

    def manager_of(self, employee_id: int) -> Optional[int]:
        return self._index.parent_of(employee_id)

    def direct_reports(self, employee_id: int) -> Set[int]:
        return self._index.children_of(employee_id)

    def top_level(self) -> Set[int]:
        """Employees who report to nobody."""
        return {key for key in self._index.keys() if self._index.parent_of(key) is None}

    def chain_of_command(self, employee_id: int) -> List[int]:
        """Managers above ``employee_id``, nearest first."""
        chain: List[int] = []
        seen = {employee_id}
        manager = self.manager_of(employee_id)

        while manager is not None and manager not in seen:
            chain.append(manager)
            seen.add(manager)
            manager = self.manager_of(manager)

        return chain


async def load_employee_hierarchy(session: AsyncSession) -> EmployeeHierarchy:
    """Read employee key pairs and build the hierarchy."""
    result = await session.execute(
        select(EmployeeModel.employee_id, EmployeeModel.reports_to)
    )
    pairs = [(row.employee_id, row.reports_to) for row in result]
    logger.info(f"Loaded employee hierarchy: {len(pairs)} employees")
    return EmployeeHierarchy(pairs)


async def load_products_by_category(session: AsyncSession) -> ForeignKeyIndex:
    """Index products under their category."""
    result = await session.execute(
        select(ProductModel.product_id, ProductModel.category_id)
    )
    return ForeignKeyIndex((row.product_id, row.category_id) for row in result)


async def load_products_by_supplier(session: AsyncSession) -> ForeignKeyIndex:
    """Index products under their supplier."""
    result = await session.execute(
        select(ProductModel.product_id, ProductModel.supplier_id)
    )
    return ForeignKeyIndex((row.product_id, row.supplier_id) for row in result)
