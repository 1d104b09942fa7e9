"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..value_objects import ShippingAddress
from .references import Customer, Employee, Product, Shipper


@dataclass
class OrderDetail:
    """
    Line item within an order.

    ``order`` is a back-reference to the owning aggregate. It is bound by
    the Order itself and is left out of equality and repr.
    """
    product: Product
    unit_price: float
    quantity: int
    discount: float = 0.0
    order: Optional["Order"] = field(default=None, compare=False, repr=False)

    def line_total(self) -> float:
        """Price of the line after discount."""
        return self.unit_price * self.quantity * (1 - self.discount)


@dataclass
class Order:
    """
    Order aggregate root.

    ``id`` is None until the store assigns one on creation.
    """
    customer: Customer
    employee: Employee
    shipper: Shipper
    order_date: datetime
    required_date: datetime
    freight: float
    ship_name: str
    shipping_address: ShippingAddress
    shipped_date: Optional[datetime] = None
    order_details: List[OrderDetail] = field(default_factory=list)
    id: Optional[int] = None

    def __post_init__(self):
        for detail in self.order_details:
            detail.order = self

    def add_detail(
        self,
        product: Product,
        unit_price: float,
        quantity: int,
        discount: float = 0.0,
    ) -> OrderDetail:
        """Append a line item owned by this order."""
        detail = OrderDetail(
            product=product,
            unit_price=unit_price,
            quantity=quantity,
            discount=discount,
            order=self,
        )
        self.order_details.append(detail)
        return detail

    def replace_details(self, details: List[OrderDetail]) -> None:
        """Swap the whole line-item collection (replace-all semantics)."""
        self.order_details = list(details)
        for detail in self.order_details:
            detail.order = self

    def total(self) -> float:
        """Sum of discounted line totals. Freight is not included."""
        return sum(detail.line_total() for detail in self.order_details)

    @property
    def is_shipped(self) -> bool:
        return self.shipped_date is not None
