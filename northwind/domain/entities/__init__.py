"""Domain entities."""

from .order import Order, OrderDetail
from .references import Customer, Employee, Product, Shipper

__all__ = [
    "Customer",
    "Employee",
    "Order",
    "OrderDetail",
    "Product",
    "Shipper",
]
