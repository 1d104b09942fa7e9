"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Employee, Order, OrderDetail, Product, Shipper
from .exceptions import (
    InvalidArgumentError,
    NorthwindError,
    OrderNotFoundError,
    RepositoryError,
    ValidationError,
)
from .repositories import OrderRepository
from .value_objects import CustomerCode, ShippingAddress

__all__ = [
    "Customer",
    "CustomerCode",
    "Employee",
    "InvalidArgumentError",
    "NorthwindError",
    "Order",
    "OrderDetail",
    "OrderNotFoundError",
    "OrderRepository",
    "Product",
    "RepositoryError",
    "Shipper",
    "ShippingAddress",
    "ValidationError",
]
