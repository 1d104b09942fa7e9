"""Database models."""

from .base import Base
from .order_model import OrderDetailModel, OrderModel
from .reference_models import (
    CategoryModel,
    CustomerModel,
    EmployeeModel,
    ProductModel,
    ShipperModel,
    SupplierModel,
)

__all__ = [
    "Base",
    "CategoryModel",
    "CustomerModel",
    "EmployeeModel",
    "OrderDetailModel",
    "OrderModel",
    "ProductModel",
    "ShipperModel",
    "SupplierModel",
]
