"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderDetailMapper, OrderMapper, ProductMapper
from .models import Base, OrderDetailModel, OrderModel
from .navigation import EmployeeHierarchy, ForeignKeyIndex
from .repositories import SqlAlchemyOrderRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "EmployeeHierarchy",
    "ForeignKeyIndex",
    "OrderDetailMapper",
    "OrderDetailModel",
    "OrderMapper",
    "OrderModel",
    "ProductMapper",
    "SqlAlchemyOrderRepository",
    "UnitOfWork",
]
