"""
Referenced entities, projected to what an order view needs.

Other aggregates own these records; orders only carry their identity
and display fields.
"""
from dataclasses import dataclass

from ..value_objects import CustomerCode


@dataclass
class Customer:
    """Customer referenced by its natural key."""
    code: CustomerCode
    company_name: str = ""


@dataclass
class Employee:
    """Employee who took the order."""
    id: int
    first_name: str = ""
    last_name: str = ""
    country: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Shipper:
    """Carrier the order ships via."""
    id: int
    company_name: str = ""


@dataclass
class Product:
    """Ordered product with denormalized category and supplier names."""
    id: int
    product_name: str = ""
    category_id: int = 0
    category: str = ""
    supplier_id: int = 0
    supplier: str = ""
