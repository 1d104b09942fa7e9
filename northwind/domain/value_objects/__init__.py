"""Domain value objects."""

from .value_objects import CUSTOMER_CODE_MAX_LENGTH, CustomerCode, ShippingAddress

__all__ = [
    "CUSTOMER_CODE_MAX_LENGTH",
    "CustomerCode",
    "ShippingAddress",
]
