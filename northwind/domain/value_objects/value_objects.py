"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import ValidationError

CUSTOMER_CODE_MAX_LENGTH = 5


@dataclass(frozen=True)
class CustomerCode:
    """
    Customer natural key.

    Northwind customer codes are up to five characters (e.g. ALFKI).
    An empty code is allowed: it is what an order without a customer reads back as.
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Customer code must be a string, got: {type(self.value).__name__}",
                field="customer.code",
            )

        if len(self.value) > CUSTOMER_CODE_MAX_LENGTH:
            raise ValidationError(
                f"Customer code must be at most {CUSTOMER_CODE_MAX_LENGTH} characters: {self.value}",
                field="customer.code",
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ShippingAddress:
    """Where an order ships to. Region is optional in many countries."""
    address: str
    city: str
    region: Optional[str]
    postal_code: str
    country: str

    def __str__(self) -> str:
        parts = [self.address, self.city, self.region, self.postal_code, self.country]
        return ", ".join(part for part in parts if part)
