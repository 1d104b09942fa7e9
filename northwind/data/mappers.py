"""
Static mappers for domain entities ↔ database models.

Reading fills every absent column with a domain-safe default (empty
string, ``datetime.min``, zero) so returned aggregates never carry None
scalars, except for ``shipped_date`` and ``ship_region`` which are
optional in the domain too.

Writing is straight assignment through the checked conversions in
``northwind.data.conversions``. No store access happens here.
"""
from datetime import datetime
from typing import Any, Dict, List

from northwind.domain.entities import Customer, Employee, Order, OrderDetail, Product, Shipper
from northwind.domain.value_objects import CustomerCode, ShippingAddress

from .conversions import from_money, to_discount, to_int32, to_money, to_quantity
from .models import OrderDetailModel, OrderModel, ProductModel

MIN_DATE = datetime.min


class ProductMapper:
    """Static mapper for ProductModel → Product projection."""

    @staticmethod
    def to_domain(product_id: int, model: ProductModel) -> Product:
        """Project a product row (possibly not loaded) to its order-view shape.

        Args:
            product_id: Product key from the detail row
            model: ProductModel instance or None

        Returns:
            Product domain entity
        """
        if model is None:
            return Product(id=product_id)

        return Product(
            id=product_id,
            product_name=model.product_name or "",
            category_id=model.category_id or 0,
            category=model.category.category_name if model.category else "",
            supplier_id=model.supplier_id or 0,
            supplier=model.supplier.company_name if model.supplier else "",
        )


class OrderDetailMapper:
    """Static mapper for OrderDetail ↔ OrderDetailModel transformation."""

    @staticmethod
    def to_domain(model: OrderDetailModel) -> OrderDetail:
        """Convert ORM model to domain entity (unbound to an order).

        Args:
            model: OrderDetailModel instance

        Returns:
            OrderDetail domain entity
        """
        return OrderDetail(
            product=ProductMapper.to_domain(model.product_id, model.product),
            unit_price=from_money(model.unit_price),
            quantity=model.quantity,
            discount=model.discount or 0.0,
        )

    @staticmethod
    def to_persistence(entity: OrderDetail, index: int) -> OrderDetailModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderDetail domain entity
            index: Position of the line, used in error field names

        Returns:
            OrderDetailModel instance

        Raises:
            ValidationError: If quantity is not positive or a value does not fit
        """
        prefix = f"order_details[{index}]"
        return OrderDetailModel(
            product_id=to_int32(entity.product.id, f"{prefix}.product.id"),
            unit_price=to_money(entity.unit_price, f"{prefix}.unit_price"),
            quantity=to_quantity(entity.quantity, f"{prefix}.quantity"),
            discount=to_discount(entity.discount, f"{prefix}.discount"),
        )

    @staticmethod
    def to_persistence_all(details: List[OrderDetail]) -> List[OrderDetailModel]:
        """Convert every line, failing on the first invalid one."""
        return [
            OrderDetailMapper.to_persistence(detail, index)
            for index, detail in enumerate(details)
        ]


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested details."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested details).

        Args:
            model: OrderModel with customer, employee, shipper and
                details (with product, category, supplier) loaded

        Returns:
            Order domain aggregate
        """
        customer = Customer(
            code=CustomerCode(model.customer_id or ""),
            company_name=model.customer.company_name if model.customer else "",
        )

        employee_model = model.employee
        employee = Employee(
            id=model.employee_id or 0,
            first_name=(employee_model.first_name or "") if employee_model else "",
            last_name=(employee_model.last_name or "") if employee_model else "",
            country=(employee_model.country or "") if employee_model else "",
        )

        shipper = Shipper(
            id=model.ship_via or 0,
            company_name=model.shipper.company_name if model.shipper else "",
        )

        shipping_address = ShippingAddress(
            address=model.ship_address or "",
            city=model.ship_city or "",
            region=model.ship_region,
            postal_code=model.ship_postal_code or "",
            country=model.ship_country or "",
        )

        return Order(
            id=model.order_id,
            customer=customer,
            employee=employee,
            shipper=shipper,
            order_date=model.order_date or MIN_DATE,
            required_date=model.required_date or MIN_DATE,
            shipped_date=model.shipped_date,
            freight=from_money(model.freight),
            ship_name=model.ship_name or "",
            shipping_address=shipping_address,
            order_details=[OrderDetailMapper.to_domain(detail) for detail in model.details],
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested details).

        The identity is left for the store to assign.

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance

        Raises:
            ValidationError: If a detail is invalid or a value does not fit
        """
        details = OrderDetailMapper.to_persistence_all(entity.order_details)
        columns = OrderMapper.to_columns(entity)

        return OrderModel(**columns, details=details)

    @staticmethod
    def update_persistence(
        model: OrderModel,
        columns: Dict[str, Any],
        details: List[OrderDetailModel],
    ) -> OrderModel:
        """Apply already converted values to an existing ORM model.

        Conversion happens in ``to_columns`` / ``to_persistence_all`` first,
        so nothing here can fail half-way through an update.

        Args:
            model: Existing OrderModel instance (old details already removed)
            columns: Output of ``to_columns``
            details: Replacement detail models

        Returns:
            Updated OrderModel instance
        """
        for name, value in columns.items():
            setattr(model, name, value)

        model.details.extend(details)
        return model

    @staticmethod
    def to_columns(entity: Order) -> Dict[str, Any]:
        """Convert order-level fields to column values.

        Raises:
            ValidationError: If an identity or amount does not fit its column
        """
        address = entity.shipping_address

        return {
            "customer_id": entity.customer.code.value,
            "employee_id": to_int32(entity.employee.id, "employee.id"),
            "order_date": entity.order_date,
            "required_date": entity.required_date,
            "shipped_date": entity.shipped_date,
            "ship_via": to_int32(entity.shipper.id, "shipper.id"),
            "freight": to_money(entity.freight, "freight"),
            "ship_name": entity.ship_name,
            "ship_address": address.address,
            "ship_city": address.city,
            "ship_region": address.region,
            "ship_postal_code": address.postal_code,
            "ship_country": address.country,
        }
