"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Numeric, SmallInteger, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for Orders table."""

    __tablename__ = "Orders"

    order_id = Column("OrderID", Integer, primary_key=True, autoincrement=True)
    customer_id = Column("CustomerID", String(5), ForeignKey("Customers.CustomerID"), nullable=True)
    employee_id = Column("EmployeeID", Integer, ForeignKey("Employees.EmployeeID"), nullable=True)
    order_date = Column("OrderDate", DateTime, nullable=True)
    required_date = Column("RequiredDate", DateTime, nullable=True)
    shipped_date = Column("ShippedDate", DateTime, nullable=True)
    ship_via = Column("ShipVia", Integer, ForeignKey("Shippers.ShipperID"), nullable=True)
    freight = Column("Freight", Numeric(19, 4), nullable=True, default=0)
    ship_name = Column("ShipName", String(40), nullable=True)
    ship_address = Column("ShipAddress", String(60), nullable=True)
    ship_city = Column("ShipCity", String(15), nullable=True)
    ship_region = Column("ShipRegion", String(15), nullable=True)
    ship_postal_code = Column("ShipPostalCode", String(10), nullable=True)
    ship_country = Column("ShipCountry", String(15), nullable=True)

    # Referenced entities (many-to-one, no back-collections)
    customer = relationship("CustomerModel")
    employee = relationship("EmployeeModel")
    shipper = relationship("ShipperModel")

    # Owned line items
    details = relationship(
        "OrderDetailModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderDetailModel.product_id",
    )

    def __repr__(self):
        return f"<OrderModel(order_id={self.order_id}, customer_id={self.customer_id})>"


class OrderDetailModel(Base):
    """
    SQLAlchemy ORM model for "Order Details" table.

    Composite key: an order cannot contain the same product twice.
    """

    __tablename__ = "Order Details"

    order_id = Column(
        "OrderID",
        Integer,
        ForeignKey("Orders.OrderID", ondelete="CASCADE"),
        primary_key=True,
    )
    product_id = Column("ProductID", Integer, ForeignKey("Products.ProductID"), primary_key=True)
    unit_price = Column("UnitPrice", Numeric(19, 4), nullable=False, default=0)
    quantity = Column("Quantity", SmallInteger, nullable=False, default=1)
    discount = Column("Discount", Float, nullable=False, default=0)

    order = relationship("OrderModel", back_populates="details")
    product = relationship("ProductModel")

    def __repr__(self):
        return (
            f"<OrderDetailModel(order_id={self.order_id}, product_id={self.product_id}, "
            f"quantity={self.quantity})>"
        )
