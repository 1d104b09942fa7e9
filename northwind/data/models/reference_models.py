"""
SQLAlchemy ORM models for entities referenced by orders.

Navigation is one-directional: children point at parents through
many-to-one relationships. Reverse lookups (an employee's direct
reports, a category's products) are computed on demand, see
``northwind.data.navigation``.
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, SmallInteger, String, Text
from sqlalchemy.orm import relationship

from .base import Base


class CustomerModel(Base):
    """SQLAlchemy ORM model for Customers table."""

    __tablename__ = "Customers"

    customer_id = Column("CustomerID", String(5), primary_key=True)
    company_name = Column("CompanyName", String(40), nullable=False)
    contact_name = Column("ContactName", String(30), nullable=True)
    contact_title = Column("ContactTitle", String(30), nullable=True)
    address = Column("Address", String(60), nullable=True)
    city = Column("City", String(15), nullable=True)
    region = Column("Region", String(15), nullable=True)
    postal_code = Column("PostalCode", String(10), nullable=True)
    country = Column("Country", String(15), nullable=True)
    phone = Column("Phone", String(24), nullable=True)
    fax = Column("Fax", String(24), nullable=True)


class EmployeeModel(Base):
    """
    SQLAlchemy ORM model for Employees table.

    Self-referencing through ``reports_to``; null means top of hierarchy.
    """

    __tablename__ = "Employees"

    employee_id = Column("EmployeeID", Integer, primary_key=True, autoincrement=True)
    last_name = Column("LastName", String(20), nullable=False)
    first_name = Column("FirstName", String(10), nullable=False)
    title = Column("Title", String(30), nullable=True)
    title_of_courtesy = Column("TitleOfCourtesy", String(25), nullable=True)
    birth_date = Column("BirthDate", DateTime, nullable=True)
    hire_date = Column("HireDate", DateTime, nullable=True)
    address = Column("Address", String(60), nullable=True)
    city = Column("City", String(15), nullable=True)
    region = Column("Region", String(15), nullable=True)
    postal_code = Column("PostalCode", String(10), nullable=True)
    country = Column("Country", String(15), nullable=True)
    home_phone = Column("HomePhone", String(24), nullable=True)
    extension = Column("Extension", String(4), nullable=True)
    notes = Column("Notes", Text, nullable=True)
    reports_to = Column("ReportsTo", Integer, ForeignKey("Employees.EmployeeID"), nullable=True)
    photo_path = Column("PhotoPath", String(255), nullable=True)

    reports_to_employee = relationship("EmployeeModel", remote_side=[employee_id])

    def __repr__(self):
        return f"<EmployeeModel(employee_id={self.employee_id}, reports_to={self.reports_to})>"


class ShipperModel(Base):
    """SQLAlchemy ORM model for Shippers table."""

    __tablename__ = "Shippers"

    shipper_id = Column("ShipperID", Integer, primary_key=True, autoincrement=True)
    company_name = Column("CompanyName", String(40), nullable=False)
    phone = Column("Phone", String(24), nullable=True)


class CategoryModel(Base):
    """SQLAlchemy ORM model for Categories table."""

    __tablename__ = "Categories"

    category_id = Column("CategoryID", Integer, primary_key=True, autoincrement=True)
    category_name = Column("CategoryName", String(15), nullable=False)
    description = Column("Description", Text, nullable=True)


class SupplierModel(Base):
    """SQLAlchemy ORM model for Suppliers table."""

    __tablename__ = "Suppliers"

    supplier_id = Column("SupplierID", Integer, primary_key=True, autoincrement=True)
    company_name = Column("CompanyName", String(40), nullable=False)
    contact_name = Column("ContactName", String(30), nullable=True)
    contact_title = Column("ContactTitle", String(30), nullable=True)
    address = Column("Address", String(60), nullable=True)
    city = Column("City", String(15), nullable=True)
    region = Column("Region", String(15), nullable=True)
    postal_code = Column("PostalCode", String(10), nullable=True)
    country = Column("Country", String(15), nullable=True)
    phone = Column("Phone", String(24), nullable=True)
    fax = Column("Fax", String(24), nullable=True)
    home_page = Column("HomePage", Text, nullable=True)


class ProductModel(Base):
    """SQLAlchemy ORM model for Products table."""

    __tablename__ = "Products"

    product_id = Column("ProductID", Integer, primary_key=True, autoincrement=True)
    product_name = Column("ProductName", String(40), nullable=False)
    supplier_id = Column("SupplierID", Integer, ForeignKey("Suppliers.SupplierID"), nullable=True)
    category_id = Column("CategoryID", Integer, ForeignKey("Categories.CategoryID"), nullable=True)
    quantity_per_unit = Column("QuantityPerUnit", String(20), nullable=True)
    unit_price = Column("UnitPrice", Numeric(19, 4), nullable=True, default=0)
    units_in_stock = Column("UnitsInStock", SmallInteger, nullable=True, default=0)
    units_on_order = Column("UnitsOnOrder", SmallInteger, nullable=True, default=0)
    reorder_level = Column("ReorderLevel", SmallInteger, nullable=True, default=0)
    discontinued = Column("Discontinued", Boolean, nullable=False, default=False)

    category = relationship("CategoryModel")
    supplier = relationship("SupplierModel")

    def __repr__(self):
        return f"<ProductModel(product_id={self.product_id}, product_name={self.product_name})>"
