"""Declarative base shared by all Northwind models."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
