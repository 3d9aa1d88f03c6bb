"""SQLAlchemy ORM model for Product aggregate."""

from sqlalchemy import Column, String

from .base import Base
from .types import ExactDecimal


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(ExactDecimal(), nullable=False)
    currency = Column(String(10), nullable=False)
