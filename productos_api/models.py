# productos_api/models.py

"""
SQLAlchemy database models for the Productos API.
"""

from sqlalchemy import Boolean, Column, Float, Integer, String

from .db import Base


class Product(Base):
    """
    SQLAlchemy model for the 'productos' table.
    Represents a product with its price and availability flag.
    """

    __tablename__ = "productos"
    # Ids are never handed out twice, even after the highest row is deleted.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    name = Column(String(100), nullable=False, default="")

    price = Column(Float, nullable=False)

    # New products are available until toggled.
    disponible = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', disponible={self.disponible})>"
