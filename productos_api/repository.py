# productos_api/repository.py

"""
Persistence operations for products.

Handlers talk to storage only through `ProductRepository`. Lookups return
None for a missing row and leave it to the caller to decide what that means;
any SQLAlchemy failure is rolled back, logged and re-raised as StorageError.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .db import get_db
from .exceptions import StorageError
from .models import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage_errors(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error {action}: {e}", exc_info=True)
            raise StorageError(f"Could not complete: {action}") from e

    def find_all(self, order_by=None) -> List[Product]:
        """Return every product, newest id first unless `order_by` says otherwise."""
        if order_by is None:
            order_by = Product.id.desc()
        with self._storage_errors("listing products"):
            return self.db.query(Product).order_by(order_by).all()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._storage_errors(f"fetching product {product_id}"):
            return self.db.get(Product, product_id)

    def create(self, fields: Dict[str, Any]) -> Product:
        with self._storage_errors("creating product"):
            product = Product(**fields)
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            return product

    def update(self, product_id: int, fields: Dict[str, Any]) -> Optional[Product]:
        """Overwrite `fields` on an existing product; None if it does not exist."""
        with self._storage_errors(f"updating product {product_id}"):
            product = self.db.get(Product, product_id)
            if product is None:
                return None
            for field, value in fields.items():
                setattr(product, field, value)
            self.db.commit()
            self.db.refresh(product)
            return product

    def delete(self, product_id: int) -> bool:
        with self._storage_errors(f"deleting product {product_id}"):
            product = self.db.get(Product, product_id)
            if product is None:
                return False
            self.db.delete(product)
            self.db.commit()
            return True


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)
