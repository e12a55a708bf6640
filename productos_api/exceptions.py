# productos_api/exceptions.py

"""
Exceptions raised below the HTTP layer.
The application registers a handler for each one that renders the
matching JSON error body.
"""

NOT_FOUND_MESSAGE = "Producto No Encontrado"
STORAGE_ERROR_MESSAGE = "Error interno del servidor"


class InputValidationError(Exception):
    """One or more validation rules failed for the incoming request."""

    def __init__(self, errors):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors


class ProductNotFound(Exception):
    """No product is stored under the requested id."""

    def __init__(self, product_id):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class StorageError(Exception):
    """The persistence layer failed while serving a request."""
