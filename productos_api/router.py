# productos_api/router.py

"""
Product endpoints mounted under /api/productos.

Every route declares its validation rules through `handle_input_errors`;
handlers only run once those rules have passed.
"""
import logging

from fastapi import APIRouter, Depends, Path, status

from .exceptions import ProductNotFound
from .middleware import handle_input_errors
from .repository import ProductRepository, get_product_repository
from .schemas import (
    ErrorResponse,
    MessageData,
    ProductCreate,
    ProductData,
    ProductListData,
    ProductReplace,
    ProductResponse,
    ValidationErrorResponse,
)
from .validation import body, greater_than_zero, param

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/productos", tags=["Productos"])

DELETED_MESSAGE = "Producto Eliminado"

# -----------------------------
# Validation rules
# -----------------------------
id_rules = (param("id").is_int().with_message("ID no valido"),)

product_rules = (
    body("name").not_empty().with_message("El nombre del producto no puede ir vacio"),
    body("price")
    .is_numeric().with_message("Valor no valido")
    .not_empty().with_message("El precio del producto no puede ir vacio")
    .custom(greater_than_zero).with_message("El precio no es valido"),
)

availability_rules = (
    body("disponible").is_boolean().with_message("Valor para disponibilidad no valido"),
)

BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Bad Request - invalid input data"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product Not Found"}}
SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Storage failure"}}


def _request_body(schema):
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


def _product_id(id: str = Path(..., description="The ID of the product")) -> str:  # noqa: A002
    # Declared as str so a malformed id reaches the validation rules
    return id


# -----------------------------
# CRUD Endpoints
# -----------------------------


@router.get(
    "",
    response_model=ProductListData,
    summary="Get a list of products",
    responses={**SERVER_ERROR},
)
def get_productos(repository: ProductRepository = Depends(get_product_repository)):
    """
    Returns every product, most recently created first.
    """
    productos = repository.find_all()
    logger.info(f"Retrieved {len(productos)} products.")
    return {"data": [ProductResponse.model_validate(p) for p in productos]}


@router.get(
    "/{id}",
    response_model=ProductData,
    summary="Get a product by ID",
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    dependencies=[Depends(handle_input_errors(*id_rules))],
)
def get_producto_by_id(
    product_id: str = Depends(_product_id),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    Returns a product based on its unique ID.
    """
    producto = repository.find_by_id(int(product_id))
    if producto is None:
        logger.warning(f"Product with ID: {product_id} not found.")
        raise ProductNotFound(product_id)
    return {"data": ProductResponse.model_validate(producto)}


@router.post(
    "",
    response_model=ProductData,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new product",
    responses={**BAD_REQUEST, **SERVER_ERROR},
    openapi_extra=_request_body(ProductCreate),
)
def create_product(
    payload: ProductCreate = Depends(handle_input_errors(*product_rules, schema=ProductCreate)),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    Stores a new product. Availability starts as `true`.
    """
    producto = repository.create(payload.model_dump())
    logger.info(f"Product '{producto.name}' (ID: {producto.id}) created successfully.")
    return {"data": ProductResponse.model_validate(producto)}


@router.put(
    "/{id}",
    response_model=ProductData,
    summary="Updates a product with user input",
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    openapi_extra=_request_body(ProductReplace),
)
def update_product(
    product_id: str = Depends(_product_id),
    payload: ProductReplace = Depends(
        handle_input_errors(*id_rules, *product_rules, *availability_rules, schema=ProductReplace)
    ),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    Replaces the name, price and availability of an existing product.
    """
    producto = repository.update(int(product_id), payload.model_dump())
    if producto is None:
        logger.warning(f"Product with ID: {product_id} not found for update.")
        raise ProductNotFound(product_id)
    logger.info(f"Product '{producto.name}' (ID: {product_id}) updated successfully.")
    return {"data": ProductResponse.model_validate(producto)}


@router.patch(
    "/{id}",
    response_model=ProductData,
    summary="Update Product availability",
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    dependencies=[Depends(handle_input_errors(*id_rules))],
)
def update_availability(
    product_id: str = Depends(_product_id),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    Flips the availability flag of a product.
    """
    producto = repository.find_by_id(int(product_id))
    if producto is None:
        logger.warning(f"Product with ID: {product_id} not found for availability update.")
        raise ProductNotFound(product_id)
    producto = repository.update(producto.id, {"disponible": not producto.disponible})
    if producto is None:
        logger.warning(f"Product with ID: {product_id} was deleted before its availability update.")
        raise ProductNotFound(product_id)
    logger.info(f"Product (ID: {product_id}) availability set to {producto.disponible}.")
    return {"data": ProductResponse.model_validate(producto)}


@router.delete(
    "/{id}",
    response_model=MessageData,
    summary="Delete a product by a given ID",
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    dependencies=[Depends(handle_input_errors(*id_rules))],
)
def delete_product(
    product_id: str = Depends(_product_id),
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    Deletes a product and returns a confirmation message.
    """
    if not repository.delete(int(product_id)):
        logger.warning(f"Product with ID: {product_id} not found for deletion.")
        raise ProductNotFound(product_id)
    logger.info(f"Product (ID: {product_id}) deleted successfully.")
    return {"data": DELETED_MESSAGE}
