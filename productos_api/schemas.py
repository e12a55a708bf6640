# productos_api/schemas.py

"""
Pydantic schemas for the Productos API.
Request schemas type the body once the validation rules have passed;
response schemas describe the `{data: ...}` and error envelopes.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Body of POST /api/productos.
class ProductCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(..., min_length=1, max_length=100, description="The Product name", examples=["Monitor Curvo de 42 pulgadas"])
    price: float = Field(..., gt=0, description="The Product price", examples=[399])


# Body of PUT /api/productos/{id}. Every field is overwritten.
class ProductReplace(ProductCreate):
    disponible: bool = Field(..., description="The product availability", examples=[True])


class ProductResponse(BaseModel):
    id: int = Field(..., description="The Product ID", examples=[1])
    name: str = Field(..., description="The Product name", examples=["Monitor Curvo de 42 pulgadas"])
    price: float = Field(..., description="The Product price", examples=[300])
    disponible: bool = Field(..., description="The product availability", examples=[True])

    model_config = ConfigDict(from_attributes=True, title="Producto")


class ProductData(BaseModel):
    data: ProductResponse


class ProductListData(BaseModel):
    data: List[ProductResponse]


class MessageData(BaseModel):
    data: str = Field(..., examples=["Producto Eliminado"])


class FieldError(BaseModel):
    type: str = "field"
    value: Optional[Any] = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    errors: List[FieldError]


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Producto No Encontrado"])
