# productos_api/main.py

"""
FastAPI Productos API.
Manages product records (name, price, availability): listing, retrieval,
creation, replacement, availability toggling and deletion. Request input is
checked by declarative validation rules before any handler runs.
"""
import logging
import sys

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import models  # noqa: F401  (registers the tables on Base.metadata)
from .db import connect_db
from .exceptions import (
    NOT_FOUND_MESSAGE,
    STORAGE_ERROR_MESSAGE,
    InputValidationError,
    ProductNotFound,
    StorageError,
)
from .middleware import input_validation_exception_handler
from .router import router

# -----------------------------
# Configure Logging
# -----------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)


# -----------------------------
# FastAPI App Initialization
# -----------------------------
app = FastAPI(
    title="REST API Productos",
    description="API Docs for Products",
    version="1.0.0",
    openapi_tags=[
        {"name": "Productos", "description": "API operations related to products"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- FastAPI Event Handlers ---
@app.on_event("startup")
async def startup_event():
    """
    Checks the database once before serving.
    A failed check is logged and the service starts anyway.
    """
    connect_db()


# --- Exception Handlers ---
app.add_exception_handler(InputValidationError, input_validation_exception_handler)


@app.exception_handler(ProductNotFound)
async def product_not_found_handler(request: Request, exc: ProductNotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": NOT_FOUND_MESSAGE},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": STORAGE_ERROR_MESSAGE},
    )


app.include_router(router)
