# tests/test_repository.py

"""
Tests for ProductRepository against the test database.
"""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from productos_api.exceptions import StorageError
from productos_api.models import Product
from productos_api.repository import ProductRepository


@pytest.fixture
def repository(db_session_for_test: Session):
    return ProductRepository(db_session_for_test)


def test_create_applies_defaults(repository: ProductRepository):
    product = repository.create({"name": "Audifonos", "price": 49.5})
    assert product.id is not None
    assert product.disponible is True


def test_find_all_orders_by_id_descending(repository: ProductRepository):
    created = [repository.create({"name": f"P{i}", "price": i + 1}) for i in range(3)]
    assert [p.id for p in repository.find_all()] == sorted((p.id for p in created), reverse=True)


def test_find_all_custom_order(repository: ProductRepository):
    repository.create({"name": "B", "price": 2})
    repository.create({"name": "A", "price": 1})
    assert [p.name for p in repository.find_all(order_by=Product.name)] == ["A", "B"]


def test_find_by_id_missing(repository: ProductRepository):
    assert repository.find_by_id(123456) is None


def test_update_overwrites_fields(repository: ProductRepository):
    product = repository.create({"name": "Silla", "price": 80})
    updated = repository.update(product.id, {"name": "Silla Gamer", "disponible": False})
    assert updated.id == product.id
    assert updated.name == "Silla Gamer"
    assert updated.price == 80
    assert updated.disponible is False


def test_update_missing_returns_none(repository: ProductRepository):
    assert repository.update(123456, {"name": "x"}) is None


def test_delete(repository: ProductRepository):
    product = repository.create({"name": "Lampara", "price": 15})
    assert repository.delete(product.id) is True
    assert repository.find_by_id(product.id) is None
    assert repository.delete(product.id) is False


def test_storage_failure_becomes_storage_error(repository: ProductRepository, monkeypatch):
    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is gone"))

    monkeypatch.setattr(repository.db, "query", broken_query)
    with pytest.raises(StorageError):
        repository.find_all()


def test_storage_failure_returns_500(client, db_session_for_test: Session, monkeypatch):
    def broken_get(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is gone"))

    monkeypatch.setattr(db_session_for_test, "get", broken_get)
    response = client.get("/api/productos/1")
    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor"}


def _raise_operational_error(*args, **kwargs):
    raise OperationalError("SQL", {}, Exception("database is gone"))


def test_list_storage_failure_returns_500(client, db_session_for_test: Session, monkeypatch):
    monkeypatch.setattr(db_session_for_test, "query", _raise_operational_error)
    response = client.get("/api/productos")
    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor"}


def test_create_storage_failure_returns_500(client, db_session_for_test: Session, monkeypatch):
    monkeypatch.setattr(db_session_for_test, "commit", _raise_operational_error)
    response = client.post("/api/productos", json={"name": "Parlante", "price": 160})
    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor"}


@pytest.mark.parametrize(
    "method, json",
    [
        ("put", {"name": "Parlante", "price": 160, "disponible": True}),
        ("patch", None),
        ("delete", None),
    ],
)
def test_write_storage_failure_returns_500(client, db_session_for_test: Session, monkeypatch, method, json):
    monkeypatch.setattr(db_session_for_test, "get", _raise_operational_error)
    response = client.request(method.upper(), "/api/productos/1", json=json)
    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor"}
