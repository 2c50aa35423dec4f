import io
import os

import pytest

from catalog import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "PRODUCTS_DB": str(tmp_path / "products.json"),
        "ORDERS_DB": str(tmp_path / "orders.json"),
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_product(client):
    def _make(image=True, **fields):
        data = {
            "name": "Dress A",
            "category": "Dresses",
            "price": "49",
            "description": "Red dress",
            "defaultSize": "M",
        }
        data.update(fields)
        if image:
            data["productImage"] = (io.BytesIO(b"\xff\xd8\xff fake jpeg"), "dress.jpg")
        return client.post("/api/products", data=data, content_type="multipart/form-data")
    return _make


@pytest.fixture
def upload_path(app):
    def _path(image_path):
        return os.path.join(app.config["UPLOAD_FOLDER"], os.path.basename(image_path))
    return _path
