import os

import pytest

from catalog import seed as seed_module


def test_seed_fills_empty_catalog(app, client, tmp_path, monkeypatch):
    images = tmp_path / "seed_images"
    images.mkdir()
    (images / "summer-dress.jpg").write_bytes(b"jpg")
    monkeypatch.setattr(seed_module, "SEED_IMAGES_DIR", str(images))

    assert seed_module.seed(app) == len(seed_module.PRODUCTS)

    products = client.get("/api/products").get_json()
    assert len(products) == len(seed_module.PRODUCTS)
    assert len({p["id"] for p in products}) == len(products)

    dress = next(p for p in products if p["name"] == "Floral Summer Dress")
    assert dress["imagePath"].startswith("uploads/productImage-")
    assert os.path.exists(os.path.join(app.config["UPLOAD_FOLDER"], os.path.basename(dress["imagePath"])))

    scarf = next(p for p in products if p["name"] == "Wool Scarf")
    assert scarf["imagePath"] == ""
    assert scarf["defaultSize"] == "One Size"


def test_seed_skips_when_catalog_has_data(app, make_product):
    make_product()
    assert seed_module.seed(app) == 0


def test_seed_removes_images_when_save_fails(app, tmp_path, monkeypatch):
    images = tmp_path / "seed_images"
    images.mkdir()
    (images / "summer-dress.jpg").write_bytes(b"jpg")
    (images / "wool-scarf.jpg").write_bytes(b"jpg")
    monkeypatch.setattr(seed_module, "SEED_IMAGES_DIR", str(images))
    monkeypatch.setattr(app.extensions["product_store"], "save_all", lambda items: False)

    with pytest.raises(RuntimeError):
        seed_module.seed(app)

    assert os.listdir(app.config["UPLOAD_FOLDER"]) == []
