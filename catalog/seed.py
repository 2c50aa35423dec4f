"""Seed the product catalog with sample fashion items."""
import logging
import os

from werkzeug.datastructures import FileStorage

from .app import create_app
from .models import Product
from .storage import storage
from .store import new_id

logger = logging.getLogger(__name__)

SEED_IMAGES_DIR = os.environ.get(
    "SEED_IMAGES_DIR", os.path.join(os.path.dirname(__file__), "..", "seed_images")
)

PRODUCTS = [
    {"name": "Floral Summer Dress", "category": "Dresses", "price": 49, "description": "Light cotton dress with a floral print.", "default_size": "M", "image": "summer-dress.jpg"},
    {"name": "Denim Jacket", "category": "Jackets", "price": 79, "description": "Classic washed denim jacket.", "default_size": "L", "image": "denim-jacket.jpg"},
    {"name": "Silk Blouse", "category": "Tops", "price": 39, "description": "Ivory silk blouse with pearl buttons.", "default_size": "S", "image": "silk-blouse.jpg"},
    {"name": "Pleated Midi Skirt", "category": "Skirts", "price": 35, "description": "Flowing pleated skirt in navy.", "default_size": "M", "image": "midi-skirt.jpg"},
    {"name": "Wool Scarf", "category": "Accessories", "price": 19, "description": "Soft merino wool scarf.", "default_size": "One Size", "image": "wool-scarf.jpg"},
]


def seed(app=None):
    app = app or create_app()
    with app.app_context():
        store = app.extensions["product_store"]
        field = app.config["UPLOAD_FIELD"]
        with store.lock:
            products = store.list()
            if products:
                logger.info("Catalog already has data. Skipping seed.")
                return 0

            for p in PRODUCTS:
                fields = dict(p)
                image_file = fields.pop("image")
                image_path = ""
                src = os.path.join(SEED_IMAGES_DIR, image_file)
                if os.path.exists(src):
                    with open(src, "rb") as f:
                        image_path = storage.save(FileStorage(f, filename=image_file), field)

                product = Product(
                    id=new_id("prod_", {x["id"] for x in products}),
                    image_path=image_path,
                    **fields,
                )
                products.append(product.to_dict())

            if not store.save_all(products):
                for product in products:
                    storage.delete(product["imagePath"])
                raise RuntimeError("Failed to write seeded products")

    logger.info("Seeded %d products.", len(PRODUCTS))
    return len(PRODUCTS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    seed()
