import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DATA_DIR = os.environ.get("DATA_DIR", BASE_DIR)


class Config:
    PORT = int(os.environ.get("PORT", 3000))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    PRODUCTS_DB = os.environ.get("PRODUCTS_DB", os.path.join(DATA_DIR, "products.json"))
    # Reserved for the order endpoint
    ORDERS_DB = os.environ.get("ORDERS_DB", os.path.join(DATA_DIR, "orders.json"))

    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(DATA_DIR, "uploads"))
    UPLOAD_URL_PREFIX = "/uploads"
    # Must match the name the admin page uses in its FormData
    UPLOAD_FIELD = "productImage"
