from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from .errors import error_response
from .models import Order, OrderIn, OrderItem, Product, ProductIn, format_errors
from .storage import storage
from .store import new_id

api_bp = Blueprint("api", __name__)


def product_store():
    return current_app.extensions["product_store"]


def order_store():
    return current_app.extensions["order_store"]


@api_bp.route("/products", methods=["GET"])
def list_products():
    try:
        products = product_store().list()
    except (OSError, ValueError):
        current_app.logger.exception("Error reading products")
        return error_response("Server error reading products.", 500)
    return jsonify(products)


@api_bp.route("/products", methods=["POST"])
def create_product():
    field = current_app.config["UPLOAD_FIELD"]
    images = request.files.getlist(field)
    if not images or not images[0].filename:
        return error_response("Image file is required.", 400)
    if len(images) > 1:
        return error_response("Only one image file is allowed.", 400)

    try:
        data = ProductIn.model_validate(request.form.to_dict())
    except ValidationError as exc:
        return error_response(format_errors(exc), 400)

    store = product_store()
    image_path = ""
    try:
        with store.lock:
            products = store.list()
            product_id = new_id("prod_", {p.get("id") for p in products})
            image_path = storage.save(images[0], field)
            product = Product(
                id=product_id,
                image_path=image_path,
                **data.model_dump(),
            )
            products.append(product.to_dict())
            saved = store.save_all(products)
    except (OSError, ValueError):
        current_app.logger.exception("Error creating product")
        saved = False

    if not saved:
        # Don't leave an orphaned image behind
        storage.delete(image_path)
        return error_response("Server error saving product.", 500)

    current_app.logger.info("Created product %s (%s)", product.id, product.name)
    return jsonify(product.to_dict()), 201


@api_bp.route("/products/<product_id>", methods=["DELETE"])
def delete_product(product_id):
    store = product_store()
    try:
        with store.lock:
            products = store.list()
            product = next((p for p in products if p.get("id") == product_id), None)
            if product is None:
                return error_response("Product not found.", 404)

            remaining = [p for p in products if p.get("id") != product_id]
            if not store.save_all(remaining):
                return error_response("Server error deleting product.", 500)
    except (OSError, ValueError):
        current_app.logger.exception("Error deleting product %s", product_id)
        return error_response("Server error deleting product.", 500)

    try:
        storage.delete(product.get("imagePath"))
    except OSError as exc:
        current_app.logger.warning("Could not remove image for %s: %s", product_id, exc)

    current_app.logger.info("Deleted product %s", product_id)
    return jsonify({"success": True, "message": "Product deleted."})


@api_bp.route("/create-order", methods=["POST"])
def create_order():
    payload = request.get_json(silent=True)
    if payload is None:
        return error_response("Request body must be JSON.", 400)
    try:
        data = OrderIn.model_validate(payload)
    except ValidationError as exc:
        return error_response(format_errors(exc), 400)

    try:
        catalog = {p.get("id"): p for p in product_store().list()}
    except (OSError, ValueError):
        current_app.logger.exception("Error reading products")
        return error_response("Server error reading products.", 500)

    items = []
    for item in data.items:
        product = catalog.get(item.product_id)
        if product is None:
            return error_response(f"Unknown product: {item.product_id}", 400)
        items.append(OrderItem(
            product_id=item.product_id,
            name=product.get("name") or "",
            size=item.size or product.get("defaultSize") or "",
            quantity=item.quantity,
            price=product.get("price") or 0,
        ))

    store = order_store()
    try:
        with store.lock:
            orders = store.list()
            order = Order(
                id=new_id("order_", {o.get("id") for o in orders}),
                customer_name=data.customer_name,
                phone=data.phone,
                address=data.address,
                items=items,
                total=sum(i.price * i.quantity for i in items),
            )
            orders.append(order.to_dict())
            saved = store.save_all(orders)
    except (OSError, ValueError):
        current_app.logger.exception("Error creating order")
        saved = False

    if not saved:
        return error_response("Server error saving order.", 500)

    current_app.logger.info("Created order %s, total %s", order.id, order.total)
    return jsonify(order.to_dict()), 201
