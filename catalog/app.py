import logging

from flask import Flask, current_app, jsonify, send_from_directory
from flask_cors import CORS

from .config import Config
from .errors import register_error_handlers
from .routes import api_bp
from .store import JsonFileStore


def create_app(test_config=None, product_store=None, order_store=None):
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    CORS(app)

    if product_store is None:
        product_store = JsonFileStore(app.config["PRODUCTS_DB"])
    if order_store is None:
        order_store = JsonFileStore(app.config["ORDERS_DB"])
    app.extensions["product_store"] = product_store
    app.extensions["order_store"] = order_store

    app.register_blueprint(api_bp, url_prefix="/api")
    register_error_handlers(app)

    @app.route(f"{app.config['UPLOAD_URL_PREFIX']}/<path:filename>")
    def uploaded_file(filename):
        return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)

    @app.route("/")
    def index():
        return "Fashion Villa Back-End is running!"

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy"})

    return app


def main():
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app = create_app()
    app.logger.info("Server is running on http://localhost:%s", app.config["PORT"])
    app.run(host="0.0.0.0", port=app.config["PORT"])


if __name__ == "__main__":
    main()
