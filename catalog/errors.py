from flask import jsonify
from werkzeug.exceptions import HTTPException


def error_response(message, status):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return error_response(exc.description, exc.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        app.logger.exception("Unhandled error")
        return error_response("Internal server error.", 500)
