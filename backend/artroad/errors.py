from flask import jsonify
from werkzeug.exceptions import HTTPException

from artroad.extensions import db, jwt
from artroad.domain.exceptions import ContentError


def _error(message, code, status):
    response = jsonify({"error": message, "code": code})
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(ContentError)
    def handle_content_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        code = (error.name or "error").upper().replace(" ", "_")
        return _error(error.description, code, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        db.session.rollback()
        app.logger.exception("Unhandled error")
        return _error(f"Internal server error: {error}", "INTERNAL_ERROR", 500)

    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return _error(reason, "AUTH_REQUIRED", 401)

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return _error(reason, "INVALID_TOKEN", 401)

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return _error("Token has expired", "TOKEN_EXPIRED", 401)
