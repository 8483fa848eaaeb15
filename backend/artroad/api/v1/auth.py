from flask import request, jsonify
from flask_jwt_extended import create_access_token
from artroad.application.admin_accounts import authenticate
from . import v1_bp


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or {}

    user = authenticate(data.get("email"), data.get("password"))

    access_token = create_access_token(
        identity=str(user.id),
        additional_claims={"role": user.role}
    )

    return jsonify({
        "access_token": access_token
    }), 200
