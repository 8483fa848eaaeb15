from flask import jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from artroad.application.admin_accounts import change_credentials, create_admin
from artroad.application.admin_stats import dashboard_stats
from artroad.normalizers.admin import normalize_admin_user
from artroad.utils.decorators import roles_required
from artroad.utils.request_args import json_body
from . import v1_bp


@v1_bp.route("/admin/stats", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_stats():
    return jsonify(dashboard_stats()), 200


@v1_bp.route("/admin/users", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_admin_user():
    user = create_admin(json_body())
    return jsonify(normalize_admin_user(user)), 201


@v1_bp.route("/admin/security", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_security():
    user = change_credentials(int(get_jwt_identity()), json_body())
    return jsonify({
        "message": "Credentials updated",
        "user": normalize_admin_user(user)
    }), 200
