from flask import jsonify, request
from artroad.application import settings_store
from artroad.domain.exceptions import ValidationError
from artroad.normalizers.setting import normalize_setting
from artroad.utils.request_args import json_body
from . import v1_bp


@v1_bp.route("/settings", methods=["GET"])
def get_settings():
    key = request.args.get("key")
    if key:
        return jsonify(normalize_setting(settings_store.get_setting(key))), 200

    # ?keys=a,b,c returns whichever exist
    if "keys" in request.args:
        settings = settings_store.get_settings(request.args.get("keys", ""))
    else:
        settings = settings_store.list_settings()

    return jsonify([normalize_setting(s) for s in settings]), 200


@v1_bp.route("/settings", methods=["POST"])
def create_setting():
    setting = settings_store.create_setting(json_body())
    return jsonify(normalize_setting(setting)), 201


@v1_bp.route("/settings", methods=["PUT"])
def upsert_settings():
    data = json_body()

    if "settings" in data:
        items = data["settings"]
        if not isinstance(items, list):
            raise ValidationError("settings must be an array", "INVALID_BODY")

        written = settings_store.bulk_upsert(items)
        return jsonify([normalize_setting(s) for s in written]), 200

    setting, _ = settings_store.upsert_setting(data)
    return jsonify(normalize_setting(setting)), 200


@v1_bp.route("/settings", methods=["DELETE"])
def delete_setting():
    key = (request.args.get("key") or "").strip()
    if not key:
        raise ValidationError("Key is required", "MISSING_KEY")

    deleted = settings_store.delete_setting(key)
    return jsonify({
        "message": "Setting deleted successfully",
        "setting": deleted
    }), 200
