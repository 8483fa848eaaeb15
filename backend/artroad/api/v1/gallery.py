from flask import jsonify, request
from artroad.application.content.gallery import gallery
from artroad.utils.request_args import (
    json_body,
    list_params_from_request,
    record_id_from_request,
)
from . import v1_bp


@v1_bp.route("/gallery", methods=["GET"])
def get_gallery():
    if "id" in request.args:
        item = gallery.get(record_id_from_request())
        return jsonify(gallery.normalize(item)), 200

    items = gallery.list(list_params_from_request())
    return jsonify([gallery.normalize(item) for item in items]), 200


@v1_bp.route("/gallery", methods=["POST"])
def create_gallery_item():
    item = gallery.create(json_body())
    return jsonify(gallery.normalize(item)), 201


@v1_bp.route("/gallery", methods=["PUT"])
def update_gallery_item():
    record_id = record_id_from_request()
    item = gallery.update(record_id, json_body())
    return jsonify(gallery.normalize(item)), 200


@v1_bp.route("/gallery", methods=["DELETE"])
def delete_gallery_item():
    deleted = gallery.delete(record_id_from_request())
    return jsonify({
        "message": "Gallery item deleted successfully",
        "galleryItem": deleted
    }), 200
