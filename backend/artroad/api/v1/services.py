from flask import jsonify, request
from artroad.application.content.services import services
from artroad.utils.request_args import (
    json_body,
    list_params_from_request,
    record_id_from_request,
)
from . import v1_bp


@v1_bp.route("/services", methods=["GET"])
def get_services():
    if "id" in request.args:
        service = services.get(record_id_from_request())
        return jsonify(services.normalize(service)), 200

    records = services.list(list_params_from_request())
    return jsonify([services.normalize(s) for s in records]), 200


@v1_bp.route("/services", methods=["POST"])
def create_service():
    service = services.create(json_body())
    return jsonify(services.normalize(service)), 201


@v1_bp.route("/services", methods=["PUT"])
def update_service():
    record_id = record_id_from_request()
    service = services.update(record_id, json_body())
    return jsonify(services.normalize(service)), 200


@v1_bp.route("/services", methods=["DELETE"])
def delete_service():
    deleted = services.delete(record_id_from_request())
    return jsonify({
        "message": "Service deleted successfully",
        "service": deleted
    }), 200
