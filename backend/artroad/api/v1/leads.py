from flask import jsonify, request
from artroad.application.content.leads import leads
from artroad.utils.request_args import (
    json_body,
    list_params_from_request,
    record_id_from_request,
)
from . import v1_bp


@v1_bp.route("/leads", methods=["GET"])
def get_leads():
    if "id" in request.args:
        lead = leads.get(record_id_from_request())
        return jsonify(leads.normalize(lead)), 200

    records = leads.list(list_params_from_request())
    return jsonify([leads.normalize(lead) for lead in records]), 200


# Public contact form endpoint
@v1_bp.route("/leads", methods=["POST"])
def submit_lead():
    lead = leads.create(json_body())
    return jsonify(leads.normalize(lead)), 201


@v1_bp.route("/leads", methods=["PUT"])
def update_lead():
    record_id = record_id_from_request()
    lead = leads.update(record_id, json_body())
    return jsonify(leads.normalize(lead)), 200


@v1_bp.route("/leads", methods=["DELETE"])
def delete_lead():
    deleted = leads.delete(record_id_from_request())
    return jsonify({
        "message": "Lead deleted successfully",
        "lead": deleted
    }), 200
