from flask import jsonify, request
from artroad.application.content.trusted_companies import trusted_companies
from artroad.utils.request_args import (
    json_body,
    list_params_from_request,
    record_id_from_request,
)
from . import v1_bp


@v1_bp.route("/trusted-companies", methods=["GET"])
def get_trusted_companies():
    if "id" in request.args:
        company = trusted_companies.get(record_id_from_request())
        return jsonify(trusted_companies.normalize(company)), 200

    companies = trusted_companies.list(list_params_from_request())
    return jsonify([trusted_companies.normalize(c) for c in companies]), 200


@v1_bp.route("/trusted-companies", methods=["POST"])
def create_trusted_company():
    company = trusted_companies.create(json_body())
    return jsonify(trusted_companies.normalize(company)), 201


@v1_bp.route("/trusted-companies", methods=["PUT"])
def update_trusted_company():
    record_id = record_id_from_request()
    company = trusted_companies.update(record_id, json_body())
    return jsonify(trusted_companies.normalize(company)), 200


@v1_bp.route("/trusted-companies", methods=["DELETE"])
def delete_trusted_company():
    deleted = trusted_companies.delete(record_id_from_request())
    return jsonify({
        "message": "Trusted company deleted successfully",
        "trustedCompany": deleted
    }), 200
