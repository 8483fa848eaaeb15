from flask import jsonify, request
from artroad.application.content.team import team
from artroad.utils.request_args import (
    json_body,
    list_params_from_request,
    record_id_from_request,
)
from . import v1_bp


@v1_bp.route("/team", methods=["GET"])
def get_team():
    if "id" in request.args:
        member = team.get(record_id_from_request())
        return jsonify(team.normalize(member)), 200

    members = team.list(list_params_from_request())
    return jsonify([team.normalize(m) for m in members]), 200


@v1_bp.route("/team", methods=["POST"])
def create_team_member():
    member = team.create(json_body())
    return jsonify(team.normalize(member)), 201


@v1_bp.route("/team", methods=["PUT"])
def update_team_member():
    record_id = record_id_from_request()
    member = team.update(record_id, json_body())
    return jsonify(team.normalize(member)), 200


@v1_bp.route("/team", methods=["DELETE"])
def delete_team_member():
    deleted = team.delete(record_id_from_request())
    return jsonify({
        "message": "Team member deleted successfully",
        "teamMember": deleted
    }), 200
