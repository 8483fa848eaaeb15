from flask import jsonify
from artroad.application.public_home import home_content
from artroad.application.site_profile import load_site_profile
from . import v1_bp


@v1_bp.route("/site-profile", methods=["GET"])
def site_profile():
    return jsonify(load_site_profile().to_dict()), 200


@v1_bp.route("/public/home", methods=["GET"])
def public_home():
    return jsonify(home_content()), 200
