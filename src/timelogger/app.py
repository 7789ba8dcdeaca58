# app.py

from flask import Flask, Response, jsonify, request

from .handler import handle_ingest, handle_liveness
from .sheet_writer import connect_to_sheet


def json_response(result) -> Response:
    # Failures are reported in the body; the status code is always 200
    return jsonify(result.to_dict())


def text_response(text: str) -> Response:
    return Response(text, status=200, mimetype="text/plain")


def create_app(sheet=None) -> Flask:
    """
    Builds the web app. `sheet` is a worksheet or a callable returning one;
    by default the configured sheet is opened on every POST.
    Every path is served, like a deployed web-app URL (".../exec").
    """
    app = Flask(__name__)
    target = sheet if sheet is not None else connect_to_sheet

    @app.route("/", defaults={"path": ""}, methods=["GET", "POST"])
    @app.route("/<path:path>", methods=["GET", "POST"])
    def index(path):
        if request.method == "POST":
            return json_response(handle_ingest(request.get_data(), target))
        return text_response(handle_liveness())

    return app
