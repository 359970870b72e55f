"""HTTP surface: GET /v1/weather?location=<name> served by a Flask app."""
import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import InternalServerError

from attire import AttireService, BadRequestError
from weather_provider import WeatherLookupError


def create_app(service: AttireService) -> Flask:
    """Build a Flask app serving attire recommendations from the given service."""
    app = Flask(__name__)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/v1/weather", methods=["GET"])
    def weather():
        logging.info("received request")
        location = request.args.get("location", "")

        try:
            attire = service.recommend(location)
        except BadRequestError as err:
            logging.warning(f"Rejected request: {err}")
            return "", 400
        except WeatherLookupError as err:
            logging.error(f"Weather lookup failed for {location!r}: {err}")
            return "", 500

        return jsonify(attire.to_dict())

    @app.errorhandler(InternalServerError)
    def internal_error(err):
        # Failure details stay in the log, never in the response body
        return "", 500

    return app
