from __future__ import annotations

import os

from flask import Flask, jsonify, request

from integral_request import RequestError, parse_request, serve_request

app = Flask(__name__)


@app.get("/")
def home():
    return "OK. Try /numericalintegralservice/<lower>/<upper>?coefficients=0,0,2&policy=left"


@app.get("/numericalintegralservice/<lower>/<upper>")
def integral_route(lower: str, upper: str):
    try:
        integral_request = parse_request(lower, upper, request.args)
        payload = serve_request(integral_request)
    except RequestError as e:
        app.logger.info("Rejected integral request: %s", e)
        return jsonify({"error": str(e)}), 400

    return jsonify(payload)


if __name__ == "__main__":
    app.run(
        host=os.getenv("INTEGRAL_HOST", "0.0.0.0"),
        port=int(os.getenv("INTEGRAL_PORT", "5000")),
        debug=os.getenv("INTEGRAL_DEBUG", "").lower() in ("1", "true", "yes"),
    )
