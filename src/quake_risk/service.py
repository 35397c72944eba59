"""HTTP surface for the risk scorer.

The catalog is resolved once when the app is created; request handlers only
read it.
"""

from __future__ import annotations

import logging
import os
import time
import uuid

from flask import Flask, jsonify, request

from quake_risk import narratives
from quake_risk.assessment import assess
from quake_risk.catalog import DEFAULT_CATALOG, fetch_catalog, load_catalog
from quake_risk.evaluator import classify
from quake_risk.models import ReferenceLocation
from quake_risk.validation import InvalidInputError, parse_classify, parse_form

logger = logging.getLogger(__name__)


def catalog_from_env() -> tuple[ReferenceLocation, ...]:
    """Resolve the catalog from QUAKE_RISK_CATALOG_PATH / _URL, else the default."""
    path = os.environ.get("QUAKE_RISK_CATALOG_PATH", "")
    url = os.environ.get("QUAKE_RISK_CATALOG_URL", "")
    if path:
        return load_catalog(path)
    if url:
        return fetch_catalog(url)
    return DEFAULT_CATALOG


def _error_response(exc: InvalidInputError, locale: str):
    if locale not in narratives.LOCALES:
        locale = narratives.DEFAULT_LOCALE
    return jsonify({
        "error": narratives.translate(exc.title_key, locale),
        "message": narratives.translate(exc.key, locale),
        "key": exc.key,
        "detail": str(exc),
    }), 400


def create_app(
    catalog: tuple[ReferenceLocation, ...] | list[ReferenceLocation] | None = None,
    locale: str | None = None,
) -> Flask:
    """Build the Flask app.

    Args:
        catalog: Reference locations; resolved from the environment if None.
        locale: Default response language; QUAKE_RISK_LOCALE or 'en' if None.
    """
    app = Flask(__name__)
    app.config["CATALOG"] = tuple(catalog) if catalog is not None else catalog_from_env()
    app.config["LOCALE"] = narratives.check_locale(
        locale or os.environ.get("QUAKE_RISK_LOCALE", narratives.DEFAULT_LOCALE)
    )

    @app.route("/predict", methods=["POST"])
    def predict():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        req_locale = body.get("locale") or app.config["LOCALE"]
        run_id = str(uuid.uuid4())[:8]
        t0 = time.monotonic()
        try:
            risk_input = parse_form(body)
            result = assess(risk_input, app.config["CATALOG"], req_locale)
        except InvalidInputError as exc:
            logger.info("Rejected input: %s", exc, extra={"run_id": run_id})
            return _error_response(exc, req_locale)
        except Exception as exc:
            logger.error("Prediction failed: %s", exc, exc_info=True, extra={"run_id": run_id})
            return jsonify({"error": str(exc)}), 500

        logger.info(
            "Prediction OK",
            extra={
                "run_id": run_id,
                "locale": req_locale,
                "risk_level": result.refined.category.value,
                "score": result.combined.score,
                "nearest": result.refined.nearest_location_name,
                "duration_ms": round((time.monotonic() - t0) * 1000, 2),
            },
        )
        payload = result.to_dict()
        payload["record"] = result.to_record()
        return jsonify(payload), 200

    @app.route("/classify", methods=["POST"])
    def classify_route():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        req_locale = body.get("locale") or app.config["LOCALE"]
        try:
            magnitude, depth, days = parse_classify(body)
        except InvalidInputError as exc:
            logger.info("Rejected classify input: %s", exc)
            return _error_response(exc, req_locale)
        return jsonify({"category": classify(magnitude, depth, days).value}), 200

    @app.route("/health", methods=["GET"])
    def health():
        from datetime import datetime, timezone
        return jsonify({
            "status": "ok",
            "catalog_size": len(app.config["CATALOG"]),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }), 200

    @app.route("/", methods=["GET"])
    def root():
        return jsonify({"service": "quake-risk", "status": "running"}), 200

    return app
