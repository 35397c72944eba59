"""Cloud Run entrypoint for the earthquake risk prediction service.

The reference catalog is resolved once at startup from
QUAKE_RISK_CATALOG_PATH or QUAKE_RISK_CATALOG_URL, falling back to the
built-in city catalog.
"""

from __future__ import annotations

import logging
import os

from quake_risk.logging_config import configure_logging
from quake_risk.service import create_app

configure_logging()

logger = logging.getLogger(__name__)

app = create_app()
logger.info("Predictor ready with %d reference locations", len(app.config["CATALOG"]))


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
