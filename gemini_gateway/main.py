"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=gemini_gateway.main:app flask run --reload
- python -m gemini_gateway.main
"""

from __future__ import annotations

import logging

from gemini_gateway import create_app
from gemini_gateway.config import Config

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

app = create_app()

if __name__ == "__main__":
    logging.getLogger(__name__).info("Server is running on http://%s:%d", Config.HOST, Config.PORT)
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.GATEWAY_ENV == "dev")
