"""
main.py

Flask backend for the elogbook personal journal.

Dependencies:
  - Python packages: Flask, flask-restx, flask-cors, redis
  - Infrastructure: Redis server (entry storage)

Notes:
  - Download tokens live in process memory; restarting invalidates them
  - API v1 endpoints available at /api/v1/ with Swagger docs at /api/v1/docs
  - Serve with a single process (threads are fine): tokens are not shared
    between processes
"""

import logging
import os

from app_factory import create_app

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = create_app()

if __name__ == "__main__":
    host = os.getenv("FLASK_HOST", "127.0.0.1")
    port = int(os.getenv("FLASK_PORT", 8080))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true"

    app.run(host=host, port=port, debug=debug, threaded=True)
