"""Entry point for the Warranty Checker service.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the environment variables ``HOST`` and ``PORT`` (defaults
``0.0.0.0`` and ``8000``).  Every other setting is read by
``warranty_checker.app.core.config`` from the environment, so export
them before running.

Usage:
    python run.py
"""
import logging
import os

from uvicorn import Config, Server

from warranty_checker.app.main import app


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
