"""HTTP API for seeding tables and starting sending workers."""

from __future__ import annotations

import argparse
import logging
import os
import sqlite3
import threading
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from .database import DataContext, init_db_connection
from .models import BackgroundWorkerSettings
from .repository import new_repository
from .seed import SeedProcessor
from .store import get_worker_store
from .worker import SendWorker


def _json_body() -> dict:
    body = request.get_json(force=True, silent=True)
    if body is None:
        raise ValueError("request body must be valid JSON")
    return body


def create_app(context: DataContext | None = None) -> Flask:
    """Build the application; context defaults to the shared database connection."""
    app = Flask(__name__)

    @app.post("/start")
    def start():
        try:
            settings = BackgroundWorkerSettings.from_dict(_json_body())
        except (TypeError, ValueError) as exc:
            return jsonify(error=str(exc)), 400
        worker = SendWorker(settings, new_repository(context))
        worker_id = get_worker_store().add(worker)
        threading.Thread(
            target=worker.do_work, name=f"send-worker-{worker_id}", daemon=True
        ).start()
        return jsonify(workerId=worker_id), 400

    @app.get("/stop")
    def stop():
        return "", 200

    @app.post("/seed")
    def seed():
        try:
            processor = SeedProcessor.from_dict(_json_body())
        except (TypeError, ValueError) as exc:
            return jsonify(error=str(exc)), 400
        try:
            processor.process_json(new_repository(context))
        except (TypeError, ValueError, sqlite3.Error) as exc:
            return jsonify(error=str(exc)), 500
        return "", 200

    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Load the configuration, open the database and serve the API."""
    parser = argparse.ArgumentParser(prog="objectshooter")
    parser.add_argument("--config", default="config.env", help="environment file to load")
    parser.add_argument("--port", type=int, default=8888)
    args = parser.parse_args(argv)

    config = Path(args.config)
    if not config.is_file():
        raise FileNotFoundError(f"configuration file not found: {config}")
    load_dotenv(config)
    logging.basicConfig(level=logging.INFO)

    context = init_db_connection(
        os.environ.get("DB_DRIVER", ""), os.environ.get("DB_CONNECTION_STRING", "")
    )
    create_app(context).run(host="0.0.0.0", port=args.port)