"""The web application, its routes, and the command that serves it."""

from __future__ import annotations

import argparse
import html
import sqlite3
from collections.abc import Sequence
from typing import Any

from flask import Flask, abort

from .database import DEFAULT_PATH, OpeningStore, initialize_sqlite
from .docs import swagger_spec
from .handlers import make_blueprint
from .logger import get_logger

BASE_PATH = "/api/v1"
DEFAULT_PORT = 8080


def _docs_page(spec: dict[str, Any]) -> str:
    items = []
    for path, operations in spec["paths"].items():
        for method, operation in operations.items():
            items.append(
                f"<li><code>{html.escape(method.upper())} "
                f"{html.escape(spec['basePath'] + path)}</code> "
                f"{html.escape(operation['summary'])}</li>"
            )
    return (
        "<!DOCTYPE html><html><head><title>API documentation</title></head><body>"
        "<h1>API documentation</h1>"
        f"<ul>{''.join(items)}</ul>"
        '<p><a href="doc.json">doc.json</a></p>'
        "</body></html>"
    )


def create_app(store: OpeningStore) -> Flask:
    """Return the application serving the API under /api/v1 and its docs under /swagger."""
    app = Flask("jobopenings")
    app.register_blueprint(make_blueprint(store), url_prefix=BASE_PATH)

    @app.get("/swagger/", defaults={"resource": "index.html"})
    @app.get("/swagger/<path:resource>")
    def swagger(resource: str) -> Any:
        spec = swagger_spec(base_path=BASE_PATH)
        if resource == "doc.json":
            return spec
        if resource == "index.html":
            return _docs_page(spec)
        abort(404)

    return app


def run(port: int = DEFAULT_PORT, db_path: str = DEFAULT_PATH) -> None:
    """Open the database and serve the API on ``port`` until stopped."""
    logger = get_logger("main")
    try:
        store = initialize_sqlite(db_path)
    except (OSError, sqlite3.Error) as exc:
        logger.error("Error initializing the application: %s", exc)
        return
    with store:
        create_app(store).run(host="0.0.0.0", port=port)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse the command line and start the server."""
    parser = argparse.ArgumentParser(description="Serve the job openings API.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--db", default=DEFAULT_PATH, help="path of the SQLite database")
    args = parser.parse_args(argv)
    run(port=args.port, db_path=args.db)