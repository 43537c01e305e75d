"""HTTP handlers for creating, listing, showing, updating and deleting openings."""

from __future__ import annotations

import json
import sqlite3
from typing import Any

from flask import Blueprint, request

from .database import OpeningNotFound, OpeningStore
from .logger import get_logger
from .payloads import CreateOpeningRequest, UpdateOpeningRequest, ValidationError

_Reply = tuple[dict[str, Any], int]


def _json_body() -> Any:
    """Decode the request body as JSON, raising ValidationError if it is malformed."""
    raw = request.get_data(as_text=True)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(str(exc)) from exc


def make_blueprint(store: OpeningStore) -> Blueprint:
    """Return a blueprint serving the opening endpoints backed by ``store``."""
    logger = get_logger("handler")
    blueprint = Blueprint("openings", __name__)

    @blueprint.get("/openings")
    def list_openings() -> _Reply:
        try:
            openings = store.list()
        except sqlite3.Error:
            return {"error": "Failed to retrieve openings"}, 500
        return {"openings": [opening.to_dict() for opening in openings]}, 200

    @blueprint.get("/opening")
    def show_opening() -> _Reply:
        opening_id = request.args.get("id", "")
        if not opening_id:
            return {"error": "ID is required"}, 400
        try:
            opening = store.get(opening_id)
        except (OpeningNotFound, sqlite3.Error):
            return {"error": "Opening not found"}, 404
        return {"opening": opening.to_dict()}, 200

    @blueprint.post("/opening")
    def create_opening() -> _Reply:
        try:
            payload = CreateOpeningRequest.from_json(_json_body())
        except ValidationError as exc:
            return {"error": str(exc)}, 400
        try:
            opening = store.create(
                role=payload.role,
                company=payload.company,
                location=payload.location,
                remote=payload.remote,
                link=payload.link,
                salary=payload.salary,
            )
        except sqlite3.Error as exc:
            logger.error("Failed to create opening: %s", exc)
            return {"error": "Failed to create opening"}, 500
        return {"message": "Opening created successfully", "opening": opening.to_dict()}, 201

    @blueprint.delete("/opening")
    def delete_opening() -> _Reply:
        opening_id = request.args.get("id", "")
        if not opening_id:
            return {"error": "ID is required"}, 400
        try:
            opening = store.get(opening_id)
        except (OpeningNotFound, sqlite3.Error):
            return {"error": "Opening not found"}, 404
        try:
            deleted = store.delete(opening)
        except (OpeningNotFound, sqlite3.Error):
            return {"error": "Failed to delete opening"}, 500
        return {"message": "Opening deleted successfully", "opening": deleted.to_dict()}, 200

    @blueprint.put("/opening")
    def update_opening() -> _Reply:
        try:
            payload = UpdateOpeningRequest.from_json(_json_body())
        except ValidationError as exc:
            return {"error": str(exc)}, 400
        try:
            opening = store.get(payload.id)
        except (OpeningNotFound, sqlite3.Error):
            return {"error": "Opening not found"}, 404
        opening.role = payload.role
        opening.company = payload.company
        opening.location = payload.location
        opening.remote = payload.remote
        opening.link = payload.link
        opening.salary = payload.salary
        try:
            saved = store.save(opening)
        except (OpeningNotFound, sqlite3.Error):
            return {"error": "Failed to update opening"}, 500
        return {"message": "Opening updated successfully", "opening": saved.to_dict()}, 200

    return blueprint