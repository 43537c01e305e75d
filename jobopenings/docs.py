"""The Swagger 2.0 description of the openings API."""

from __future__ import annotations

from typing import Any

_OPENING_RESPONSE_REF = "#/definitions/schemas.OpeningResponse"


def _ref(name: str) -> dict[str, str]:
    return {"$ref": f"#/definitions/{name}"}


def _id_query_parameter() -> dict[str, Any]:
    return {
        "type": "string",
        "description": "Opening ID",
        "name": "id",
        "in": "query",
        "required": True,
    }


def _body_parameter(definition: str) -> dict[str, Any]:
    return {
        "description": "Request Body",
        "name": "request",
        "in": "body",
        "required": True,
        "schema": _ref(definition),
    }


def _operation(
    summary: str,
    tag: str,
    parameters: list[dict[str, Any]],
    status: str,
    status_text: str,
    response: str,
) -> dict[str, Any]:
    operation: dict[str, Any] = {
        "description": summary,
        "consumes": ["application/json"],
        "produces": ["application/json"],
        "tags": [tag],
        "summary": summary,
    }
    if parameters:
        operation["parameters"] = parameters
    operation["responses"] = {
        status: {"description": status_text, "schema": _ref(response)},
        "500": {
            "description": "Internal Server Error",
            "schema": _ref("handler.ErrorResponse"),
        },
    }
    return operation


def _message_with_opening() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "message": {"type": "string"},
            "opening": {"$ref": _OPENING_RESPONSE_REF},
        },
    }


def _opening_fields() -> dict[str, Any]:
    return {
        "company": {"type": "string"},
        "link": {"type": "string"},
        "location": {"type": "string"},
        "remote": {"type": "boolean"},
        "role": {"type": "string"},
        "salary": {"type": "integer"},
    }


def _definitions() -> dict[str, Any]:
    update_properties = {"company": {"type": "string"}, "id": {"type": "string"}}
    update_properties.update({k: v for k, v in _opening_fields().items() if k != "company"})
    return {
        "handler.CreateOpeningRequest": {
            "type": "object",
            "required": ["company", "link", "location", "remote", "role", "salary"],
            "properties": _opening_fields(),
        },
        "handler.CreateOpeningResponse": _message_with_opening(),
        "handler.DeleteOpeningResponse": _message_with_opening(),
        "handler.ErrorResponse": {
            "type": "object",
            "properties": {
                "errorCode": {"type": "string"},
                "message": {"type": "string"},
            },
        },
        "handler.ListOpeningResponse": {
            "type": "object",
            "properties": {
                "openings": {"type": "array", "items": {"$ref": _OPENING_RESPONSE_REF}},
            },
        },
        "handler.ShowOpeningResponse": {
            "type": "object",
            "properties": {"opening": {"$ref": _OPENING_RESPONSE_REF}},
        },
        "handler.UpdateOpeningRequest": {
            "type": "object",
            "required": ["company", "id", "link", "location", "remote", "role", "salary"],
            "properties": update_properties,
        },
        "handler.UpdateOpeningResponse": _message_with_opening(),
        "schemas.OpeningResponse": {
            "type": "object",
            "properties": {
                "company": {"type": "string"},
                "createdAt": {"type": "string"},
                "deletedAt": {"type": "string"},
                "id": {"type": "integer"},
                "link": {"type": "string"},
                "location": {"type": "string"},
                "remote": {"type": "boolean"},
                "role": {"type": "string"},
                "salary": {"type": "integer"},
                "updatedAt": {"type": "string"},
            },
        },
    }


def swagger_spec(
    base_path: str = "",
    host: str = "",
    title: str = "",
    version: str = "",
    description: str = "",
) -> dict[str, Any]:
    """Return a fresh Swagger 2.0 document for the API."""
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {
            "description": description,
            "title": title,
            "contact": {},
            "version": version,
        },
        "host": host,
        "basePath": base_path,
        "paths": {
            "/opening": {
                "get": _operation(
                    "Show a job opening", "opening", [_id_query_parameter()],
                    "200", "OK", "handler.ShowOpeningResponse",
                ),
                "put": _operation(
                    "Update a job opening", "opening",
                    [_body_parameter("handler.UpdateOpeningRequest")],
                    "200", "OK", "handler.UpdateOpeningResponse",
                ),
                "post": _operation(
                    "Create a new job opening", "opening",
                    [_body_parameter("handler.CreateOpeningRequest")],
                    "201", "Created", "handler.CreateOpeningResponse",
                ),
                "delete": _operation(
                    "Delete a job opening", "opening", [_id_query_parameter()],
                    "200", "OK", "handler.DeleteOpeningResponse",
                ),
            },
            "/openings": {
                "get": _operation(
                    "List job openings", "openings", [],
                    "200", "OK", "handler.ListOpeningResponse",
                ),
            },
        },
        "definitions": _definitions(),
    }