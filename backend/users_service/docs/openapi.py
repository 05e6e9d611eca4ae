"""Builds a minimal OpenAPI spec from existing Pydantic schemas."""
from __future__ import annotations

from typing import Any, Dict

from flask import request

from ..api.users.schemas import UserCreatedOut, UserIn, UserListOut, UserOut

REF = "#/components/schemas/{model}"

_FIELD_ERRORS = {"description": "Invalid input (field -> message)"}
_NOT_FOUND = {"description": "User not found"}


def _schemas() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for model in (UserIn, UserOut, UserCreatedOut, UserListOut):
        schema = model.model_json_schema(ref_template=REF, by_alias=True)
        out.update(schema.pop("$defs", {}))
        out[model.__name__] = schema
    return out


def _json(model: str, description: str) -> Dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"schema": {"$ref": REF.format(model=model)}}},
    }


def build_openapi() -> Dict[str, Any]:
    base_url = f"{request.scheme}://{request.host}"
    body = {"required": True, "content": {"application/json": {"schema": {"$ref": REF.format(model="UserIn")}}}}
    return {
        "openapi": "3.0.3",
        "info": {"title": "Users Service API", "version": "0.1.0"},
        "servers": [{"url": base_url}],
        "tags": [{"name": "Health"}, {"name": "Users"}],
        "paths": {
            "/api/health/": {
                "get": {"tags": ["Health"], "summary": "Liveness probe", "responses": {"200": {"description": "OK"}}}
            },
            "/api/health/db": {
                "get": {
                    "tags": ["Health"], "summary": "Database connectivity",
                    "responses": {"200": {"description": "OK"}, "503": {"description": "Database unavailable"}},
                }
            },
            "/api/users": {
                "get": {
                    "tags": ["Users"], "summary": "Get a list of users", "operationId": "getUsers",
                    "responses": {"200": _json("UserListOut", "Retrieved users successfully")},
                },
                "post": {
                    "tags": ["Users"], "summary": "Create a new user", "operationId": "createUser",
                    "requestBody": body,
                    "responses": {
                        "201": _json("UserCreatedOut", "User created successfully"),
                        "400": _FIELD_ERRORS,
                        "409": {"description": "Email already in use"},
                    },
                },
            },
            "/api/users/{id}": {
                "parameters": [{"name": "id", "in": "path", "required": True, "schema": {"type": "string", "format": "uuid"}}],
                "get": {
                    "tags": ["Users"], "summary": "Get a user by id", "operationId": "getUserById",
                    "responses": {
                        "200": _json("UserOut", "Retrieved user successfully"),
                        "400": {"description": "Invalid UUID supplied"},
                        "404": _NOT_FOUND,
                    },
                },
                "put": {
                    "tags": ["Users"], "summary": "Update a user by id", "operationId": "updateUser",
                    "requestBody": body,
                    "responses": {"204": {"description": "User updated successfully"}, "400": _FIELD_ERRORS, "404": _NOT_FOUND},
                },
                "delete": {
                    "tags": ["Users"], "summary": "Delete a user by id", "operationId": "deleteUser",
                    "responses": {"204": {"description": "User deleted successfully"}},
                },
            },
        },
        "components": {"schemas": _schemas()},
    }
