"""Swagger 2.0 description of the books API."""

from __future__ import annotations

from typing import Any

TITLE = "API de Libros"
DESCRIPTION = "API para gestionar libros (ABM)"
VERSION = "1.0"
DEFAULT_HOST = "localhost:8081"
DEFAULT_BASE_PATH = "/"

_LIBRO_REF = {"$ref": "#/definitions/main.Libro"}


def _id_param(required: bool) -> dict[str, Any]:
    param: dict[str, Any] = {
        "type": "integer",
        "description": "ID del libro",
        "name": "id",
        "in": "path",
    }
    if required:
        param["required"] = True
    return param


def _body_param(description: str) -> dict[str, Any]:
    return {
        "description": description,
        "name": "libro",
        "in": "body",
        "required": True,
        "schema": dict(_LIBRO_REF),
    }


def swagger_spec(host: str = DEFAULT_HOST, base_path: str = DEFAULT_BASE_PATH) -> dict[str, Any]:
    """Return the Swagger document for the given host and base path."""
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {
            "description": DESCRIPTION,
            "title": TITLE,
            "contact": {},
            "version": VERSION,
        },
        "host": host,
        "basePath": base_path,
        "paths": {
            "/libros": {
                "get": {
                    "produces": ["application/json"],
                    "responses": {
                        "200": {
                            "description": "OK",
                            "schema": {"type": "array", "items": dict(_LIBRO_REF)},
                        }
                    },
                },
                "post": {
                    "consumes": ["application/json"],
                    "produces": ["application/json"],
                    "summary": "Crea un nuevo libro",
                    "parameters": [_body_param("Libro a crear")],
                    "responses": {
                        "201": {"description": "Created", "schema": dict(_LIBRO_REF)}
                    },
                },
            },
            "/libros/{id}": {
                "get": {
                    "produces": ["application/json"],
                    "summary": "Obtiene un libro por ID",
                    "parameters": [_id_param(required=True)],
                    "responses": {
                        "200": {"description": "OK", "schema": dict(_LIBRO_REF)},
                        "404": {
                            "description": "Libro no encontrado",
                            "schema": {"type": "string"},
                        },
                    },
                },
                "put": {
                    "consumes": ["application/json"],
                    "produces": ["application/json"],
                    "summary": "Actualiza un libro",
                    "parameters": [
                        _id_param(required=False),
                        _body_param("Libro actualizado"),
                    ],
                    "responses": {
                        "200": {"description": "OK", "schema": dict(_LIBRO_REF)}
                    },
                },
                "delete": {
                    "summary": "Elimina un libro",
                    "parameters": [_id_param(required=True)],
                    "responses": {"204": {"description": "No Content"}},
                },
            },
        },
        "definitions": {
            "main.Libro": {
                "type": "object",
                "properties": {
                    "autor": {"type": "string"},
                    "genero": {"type": "string"},
                    "id": {"type": "integer"},
                    "titulo": {"type": "string"},
                },
            }
        },
    }