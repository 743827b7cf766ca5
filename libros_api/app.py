"""HTTP server exposing create, read, update and delete of books."""

from __future__ import annotations

import argparse
import json
import re
from typing import Any, Sequence

from flask import Flask, Response, abort, jsonify, request

from .docs import swagger_spec
from .libro import InvalidLibro, Libro
from .store import LibroNotFound, LibroStore

DEFAULT_PORT = 8081
_NOT_FOUND = {"error": "Libro no encontrado"}
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_id(raw: str) -> int:
    """Parse a path identifier; anything unparsable becomes 0."""
    if not _ID_PATTERN.fullmatch(raw):
        return 0
    return int(raw)


def _read_libro() -> Libro:
    body = request.get_data(as_text=True)
    if not body.strip():
        raise InvalidLibro("EOF")
    try:
        data: Any = json.loads(body)
    except json.JSONDecodeError as exc:
        raise InvalidLibro(str(exc)) from exc
    return Libro.from_dict(data)


def create_app(store: LibroStore | None = None) -> Flask:
    """Build the application serving books from the given store."""
    libros = LibroStore() if store is None else store
    app = Flask(__name__)
    app.json.sort_keys = False

    def not_found() -> tuple[Response, int]:
        return jsonify(_NOT_FOUND), 404

    def bad_request(exc: InvalidLibro) -> tuple[Response, int]:
        return jsonify({"error": str(exc)}), 400

    @app.get("/libros")
    def listar_libros():
        return jsonify([libro.to_dict() for libro in libros.list()]), 200

    @app.post("/libros")
    def crear_libro():
        try:
            libro = _read_libro()
        except InvalidLibro as exc:
            return bad_request(exc)
        return jsonify(libros.add(libro).to_dict()), 201

    @app.get("/libros/<libro_id>")
    def obtener_libro(libro_id: str):
        try:
            libro = libros.get(_parse_id(libro_id))
        except LibroNotFound:
            return not_found()
        return jsonify(libro.to_dict()), 200

    @app.put("/libros/<libro_id>")
    def actualizar_libro(libro_id: str):
        try:
            libro = _read_libro()
        except InvalidLibro as exc:
            return bad_request(exc)
        try:
            actualizado = libros.update(_parse_id(libro_id), libro)
        except LibroNotFound:
            return not_found()
        return jsonify(actualizado.to_dict()), 200

    @app.delete("/libros/<libro_id>")
    def eliminar_libro(libro_id: str):
        try:
            libros.delete(_parse_id(libro_id))
        except LibroNotFound:
            return not_found()
        return Response(status=204)

    @app.get("/swagger/<path:resource>")
    def swagger(resource: str):
        if resource != "doc.json":
            abort(404)
        return jsonify(swagger_spec())

    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Run the books API server."""
    parser = argparse.ArgumentParser(description="API para gestionar libros (ABM)")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()