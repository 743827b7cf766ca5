import json

import pytest

from libros_api.app import create_app
from libros_api.libro import Libro
from libros_api.store import LibroStore


@pytest.fixture
def store():
    return LibroStore()


@pytest.fixture
def client(store):
    app = create_app(store)
    app.testing = True
    return app.test_client()


def test_crear_libro(client):
    libro = {"id": 1, "titulo": "Go Programming", "autor": "John Doe", "genero": "Programacion"}
    response = client.post("/libros", data=json.dumps(libro), content_type="application/json")
    assert response.status_code == 201
    creado = response.get_json()
    assert creado["id"] == 1
    assert creado["titulo"] == "Go Programming"
    assert creado["autor"] == "John Doe"
    assert creado["genero"] == "Programacion"


def test_listar_libros(client, store):
    store.add(Libro(titulo="Test", autor="Autor", genero="Prueba"))
    response = client.get("/libros")
    assert response.status_code == 200
    assert len(response.get_json()) == 1


def test_listar_libros_empty_is_empty_array(client):
    response = client.get("/libros")
    assert response.status_code == 200
    assert response.get_json() == []


def test_obtener_libro(client, store):
    store.add(Libro(titulo="Test", autor="Autor", genero="Prueba"))
    response = client.get("/libros/1")
    assert response.status_code == 200
    assert response.get_json()["id"] == 1


def test_obtener_libro_not_found(client):
    response = client.get("/libros/1")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Libro no encontrado"}


def test_obtener_libro_non_numeric_id(client, store):
    store.add(Libro(titulo="Test"))
    response = client.get("/libros/abc")
    assert response.status_code == 404


def test_actualizar_libro(client, store):
    store.add(Libro(titulo="Viejo", autor="Autor", genero="Genero"))
    updated = {"titulo": "Nuevo", "autor": "Autor 2", "genero": "Generico"}
    response = client.put("/libros/1", data=json.dumps(updated), content_type="application/json")
    assert response.status_code == 200
    body = response.get_json()
    assert body["titulo"] == "Nuevo"
    assert body["autor"] == "Autor 2"
    assert body["genero"] == "Generico"
    assert body["id"] == 1
    assert store.get(1).titulo == "Nuevo"


def test_actualizar_libro_not_found(client):
    response = client.put("/libros/5", data=json.dumps({"titulo": "Nuevo"}))
    assert response.status_code == 404
    assert response.get_json() == {"error": "Libro no encontrado"}


def test_actualizar_invalid_body_is_bad_request(client, store):
    store.add(Libro(titulo="Viejo"))
    response = client.put("/libros/1", data="{not json", content_type="application/json")
    assert response.status_code == 400
    assert "error" in response.get_json()
    assert store.get(1).titulo == "Viejo"


def test_eliminar_libro(client, store):
    store.add(Libro(titulo="Eliminar", autor="Autor", genero="Genero"))
    response = client.delete("/libros/1")
    assert response.status_code == 204
    assert response.data == b""
    assert len(store.list()) == 0


def test_eliminar_libro_not_found(client):
    response = client.delete("/libros/1")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Libro no encontrado"}


@pytest.mark.parametrize("payload", ["", "[1, 2]", '{"titulo": 3}', '{"id": "1"}'])
def test_crear_invalid_body_is_bad_request(client, store, payload):
    response = client.post("/libros", data=payload, content_type="application/json")
    assert response.status_code == 400
    assert "error" in response.get_json()
    assert store.list() == []


def test_response_field_order(client):
    response = client.post("/libros", data=json.dumps({"genero": "G", "titulo": "T"}))
    assert response.status_code == 201
    assert list(json.loads(response.data)) == ["id", "titulo", "autor", "genero"]


def test_swagger_doc(client):
    response = client.get("/swagger/doc.json")
    assert response.status_code == 200
    assert response.get_json()["info"]["title"] == "API de Libros"


def test_swagger_unknown_resource(client):
    response = client.get("/swagger/missing.js")
    assert response.status_code == 404