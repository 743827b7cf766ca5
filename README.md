# libros-api

A small HTTP service that keeps a catalogue of books in memory. It exposes
create, read, update and delete operations as JSON endpoints and serves a
Swagger 2.0 description of itself.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running the server

```
libros-api
```

Options:

- `--host` is the address to listen on. The default is `0.0.0.0`.
- `--port` is the port to listen on. The default is `8081`.

The command runs Flask's built-in server.

## Endpoints

| Method | Path                  | Result                                           |
|--------|-----------------------|--------------------------------------------------|
| GET    | `/libros`             | `200` with a list of every book                  |
| POST   | `/libros`             | `201` with the created book, which gets a new id |
| GET    | `/libros/<id>`        | `200` with the book, or `404`                    |
| PUT    | `/libros/<id>`        | `200` with the replaced book, or `404`           |
| DELETE | `/libros/<id>`        | `204` with no body, or `404`                     |
| GET    | `/swagger/doc.json`   | `200` with the Swagger 2.0 document              |

A book is a JSON object with these fields:

```json
{"id": 1, "titulo": "Go Programming", "autor": "John Doe", "genero": "Programacion"}
```

The server assigns ids when books are created. An `id` sent in a POST or PUT
body is ignored. Body keys are matched to field names without regard to case.
Unknown keys are ignored. A field that is missing or `null` gets its empty
value, `0` or `""`.

A body that is empty, is not valid JSON, is not an object, or has a field of
the wrong type gets `400` with `{"error": "..."}`. A missing book gets `404`
with `{"error": "Libro no encontrado"}`. A path id that is not an integer is
treated as `0`, which no book has, so it also gets `404`.

Ids start at 1 and keep counting up. An id is not used again after its book
is deleted.

## Using it from Python

`libros_api.app.create_app(store)` builds the Flask application on top of a
`libros_api.store.LibroStore`. If `store` is `None`, it creates a new, empty
store. You can use the application in your own server or in tests:

```python
from libros_api.app import create_app
from libros_api.store import LibroStore

store = LibroStore()
app = create_app(store)
client = app.test_client()

created = client.post("/libros", json={"titulo": "Rayuela", "autor": "Cortázar", "genero": "Novela"})
assert created.status_code == 201
assert store.get(1).titulo == "Rayuela"
```

`LibroStore` also works on its own. Its methods are safe to call from several
threads:

- `add(libro)` gives the book the next id, stores it, and returns the stored book.
- `get(libro_id)`, `update(libro_id, libro)` and `delete(libro_id)` raise
  `LibroNotFound` when no book has that id.
- `list()` returns the books in the order they were added.
- `reset()` empties the store and starts ids from 1 again.
- `len(store)` is the number of books.

The store returns copies, so changing a returned `Libro` does not change the
store.

`libros_api.libro.Libro` is a dataclass with `id`, `titulo`, `autor` and
`genero`. `Libro.from_dict(data)` builds a book from decoded JSON. It raises
`InvalidLibro` when the data is not a mapping, when a field has the wrong type,
or when `id` does not fit in a signed 64-bit integer. `Libro.to_dict()` goes
the other way.

## API description

`libros_api.docs.swagger_spec(host, base_path)` returns the Swagger 2.0
document as a dictionary. The defaults are `localhost:8081` and `/`. The server
serves the document with those defaults at `/swagger/doc.json`.

## What it does not do

- Books are kept only in memory. Nothing is saved to disk, so the catalogue is
  empty each time the server starts.
- Only the Swagger JSON document is served. There is no interactive
  documentation page, and any other path under `/swagger/` gets `404`.