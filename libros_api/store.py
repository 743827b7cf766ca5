"""In-memory collection of books with sequential identifiers."""

from __future__ import annotations

import threading
from dataclasses import replace

from .libro import Libro


class LibroNotFound(LookupError):
    """Raised when no book has the requested identifier."""

    def __init__(self, libro_id: int) -> None:
        super().__init__(f"Libro no encontrado: {libro_id}")
        self.libro_id = libro_id


class LibroStore:
    """Books kept in insertion order; identifiers start at 1."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._libros: list[Libro] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._libros)

    def list(self) -> list[Libro]:
        """Return all books in insertion order."""
        with self._lock:
            return [replace(libro) for libro in self._libros]

    def add(self, libro: Libro) -> Libro:
        """Store a book under the next identifier and return it."""
        with self._lock:
            stored = replace(libro, id=self._next_id)
            self._next_id += 1
            self._libros.append(stored)
            return replace(stored)

    def get(self, libro_id: int) -> Libro:
        """Return the book with the given identifier."""
        with self._lock:
            return replace(self._libros[self._index(libro_id)])

    def update(self, libro_id: int, libro: Libro) -> Libro:
        """Replace the book with the given identifier and return the new one."""
        with self._lock:
            position = self._index(libro_id)
            stored = replace(libro, id=libro_id)
            self._libros[position] = stored
            return replace(stored)

    def delete(self, libro_id: int) -> None:
        """Remove the book with the given identifier."""
        with self._lock:
            del self._libros[self._index(libro_id)]

    def reset(self) -> None:
        """Remove every book and restart identifiers at 1."""
        with self._lock:
            self._libros.clear()
            self._next_id = 1

    def _index(self, libro_id: int) -> int:
        for position, libro in enumerate(self._libros):
            if libro.id == libro_id:
                return position
        raise LibroNotFound(libro_id)