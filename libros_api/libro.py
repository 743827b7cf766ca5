"""The book record exchanged by the API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class InvalidLibro(ValueError):
    """Raised when a payload cannot be decoded into a book."""


@dataclass
class Libro:
    """A book: identifier, title, author and genre."""

    id: int = 0
    titulo: str = ""
    autor: str = ""
    genero: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation, in wire field order."""
        return {
            "id": self.id,
            "titulo": self.titulo,
            "autor": self.autor,
            "genero": self.genero,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Libro":
        """Build a book from decoded JSON.

        Keys match field names case-insensitively, unknown keys are ignored,
        and missing or null fields keep their zero value.
        """
        if not isinstance(data, Mapping):
            raise InvalidLibro(
                f"cannot decode {type(data).__name__} into Libro: expected an object"
            )
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = str(key).lower()
            if name not in _FIELD_TYPES or value is None:
                continue
            values[name] = _check_field(name, value)
        return cls(**values)


_FIELD_TYPES = {"id": int, "titulo": str, "autor": str, "genero": str}


def _check_field(name: str, value: Any) -> Any:
    expected = _FIELD_TYPES[name]
    if expected is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidLibro(
                f"cannot decode {type(value).__name__} into field Libro.{name} of type int"
            )
        if not _INT_MIN <= value <= _INT_MAX:
            raise InvalidLibro(f"value {value} overflows field Libro.{name} of type int")
        return value
    if not isinstance(value, str):
        raise InvalidLibro(
            f"cannot decode {type(value).__name__} into field Libro.{name} of type string"
        )
    return value