"""An in-memory book catalogue served as a JSON HTTP API with a Swagger description."""

__version__ = "1.0.0"