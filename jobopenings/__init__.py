"""A JSON HTTP API for managing job openings stored in SQLite."""

__version__ = "0.1.0"