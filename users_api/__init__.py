"""Users API: CRUD HTTP service over a MongoDB user collection."""

__version__ = "1.0.0"
