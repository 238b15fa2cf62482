"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: FastAPI route handlers
- error_handlers: app-wide exception handlers
"""
