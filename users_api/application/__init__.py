"""
Application Layer
=================

DTOs, services and use cases built on the domain layer.
"""
