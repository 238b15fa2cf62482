"""
Domain Layer
============

User entity, field constants, exceptions and the repository interface.
No framework or database dependencies live here.
"""
