"""
Infrastructure Layer
====================

Concrete repository implementations (MongoDB, in-memory).
"""
