"""Dependency injection container and providers."""
from .container import DIContainer, build_container

__all__ = ["DIContainer", "build_container"]
