"""
Dependency Resolution
=====================

FastAPI dependencies resolving services from the container attached to the
application in ``create_application``.
"""
from fastapi import Request

from users_api.application.services.user_service import UserService
from users_api.di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    Get the DI container of the running application.

    Returns:
        DIContainer instance
    """
    return request.app.state.container


def get_user_service(request: Request) -> UserService:
    """
    Get user service instance (singleton per container).

    Returns:
        UserService instance
    """
    return get_container(request).get(UserService)
