# Application layer: services that orchestrate domain and infrastructure.

from app.application.user_repository import UserRepository
from app.application.user_service import UserService

__all__ = [
    "UserRepository",
    "UserService",
]
