from app.repositories.user_group_repository import UserGroupRepository
from app.repositories.user_repository import UserRepository

__all__ = [
    "UserGroupRepository",
    "UserRepository",
]
