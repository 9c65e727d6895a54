from app.models.user import User
from app.models.user_group import UserGroup
from app.models.user_in_group import UserInGroup

__all__ = [
    "User",
    "UserGroup",
    "UserInGroup",
]
