from app.services.user_group_service import UserGroupService

__all__ = [
    "UserGroupService",
]
