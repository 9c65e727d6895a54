from app.constants.user_group_errors import UserGroupErrorCode

__all__ = [
    "UserGroupErrorCode",
]
