from app.dtos.user_group_dtos import UserGroupWithMembersDTO

__all__ = [
    "UserGroupWithMembersDTO",
]
