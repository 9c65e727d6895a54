from pydantic import BaseModel

from app.models.user_group import UserGroup
from app.models.user_in_group import UserInGroup


class UserGroupWithMembersDTO(BaseModel):
    group: UserGroup
    users: list[UserInGroup]
