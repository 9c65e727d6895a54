from datetime import datetime

from pydantic import BaseModel


class UserInGroupResponse(BaseModel):
    id: str | None
    username: str | None


class UserGroupDetailResponse(BaseModel):
    id: str
    name: str
    description: str | None
    workspace_id: str | None
    created_at: datetime
    updated_at: datetime
    users: list[UserInGroupResponse]


class UserGroupMembersResponse(BaseModel):
    items: list[UserInGroupResponse]
    total: int


class RemoveMemberResponse(BaseModel):
    removed: bool
