import logging

from fastapi import APIRouter

from app.core.dependencies import UserGroupServiceDep
from app.models.user_in_group import UserInGroup
from app.schemas.common import ApiResponse, create_success_response
from app.schemas.user_group import (
    RemoveMemberResponse,
    UserGroupDetailResponse,
    UserGroupMembersResponse,
    UserInGroupResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user-groups", tags=["user-groups"])


def _to_member_response(member: UserInGroup) -> UserInGroupResponse:
    return UserInGroupResponse(id=member.id, username=member.username)


@router.get("/{group_id}", response_model=ApiResponse)
async def get_user_group(group_id: str, service: UserGroupServiceDep):
    result = await service.get_group_with_members(group_id)
    group = result.group
    response = UserGroupDetailResponse(
        id=group.id,
        name=group.name,
        description=group.description,
        workspace_id=group.workspace_id,
        created_at=group.created_at,
        updated_at=group.updated_at,
        users=[_to_member_response(member) for member in result.users],
    )
    return create_success_response(data=response.model_dump(mode="json"))


@router.get("/{group_id}/users", response_model=ApiResponse)
async def get_user_group_members(group_id: str, service: UserGroupServiceDep):
    members = await service.get_group_members(group_id)
    response = UserGroupMembersResponse(
        items=[_to_member_response(member) for member in members],
        total=len(members),
    )
    return create_success_response(data=response.model_dump(mode="json"))


@router.put("/{group_id}/users/{user_id}", response_model=ApiResponse)
async def add_user_to_group(group_id: str, user_id: str, service: UserGroupServiceDep):
    member = await service.add_user_to_group(group_id, user_id)
    return create_success_response(data=_to_member_response(member).model_dump(mode="json"))


@router.delete("/{group_id}/users/{user_id}", response_model=ApiResponse)
async def remove_user_from_group(
    group_id: str, user_id: str, service: UserGroupServiceDep
):
    removed = await service.remove_user_from_group(group_id, user_id)
    return create_success_response(data=RemoveMemberResponse(removed=removed).model_dump())
