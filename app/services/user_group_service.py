import logging

from app.constants.user_group_errors import UserGroupErrorCode
from app.core.exceptions import NotFoundException
from app.dtos.user_group_dtos import UserGroupWithMembersDTO
from app.models.user_group import UserGroup
from app.models.user_in_group import UserInGroup
from app.repositories.user_group_repository import UserGroupRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserGroupService:
    def __init__(
        self,
        user_repository: UserRepository,
        user_group_repository: UserGroupRepository,
    ):
        self._user_repo = user_repository
        self._group_repo = user_group_repository

    async def get_group_members(self, group_id: str) -> list[UserInGroup]:
        await self._get_group_or_raise(group_id)
        users = await self._user_repo.find_by_group_id(group_id)
        return [UserInGroup.from_user(user) for user in users]

    async def get_group_with_members(self, group_id: str) -> UserGroupWithMembersDTO:
        group = await self._get_group_or_raise(group_id)
        users = await self._user_repo.find_by_group_id(group_id)
        return UserGroupWithMembersDTO(
            group=group,
            users=[UserInGroup.from_user(user) for user in users],
        )

    async def add_user_to_group(self, group_id: str, user_id: str) -> UserInGroup:
        await self._get_group_or_raise(group_id)
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise NotFoundException(
                code=UserGroupErrorCode.USER_NOT_FOUND.value,
                message=f"User with id {user_id} not found",
            )

        inserted = await self._group_repo.add_member(group_id, user_id)
        if inserted:
            logger.info("Added user %s to group %s", user_id, group_id)
        else:
            logger.debug("User %s already in group %s", user_id, group_id)
        return UserInGroup.from_user(user)

    async def remove_user_from_group(self, group_id: str, user_id: str) -> bool:
        await self._get_group_or_raise(group_id)
        removed = await self._group_repo.remove_member(group_id, user_id)
        if removed:
            logger.info("Removed user %s from group %s", user_id, group_id)
        return removed

    async def _get_group_or_raise(self, group_id: str) -> UserGroup:
        group = await self._group_repo.find_by_id(group_id)
        if group is None:
            raise NotFoundException(
                code=UserGroupErrorCode.USER_GROUP_NOT_FOUND.value,
                message=f"User group with id {group_id} not found",
            )
        return group
