from typing import Annotated

from fastapi import Depends

from app.database import DbConnectionDep
from app.repositories.user_group_repository import UserGroupRepository
from app.repositories.user_repository import UserRepository
from app.services.user_group_service import UserGroupService


def get_user_repository(conn: DbConnectionDep) -> UserRepository:
    return UserRepository(conn)


def get_user_group_repository(conn: DbConnectionDep) -> UserGroupRepository:
    return UserGroupRepository(conn)


def get_user_group_service(
    user_repository: UserRepository = Depends(get_user_repository),
    user_group_repository: UserGroupRepository = Depends(get_user_group_repository),
) -> UserGroupService:
    return UserGroupService(
        user_repository=user_repository,
        user_group_repository=user_group_repository,
    )


UserGroupServiceDep = Annotated[UserGroupService, Depends(get_user_group_service)]
