import asyncpg

from app.database.query_builder import bind_named
from app.models.user_group import UserGroup


class UserGroupRepository:

    _SELECT_FIELDS = """
        id, name, description, workspace_id, created_at, updated_at
    """

    def __init__(self, conn: asyncpg.Connection):
        self._conn = conn

    async def find_by_id(self, group_id: str) -> UserGroup | None:
        query = f"""
            SELECT {self._SELECT_FIELDS}
            FROM user_group
            WHERE id = :group_id
        """
        query, values = bind_named(query, {"group_id": group_id})
        row = await self._conn.fetchrow(query, *values)
        return self._map_to_model(row)

    async def add_member(self, group_id: str, user_id: str) -> bool:
        query = """
            INSERT INTO user_group_membership (user_group_id, user_id, created_at)
            VALUES (:group_id, :user_id, NOW())
            ON CONFLICT (user_group_id, user_id) DO NOTHING
        """
        query, values = bind_named(query, {"group_id": group_id, "user_id": user_id})
        result = await self._conn.execute(query, *values)
        return result == "INSERT 0 1"

    async def remove_member(self, group_id: str, user_id: str) -> bool:
        query = """
            DELETE FROM user_group_membership
            WHERE user_group_id = :group_id AND user_id = :user_id
        """
        query, values = bind_named(query, {"group_id": group_id, "user_id": user_id})
        result = await self._conn.execute(query, *values)
        return result == "DELETE 1"

    def _map_to_model(self, row: asyncpg.Record | None) -> UserGroup | None:
        if row is None:
            return None
        return UserGroup(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            workspace_id=row["workspace_id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
