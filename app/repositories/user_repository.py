import asyncpg

from app.database.query_builder import bind_named
from app.models.user import User


class UserRepository:

    _SELECT_FIELDS = """
        u.id, u.username, u.email, u.name, u.is_enabled,
        u.created_at, u.updated_at, u.deleted_at
    """

    def __init__(self, conn: asyncpg.Connection):
        self._conn = conn

    async def find_by_id(self, user_id: str) -> User | None:
        query = f"""
            SELECT {self._SELECT_FIELDS}
            FROM "user" u
            WHERE u.id = :user_id AND u.deleted_at IS NULL
        """
        query, values = bind_named(query, {"user_id": user_id})
        row = await self._conn.fetchrow(query, *values)
        return self._map_to_model(row)

    async def find_by_group_id(self, group_id: str) -> list[User]:
        query = f"""
            SELECT {self._SELECT_FIELDS}
            FROM user_group_membership m
            JOIN "user" u ON u.id = m.user_id
            WHERE m.user_group_id = :group_id AND u.deleted_at IS NULL
            ORDER BY u.username
        """
        query, values = bind_named(query, {"group_id": group_id})
        rows = await self._conn.fetch(query, *values)
        return [self._map_to_model(row) for row in rows]

    def _map_to_model(self, row: asyncpg.Record | None) -> User | None:
        if row is None:
            return None
        return User(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            name=row["name"],
            is_enabled=row["is_enabled"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            deleted_at=row["deleted_at"],
        )
