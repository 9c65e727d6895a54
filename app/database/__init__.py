import logging
from collections.abc import AsyncGenerator
from typing import Annotated, Optional

import asyncpg
from fastapi import Depends

from app.core.exceptions import AppException
from app.core.settings import settings

logger = logging.getLogger(__name__)


class PostgreSQLConnection:

    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        password: str,
        database: str,
        min_size: int = 1,
        max_size: int = 10,
    ):
        self.pool: Optional[asyncpg.Pool] = None
        self.database = database
        self.config = {
            "host": host,
            "port": port,
            "user": user,
            "password": password,
            "database": database,
            "min_size": min_size,
            "max_size": max_size,
        }

    async def connect(self) -> None:
        if self.pool is not None:
            logger.debug("Connection pool already open for %s", self.database)
            return

        logger.info("Connecting to PostgreSQL database: %s", self.database)
        try:
            self.pool = await asyncpg.create_pool(**self.config)
        except (OSError, asyncpg.PostgresError) as e:
            logger.error("Failed to open connection pool for %s: %s", self.database, e)
            self.pool = None
            raise AppException(
                code="DATABASE_UNAVAILABLE",
                message=f"Database connection failed: {e}",
                status_code=503,
            ) from e
        logger.info("Connection pool ready for %s", self.database)

    async def close(self) -> None:
        if self.pool is None:
            return

        logger.info("Closing PostgreSQL connection pool: %s", self.database)
        try:
            await self.pool.close()
        finally:
            self.pool = None

    def get_connection(self) -> asyncpg.pool.PoolAcquireContext:
        if self.pool is None:
            logger.error("Connection pool not initialized for %s", self.database)
            raise AppException(
                code="DATABASE_NOT_INITIALIZED",
                message="Database connection pool is not initialized",
                status_code=500,
            )
        return self.pool.acquire()

    def is_connected(self) -> bool:
        return self.pool is not None and not self.pool.is_closing()


db_connection = PostgreSQLConnection(
    host=settings.database_host,
    port=settings.database_port,
    user=settings.database_user,
    password=settings.database_password,
    database=settings.database_name,
    min_size=settings.database_pool_min_size,
    max_size=settings.database_pool_max_size,
)


async def get_db_connection() -> AsyncGenerator[asyncpg.Connection, None]:
    async with db_connection.get_connection() as connection:
        yield connection


DbConnectionDep = Annotated[asyncpg.Connection, Depends(get_db_connection)]
