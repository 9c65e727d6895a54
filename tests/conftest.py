from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from app.models.user import User
from app.models.user_group import UserGroup

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def alice() -> User:
    return User(id="u-42", username="alice", email="alice@example.com", name="Alice")


@pytest.fixture
def bob() -> User:
    return User(id="u-7", username="bob", email="bob@example.com", name="Bob")


@pytest.fixture
def engineering() -> UserGroup:
    return UserGroup(
        id="g-1",
        name="Engineering",
        description="Builds things",
        workspace_id="w-1",
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.fixture
def conn() -> AsyncMock:
    """Stands in for an asyncpg connection."""
    return AsyncMock()
