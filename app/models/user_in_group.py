from typing import Protocol

from pydantic import BaseModel, ConfigDict

from app.core.exceptions import InvalidArgumentException


class UserIdentity(Protocol):
    id: str | None
    username: str | None


class UserInGroup(BaseModel):
    """
    Snapshot of a user's identity as listed among a group's members.

    The values are copied out of the user when the record is built; the
    record keeps no reference to the user and is never updated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    username: str | None = None

    @classmethod
    def from_user(cls, user: UserIdentity | None) -> "UserInGroup":
        if user is None:
            raise InvalidArgumentException(
                "Cannot build a group member from a missing user", argument="user"
            )
        return cls(id=user.id, username=user.username)
