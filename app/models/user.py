from datetime import datetime

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: str | None = None
    username: str | None = None
    email: str | None = None
    name: str | None = None
    is_enabled: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
