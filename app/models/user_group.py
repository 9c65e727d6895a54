from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserGroup(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    workspace_id: str | None = None
    created_at: datetime
    updated_at: datetime
