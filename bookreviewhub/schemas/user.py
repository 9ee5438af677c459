"""Response schemas for user endpoints (never include the password hash)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from bookreviewhub.models.user import Role, Status


class UserProfile(BaseModel):
    """Public view of a user record; JSON keys are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    username: str
    email: str
    role: Role
    status: Status
    first_name: str
    middle_name: str | None = None
    last_name: str
    created_at: datetime | None = None
    last_login_at: datetime | None = None
