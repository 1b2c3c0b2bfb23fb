"""Account model."""

from pydantic import BaseModel, ConfigDict


class AccountInfo(BaseModel):
    """Identity of the account the access token belongs to."""

    user_id: str | None = None
    name: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    plan: str | None = None

    model_config = ConfigDict(frozen=True)
