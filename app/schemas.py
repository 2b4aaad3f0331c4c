from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone

# Integer columns are 32-bit on every supported backend
INT32_MIN = -2_147_483_648
INT32_MAX = 2_147_483_647


class PlayerPayload(BaseModel):
    """Body accepted by create and update.

    Only these fields are settable from outside. ``id``, ``winRate``,
    ``createdAt`` and ``lastActiveAt`` are dropped if a client sends them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    username: str = Field(..., max_length=100)
    email: EmailStr
    total_matches: int = Field(0, ge=INT32_MIN, le=INT32_MAX)
    wins: int = Field(0, ge=INT32_MIN, le=INT32_MAX)
    losses: int = Field(0, ge=INT32_MIN, le=INT32_MAX)
    elo_rating: int = Field(1000, ge=INT32_MIN, le=INT32_MAX)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Username is required")
        return value


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    username: str
    email: str
    total_matches: int
    wins: int
    losses: int
    rating: int = Field(alias="eloRating")
    win_rate: float
    created_at: datetime
    last_active_at: Optional[datetime] = None

    @field_serializer("created_at", "last_active_at")
    def serialize_utc(self, value: Optional[datetime]) -> Optional[str]:
        # Stored naive, always UTC
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
