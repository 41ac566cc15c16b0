from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime

from .auth import CamelModel


#API output schema; never carries the password hash
class UserResponse(BaseModel):
    id: int
    email: str
    full_name: str
    avatar: Optional[str] = None
    is_admin: bool = False
    is_super_admin: bool = False
    favorite_tools: List[int] = Field(
        default_factory=list,
        validation_alias="favorite_tool_ids",
        serialization_alias="favoriteTools",
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


#Fixed projection returned by the profile endpoint
class ProfileResponse(BaseModel):
    id: int
    email: str
    full_name: str
    avatar: Optional[str] = None
    is_admin: bool = False

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


#partial updates
class UserUpdate(CamelModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    avatar: Optional[str] = None

    def provided_fields(self) -> dict:
        """Fields that were sent with a non-empty value."""
        return {k: v for k, v in self.model_dump().items() if v not in (None, "")}


class ToggleAdminRequest(CamelModel):
    user_id: Optional[int] = None


class FavoriteRequest(CamelModel):
    tool_id: Optional[int] = None
