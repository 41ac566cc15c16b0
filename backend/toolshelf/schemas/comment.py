from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

from .auth import CamelModel


class CommentCreate(CamelModel):
    content: Optional[str] = None
    parent_comment: Optional[int] = None


#Flat representation; clients rebuild threads from parentComment
class CommentResponse(BaseModel):
    id: int
    tool: int = Field(validation_alias="tool_id")
    user: int = Field(validation_alias="user_id")
    content: str
    parent_comment: Optional[int] = Field(
        default=None,
        validation_alias="parent_comment_id",
        serialization_alias="parentComment",
    )
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
