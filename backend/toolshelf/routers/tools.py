import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from ..database import get_db, commit_or_raise
from ..models.comment import Comment
from ..models.tool import Tool
from ..models.user import User
from ..schemas.comment import CommentCreate, CommentResponse
from ..schemas.tool import ToolCreate, ToolResponse
from ..utils.deps import get_current_user, require_admin
from ..utils.errors import ValidationError, NotFoundError
from ..utils.responses import api_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


def _get_tool_or_404(db: Session, tool_id: int) -> Tool:
    tool = db.get(Tool, tool_id)
    if tool is None:
        raise NotFoundError("Tool not found")
    return tool


@router.get("")
async def list_tools(
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    query = db.query(Tool)
    if category:
        query = query.filter(Tool.category == category)
    tools = query.order_by(Tool.id).all()
    return api_response(200, [ToolResponse.model_validate(t) for t in tools], "Fetched tools")


@router.get("/{tool_id}")
async def get_tool(tool_id: int, db: Session = Depends(get_db)):
    tool = _get_tool_or_404(db, tool_id)
    return api_response(200, ToolResponse.model_validate(tool), "Fetched tool")


#Catalog entries are managed by admins
@router.post("", status_code=201)
async def create_tool(
    payload: ToolCreate,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    if not payload.name:
        raise ValidationError("Tool name is required")

    tool = Tool(**payload.model_dump())
    db.add(tool)
    commit_or_raise(db)
    db.refresh(tool)
    logger.info("Tool id=%s created by user id=%s", tool.id, current_user.id)
    return api_response(201, ToolResponse.model_validate(tool), "Tool created")


# -----------------------------
# Comments
# -----------------------------

@router.get("/{tool_id}/comments")
async def list_comments(tool_id: int, db: Session = Depends(get_db)):
    """All comments on a tool in posting order, each with its parent id."""
    _get_tool_or_404(db, tool_id)
    comments = (
        db.query(Comment)
        .filter(Comment.tool_id == tool_id)
        .order_by(Comment.id)
        .all()
    )
    return api_response(200, [CommentResponse.model_validate(c) for c in comments], "Fetched comments")


@router.post("/{tool_id}/comments", status_code=201)
async def create_comment(
    tool_id: int,
    payload: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if not payload.content or not payload.content.strip():
        raise ValidationError("Comment content is required")
    _get_tool_or_404(db, tool_id)

    comment = Comment(tool_id=tool_id, user_id=current_user.id, content=payload.content)
    if payload.parent_comment is not None:
        parent = db.get(Comment, payload.parent_comment)
        if parent is None:
            raise NotFoundError("Parent comment not found")
        if not comment.can_reply_to(parent):
            raise ValidationError("Parent comment belongs to a different tool")
        comment.parent_comment_id = parent.id

    db.add(comment)
    commit_or_raise(db)
    db.refresh(comment)
    return api_response(201, CommentResponse.model_validate(comment), "Comment added")
