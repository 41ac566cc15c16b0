"""Favorite tools of the signed-in user.

Adds and removes are single INSERT / DELETE statements against the
association table. The unique (user, tool) constraint makes a repeated add a
no-op even when two requests race.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..database import get_db, commit_or_raise
from ..models.tool import Tool
from ..models.user import User, user_favorite_tools
from ..schemas.tool import ToolResponse
from ..schemas.user import FavoriteRequest
from ..utils.deps import get_current_user
from ..utils.errors import ValidationError, NotFoundError
from ..utils.responses import api_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/favorites", tags=["favorites"])


def _favorite_ids(db: Session, user_id: int):
    rows = db.execute(
        select(user_favorite_tools.c.tool_id)
        .where(user_favorite_tools.c.user_id == user_id)
        .order_by(user_favorite_tools.c.id)
    )
    return [tool_id for (tool_id,) in rows]


@router.post("")
async def add_to_favorites(
    payload: FavoriteRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if payload.tool_id is None:
        raise ValidationError("Tool ID is required")
    if db.get(Tool, payload.tool_id) is None:
        raise NotFoundError("Tool not found")

    try:
        db.execute(
            insert(user_favorite_tools).values(user_id=current_user.id, tool_id=payload.tool_id)
        )
    except IntegrityError:
        #Already a favorite
        db.rollback()
    else:
        commit_or_raise(db)
        logger.debug("User id=%s favorited tool id=%s", current_user.id, payload.tool_id)

    return api_response(200, {"favorites": _favorite_ids(db, current_user.id)}, "Added to favorites")


@router.delete("")
async def remove_from_favorites(
    payload: FavoriteRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if payload.tool_id is None:
        raise ValidationError("Tool ID is required")

    db.execute(
        delete(user_favorite_tools).where(
            user_favorite_tools.c.user_id == current_user.id,
            user_favorite_tools.c.tool_id == payload.tool_id,
        )
    )
    commit_or_raise(db)

    return api_response(200, {"favorites": _favorite_ids(db, current_user.id)}, "Removed from favorites")


@router.get("")
async def get_favorites(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Favorites resolved to full tool records, oldest first."""
    tools = (
        db.query(Tool)
        .join(user_favorite_tools, user_favorite_tools.c.tool_id == Tool.id)
        .filter(user_favorite_tools.c.user_id == current_user.id)
        .order_by(user_favorite_tools.c.id)
        .all()
    )
    return api_response(
        200,
        {"favorites": [ToolResponse.model_validate(t) for t in tools]},
        "Fetched favorites",
    )
