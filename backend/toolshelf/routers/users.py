import logging

from fastapi import APIRouter, Depends
from sqlalchemy import not_, update
from sqlalchemy.orm import Session
from typing import Optional
#provides a database session per request
from ..database import get_db, commit_or_raise
from ..models.user import User
#To prevent accidental exposure of sensitive fields
from ..schemas.user import UserResponse, ProfileResponse, UserUpdate, ToggleAdminRequest
from ..utils.auth import get_password_hash
from ..utils.deps import get_current_user, require
from ..utils.errors import ValidationError, NotFoundError, ConflictError
from ..utils.policy import Action, authorize
from ..utils.responses import api_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


#Only admins can access it
@router.get("")
async def get_all_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require(Action.LIST_USERS))
):
    """Get all users (admin only)."""
    users = db.query(User).order_by(User.id).all()
    #Converts SQLAlchemy objects into responses without the password hash
    return api_response(200, [UserResponse.model_validate(u) for u in users], "Fetched all users")


#Returns only the authenticated user's own profile
@router.get("/profile")
async def get_user_profile(
    current_user: Optional[User] = Depends(get_current_user)
):
    """Get current user profile."""
    if current_user is None:
        raise NotFoundError("User not found")
    return api_response(200, ProfileResponse.model_validate(current_user), "Profile fetched")


@router.put("/profile")
async def update_user_profile(
    user_update: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update current user profile.

    Only fields sent with a non-empty value are applied; a new password is
    hashed before it is stored.
    """
    changes = user_update.provided_fields()
    if not changes:
        raise ValidationError("At least one field is required")

    new_email = changes.get("email")
    if new_email and new_email != current_user.email:
        taken = db.query(User).filter(User.email == new_email, User.id != current_user.id).first()
        if taken:
            raise ConflictError("Email already in use")

    if "password" in changes:
        current_user.hashed_password = get_password_hash(changes.pop("password"))
    for field, value in changes.items():
        setattr(current_user, field, value)

    commit_or_raise(db, conflict_message="Email already in use")
    db.refresh(current_user)
    return api_response(200, UserResponse.model_validate(current_user), "User updated successfully")


@router.delete("/profile")
async def delete_user(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete the caller's own account."""
    user_id = current_user.id
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("user not found")

    db.delete(user)
    commit_or_raise(db)
    logger.info("User deleted own account id=%s", user_id)
    return api_response(200, {}, "User deleted successfully")


@router.put("/toggle-admin")
async def toggle_admin_status(
    payload: ToggleAdminRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Flip the admin flag of another user.

    Whether a super-admin is required is governed by
    ``ADMIN_TOGGLE_REQUIRES_SUPER_ADMIN`` through the authorization policy.
    """
    authorize(current_user, Action.TOGGLE_ADMIN)
    if payload.user_id is None:
        raise ValidationError("User ID is required")

    #Single UPDATE so concurrent toggles cannot lose a write
    result = db.execute(
        update(User)
        .where(User.id == payload.user_id)
        .values(is_admin=not_(User.is_admin))
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError("User not found")
    commit_or_raise(db)

    user = db.get(User, payload.user_id)
    db.refresh(user)
    logger.info(
        "Admin flag for user id=%s set to %s by user id=%s",
        user.id, user.is_admin, current_user.id,
    )
    return api_response(200, UserResponse.model_validate(user), "User admin status updated")


@router.delete("/{user_id}")
async def delete_other_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete another account (super-admin only)."""
    authorize(current_user, Action.DELETE_OTHER_USER)

    target = db.get(User, user_id)
    if target is None:
        raise NotFoundError("user not found")

    db.delete(target)
    commit_or_raise(db)
    logger.info("User id=%s deleted by super-admin id=%s", user_id, current_user.id)
    return api_response(200, {}, "User deleted successfully")
