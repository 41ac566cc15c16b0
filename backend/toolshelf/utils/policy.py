"""Authorization policy.

Every privilege decision goes through :func:`is_allowed` so role checks live
in one place instead of being repeated in each handler.
"""
import enum
from typing import Optional

from ..config import settings
from .errors import AuthzError


class Action(enum.Enum):
    LIST_USERS = "list_users"
    DELETE_OTHER_USER = "delete_other_user"
    TOGGLE_ADMIN = "toggle_admin"
    MANAGE_TOOLS = "manage_tools"


DENIED_MESSAGES = {
    Action.LIST_USERS: "Admin access required",
    Action.DELETE_OTHER_USER: "You are not authorized to delete this user",
    Action.TOGGLE_ADMIN: "You are not authorized to change admin status",
    Action.MANAGE_TOOLS: "Admin access required",
}


def is_allowed(user, action: Action, admin_toggle_requires_super_admin: Optional[bool] = None) -> bool:
    if user is None:
        return False

    is_super_admin = bool(getattr(user, "is_super_admin", False))
    is_admin = bool(getattr(user, "is_admin", False)) or is_super_admin

    if action is Action.DELETE_OTHER_USER:
        return is_super_admin
    if action is Action.TOGGLE_ADMIN:
        if admin_toggle_requires_super_admin is None:
            admin_toggle_requires_super_admin = settings.admin_toggle_requires_super_admin
        return is_super_admin if admin_toggle_requires_super_admin else True
    if action in (Action.LIST_USERS, Action.MANAGE_TOOLS):
        return is_admin
    return False


def authorize(user, action: Action) -> None:
    """Raise :class:`AuthzError` unless ``user`` may perform ``action``."""
    if not is_allowed(user, action):
        raise AuthzError(DENIED_MESSAGES[action])
