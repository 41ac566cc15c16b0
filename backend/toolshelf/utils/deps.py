import logging
from typing import Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db
from ..models.user import User
from .auth import verify_token
from .errors import AuthError
from .policy import Action, authorize

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def get_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> Optional[str]:
    """Session token from the cookie, falling back to an Authorization header."""
    token = request.cookies.get(settings.cookie_name)
    if not token and credentials is not None and credentials.credentials:
        token = credentials.credentials
    return token or None


async def get_current_user(
    token: Optional[str] = Depends(get_token),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the request's session token to a stored user."""
    if not token:
        raise AuthError("Unauthorized request")

    try:
        payload = verify_token(token)
    except jwt.ExpiredSignatureError:
        raise AuthError("Access token expired")
    except jwt.InvalidTokenError:
        raise AuthError("Invalid access token")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise AuthError("Invalid access token")

    user = db.get(User, user_id)
    if user is None:
        logger.info("Token for missing user id=%s rejected", user_id)
        raise AuthError("Invalid access token")
    return user


#Dependency factories so routes declare the action they need
def require(action: Action):
    async def _checker(current_user: User = Depends(get_current_user)) -> User:
        authorize(current_user, action)
        return current_user

    return _checker


require_admin = require(Action.MANAGE_TOOLS)
