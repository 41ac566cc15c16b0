import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..config import settings
from ..database import get_db, commit_or_raise
from ..models.user import User
from ..schemas.auth import SignupRequest, LoginRequest, GoogleLoginRequest
from ..schemas.user import UserResponse
from ..utils.auth import get_password_hash, verify_password, generate_password, issue_user_token
from ..utils.cookies import set_session_cookie, clear_session_cookie
from ..utils.errors import ValidationError, ConflictError, NotFoundError, AuthError
from ..utils.responses import api_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    user_data: SignupRequest,
    db: Session = Depends(get_db)
):
    """Register a new user."""
    if not user_data.full_name or not user_data.email or not user_data.password:
        raise ValidationError("all fields are required")

    # Check if user exists
    if db.query(User).filter(User.email == user_data.email).first():
        raise ConflictError("User already exists")

    #Passwords are stored securely (hashed)
    db_user = User(
        full_name=user_data.full_name,
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
    )
    db.add(db_user)
    commit_or_raise(db, conflict_message="User already exists")
    db.refresh(db_user)

    logger.info("User signed up id=%s", db_user.id)
    #Returns user data without exposing the hash
    return api_response(201, UserResponse.model_validate(db_user), "Signup successful")


@router.post("/login")
async def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """Authenticate user and set the session cookie."""
    if not login_data.email or not login_data.password:
        raise ValidationError("all fields are required")

    user = db.query(User).filter(User.email == login_data.email).first()
    if not user:
        raise NotFoundError("user not found")

    if not verify_password(login_data.password, user.hashed_password):
        logger.info("Failed login for user id=%s", user.id)
        raise AuthError("Invalid password")

    response = api_response(200, UserResponse.model_validate(user), "Login successful")
    set_session_cookie(response, issue_user_token(user))
    logger.info("User logged in id=%s", user.id)
    return response


@router.post("/signout")
async def signout():
    """Clear the session cookie; safe to call without a session."""
    response = api_response(200, {}, "Signout successful")
    clear_session_cookie(response)
    return response


@router.post("/google")
async def google(
    payload: GoogleLoginRequest,
    db: Session = Depends(get_db)
):
    """Federated login.

    The identity provider has already verified the email, so an existing
    account is signed in without a password check. Unknown emails get a new
    account with a random password the user never sees.
    """
    if not payload.email or not payload.full_name:
        raise ValidationError("Email and full name are required")

    user = db.query(User).filter(User.email == payload.email).first()
    if user:
        response = api_response(200, UserResponse.model_validate(user), "Login successful")
        set_session_cookie(response, issue_user_token(user))
        logger.info("Federated login for user id=%s", user.id)
        return response

    user = User(
        full_name=payload.full_name,
        email=payload.email,
        hashed_password=get_password_hash(generate_password()),
        avatar=payload.avatar or settings.default_avatar_url,
    )
    db.add(user)
    commit_or_raise(db, conflict_message="User already exists")
    db.refresh(user)

    response = api_response(201, UserResponse.model_validate(user), "User created and logged in")
    set_session_cookie(response, issue_user_token(user))
    logger.info("Federated signup created user id=%s", user.id)
    return response
