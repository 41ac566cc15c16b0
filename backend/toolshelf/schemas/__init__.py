#request and response schemas for every router
from .auth import SignupRequest, LoginRequest, GoogleLoginRequest
from .user import UserResponse, ProfileResponse, UserUpdate, ToggleAdminRequest, FavoriteRequest
from .tool import ToolCreate, ToolResponse
from .comment import CommentCreate, CommentResponse

#defines what gets exported when someone imports from this module
__all__ = [
    "SignupRequest", "LoginRequest", "GoogleLoginRequest",
    "UserResponse", "ProfileResponse", "UserUpdate", "ToggleAdminRequest", "FavoriteRequest",
    "ToolCreate", "ToolResponse",
    "CommentCreate", "CommentResponse",
]
