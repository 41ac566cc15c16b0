#used to control how models are exposed when the package is imported.
from .user import User, user_favorite_tools
from .tool import Tool
from .comment import Comment

#all public models
__all__ = ["User", "Tool", "Comment", "user_favorite_tools"]
