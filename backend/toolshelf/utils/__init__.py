#controls what parts of the internal security system are publicly exposed to the rest of the application
#(the request dependencies live in .deps and are imported from there directly)
from .auth import create_access_token, verify_token, get_password_hash, verify_password

__all__ = [
    "create_access_token", 
    "verify_token", 
    "get_password_hash", 
    "verify_password",
]
