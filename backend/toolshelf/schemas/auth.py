#Request bodies for the authentication endpoints.
#Fields are optional so that presence checks happen in the handlers and produce the 400 envelope.
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
#allows fields to be None
from typing import Optional


class CamelModel(BaseModel):
    #accepts both fullName and full_name
    class Config:
        alias_generator = to_camel
        populate_by_name = True


#Represents the request body for signup
class SignupRequest(CamelModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


#Represents the request body for user login
class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


#Identity asserted by the federated provider (no password involved)
class GoogleLoginRequest(CamelModel):
    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar: Optional[str] = None
