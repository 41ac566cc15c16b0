#Pydantic class designed specifically for configuration management.
#automatically reads values from Environment variables
from pydantic_settings import BaseSettings
from typing import List, Optional


#all configuration values needed
class Settings(BaseSettings):
    database_url: str = "sqlite:///./toolshelf.db"
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Session cookie
    environment: str = "development"
    cookie_name: str = "accessToken"
    cookie_secure: Optional[bool] = None  # None -> secure only in production
    cookie_samesite: str = "lax"

    default_avatar_url: str = (
        "https://as2.ftcdn.net/jpg/03/40/12/49/"
        "1000_F_340124934_bz3pQTLrdFpH92ekknuaTHy8JuXgG7fi.webp"
    )
    # Toggling another user's admin flag is restricted to super-admins unless disabled here
    admin_toggle_requires_super_admin: bool = True

    #comma separated
    cors_origins: str = "http://localhost:3000"
    log_level: str = "INFO"

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

   #Tells Pydantic to load variables from a .env file 
    class Config:
        env_file = ".env"

settings = Settings()


#Configuration is validated at import time, so a missing SECRET_KEY stops the app before it serves a request
