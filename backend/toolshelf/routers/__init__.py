#router package initializer
#controls how API route modules are exposed and imported.
#Each imported router is renamed
from .auth import router as auth_router
from .favorites import router as favorites_router
from .users import router as users_router
from .tools import router as tools_router

#defines what is publicly exposed when someone imports this package
#favorites_router must be included before users_router so /users/favorites is not read as /users/{user_id}
__all__ = ["auth_router", "favorites_router", "users_router", "tools_router"]
