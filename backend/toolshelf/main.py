import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
#Handles Cross-Origin Resource Sharing
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
#SQLAlchemy database engine and declarative base
from .database import engine, Base
#Models - imported for table creation
from .models import User, Tool, Comment  # noqa: F401
#Routers - modular route groups for auth, favorites, users, tools
from .routers import auth_router, favorites_router, users_router, tools_router
from .middleware import SecurityHeadersMiddleware
from .utils.errors import ApiError
from .utils.responses import api_error

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Automatically create database tables
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(
    title="Toolshelf API",
    description="Accounts, sessions, favorites and comments for the tool catalog",
    version="1.0.0"
)

# Configure CORS(Cross-Origin Resource Sharing)
#credentials must be allowed or the browser drops the session cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_production)


# -----------------------------
# Error envelope
# -----------------------------

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return api_error(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        err = errors[0]
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        message = f"{field}: {err.get('msg')}" if field else err.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    return api_error(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return api_error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return api_error(500, "Internal server error")


# Include routers
app.include_router(auth_router, prefix="/api")  #authentication endpoints
app.include_router(favorites_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(tools_router, prefix="/api")

@app.get("/")
async def root():
    return {"message": "Toolshelf API is running"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
