# backend/main.py

from fastapi import FastAPI
from config import settings
import logging

# middlewares
from fastapi.middleware.cors import CORSMiddleware

# database stuff
from core.database import test_db_connection, init_db
from fastapi.exceptions import RequestValidationError
from core.errors import ApiError, api_error_handler, validation_error_handler

# routers
from api.cameras.routes import router as cameras_router
from api.user_cameras.routes import router as user_cameras_router, list_router as list_cameras_router

app = FastAPI(
    title="Camera Access API",
    description="API for granting users access to cameras.",
    version="1.0.0",
    openapi_tags=[{"name": "User Cameras", "description": "Camera grants per user"}],
)


# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@app.on_event("startup")
async def startup_db_check():
    """Test database connection on startup."""
    if test_db_connection():
        init_db()
    else:
        logger.error("Database connection failed on startup.")


app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Routes
app.include_router(list_cameras_router)
app.include_router(user_cameras_router)
app.include_router(cameras_router)


@app.get("/health")
async def health():
    """Health check for the API and its database."""
    logger.info("Health check running...")

    db_connection_status = test_db_connection()
    logger.info("SQLAlchemy connection check: %s", db_connection_status)

    return {"status": "OK" if db_connection_status else "DEGRADED", "sqlalchemy_check": db_connection_status}
