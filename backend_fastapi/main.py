import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.routes.health import router as health_router
from backend_fastapi.api.routes.tasks import router as tasks_router
from infrastructure import settings
from infrastructure.container import init_storage, shutdown_storage

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_storage()
    logger.info(f"Environment: {settings.app_env()}")
    logger.info(f"Database: {settings.masked_database_url()} (ORM={settings.orm()})")
    if settings.cache_backend() == "redis":
        logger.info(f"Redis: {settings.redis_host()}:{settings.redis_port()}")
    else:
        logger.info("Cache: in-memory")
    yield
    shutdown_storage()


app = FastAPI(title="Task Backend API", lifespan=lifespan)

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "*")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
)

app.include_router(health_router)
app.include_router(tasks_router)
