import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import os

from config import settings
from database import Database
from api import books, categories, reviewers, reviews, health
from api.errors import validation_exception_handler

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# Create directories BEFORE FastAPI app initialization
def create_directories():
    """Create all necessary directories on startup"""
    directories = [
        settings.UPLOADS_DIR,
        os.path.join(settings.UPLOADS_DIR, "books"),
    ]

    for directory in directories:
        os.makedirs(directory, exist_ok=True)
        logger.info(f"Directory ensured: {directory}")


# Initialize directories immediately
create_directories()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {settings.APP_NAME}...")
    await Database.initialize()
    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await Database.close()


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Books, categories, reviewers and reviews for a book review club",
    version=settings.APP_VERSION,
    lifespan=lifespan
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Book pictures (after directories are created)
app.mount("/uploads", StaticFiles(directory=settings.UPLOADS_DIR), name="uploads")


# Include routers
app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(books.router, prefix="/api", tags=["Books"])
app.include_router(categories.router, prefix="/api", tags=["Categories"])
app.include_router(reviewers.router, prefix="/api", tags=["Reviewers"])
app.include_router(reviews.router, prefix="/api", tags=["Reviews"])


@app.get("/")
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }
