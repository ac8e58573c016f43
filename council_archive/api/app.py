"""
FastAPI application for the council question archive.
"""

import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from council_archive.config import config
from council_archive.api.routes import router
from council_archive.db.database import init_db
from council_archive.utils.error_handling import register_exception_handlers
from council_archive.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An archive of council general questions linked to YouTube timestamps",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Initialize the database on startup
@app.on_event("startup")
async def startup_event():
    """Initialize components on application startup."""
    init_db()
    logging.info(f"Database initialized at {config.DATABASE_URL}")


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


register_exception_handlers(app)

# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "Council general-question archive API",
    }
