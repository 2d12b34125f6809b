"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from carwash.config import configure_logging, get_settings
from carwash.database import init_db
from carwash.exceptions import register_error_handlers
from carwash.routers import auth, cars, packages, payments, reports, services

settings = get_settings()
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    logger.info("Initializing database...")
    await init_db()
    logger.info("Database initialized successfully")
    logger.info("API available at: %s", settings.api_prefix)

    yield

    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## Car Wash Management System API

    Tracks the cars that come in for a wash, the packages on offer,
    the services performed and the payments collected for them.

    ### Entities:
    * **Cars**: Registered cars, keyed by plate number
    * **Packages**: Wash packages and their prices
    * **Services**: A package applied to a car on a given date
    * **Payments**: At most one payment per service
    * **Users**: Staff accounts with session-based login

    All routes except `/auth/*` require a signed-in session.
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(cars.router, prefix=settings.api_prefix)
app.include_router(packages.router, prefix=settings.api_prefix)
app.include_router(services.router, prefix=settings.api_prefix)
app.include_router(payments.router, prefix=settings.api_prefix)
app.include_router(reports.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Car Wash Management System API",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


def run():
    import uvicorn
    uvicorn.run(
        "carwash.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
