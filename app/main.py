"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.database import init_db
from app.errors import register_exception_handlers
from app.middleware import setup_rate_limiting
from app.auth import routes as auth_routes
from app.currency import routes as currency_routes

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Production schemas are managed by Alembic; development creates them on the fly
    if settings.is_development:
        await init_db()
    logger.info(f"Swift Flow API started ({settings.APP_ENV})")
    yield


# Create FastAPI app
app = FastAPI(
    title="Swift Flow API",
    description="Authenticated currency conversion with live rates",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_rate_limiting(app)
register_exception_handlers(app)

# Include routers
app.include_router(auth_routes.router, prefix=f"{settings.API_PREFIX}/auth", tags=["Auth"])
app.include_router(currency_routes.router, prefix=f"{settings.API_PREFIX}/currency", tags=["Currency"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Swift Flow API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get(f"{settings.API_PREFIX}/health")
async def health_check():
    """Health check endpoint."""
    return {"success": True, "status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
