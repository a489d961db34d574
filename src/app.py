"""
Credenciales Backend API Server
CRUD over the credenciales table
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, DatabaseSettings
from database.connection import init_database, close_database
from api.routes import health, credenciales
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

def create_app(db_settings: Optional[DatabaseSettings] = None) -> FastAPI:
    """Build the FastAPI application; settings default to the environment at startup"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        await init_database(db_settings or DatabaseSettings.from_env())
        yield
        await close_database()

    app = FastAPI(
        title="Credenciales Backend",
        description="Backend API for identity-credential records",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(credenciales.router, prefix="/credenciales", tags=["Credenciales"])

    return app

# FastAPI app instance is exported for use by uvicorn
app = create_app()
