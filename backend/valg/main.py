"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_LEVEL
from .parties import PARTY_COLORS, PARTY_NAMES
from .routers import parties


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and log application startup and shutdown."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        f"Serving {len(PARTY_COLORS)} party colors and {len(PARTY_NAMES)} party names"
    )
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Valg Party API",
    description="Display colors and names for Norwegian political parties",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Register routers
app.include_router(parties.router)


@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "Valg Party API",
        "version": "1.0.0",
        "endpoints": {
            "parties": "/api/parties",
            "colors": "/api/parties/colors",
            "names": "/api/parties/names",
            "party": "/api/parties/{code}",
            "color": "/api/parties/{code}/color"
        }
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
