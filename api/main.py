"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import players, rounds
from config import config, configure_logging

configure_logging()

app = FastAPI(
    title="Blackjack Casino",
    description="Blackjack rounds against the house with persistent player records",
    version="0.1.0",
)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(players.router, prefix="/api/players", tags=["players"])
app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
