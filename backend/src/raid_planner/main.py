"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from raid_planner.config import settings
from raid_planner.api.routes.characters import router as characters_router
from raid_planner.api.routes.health import router as health_router
from raid_planner.api.routes.raids import router as raids_router
from raid_planner.repositories.memory_repository import InMemoryRaidRepository
from raid_planner.repositories.seed_data import SeedData, build_seed_data
from raid_planner.utils.timeutils import get_timezone

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_repository() -> InMemoryRaidRepository:
    """Build the entity store, seeded with the demo guild unless disabled."""
    seed = build_seed_data(get_timezone(settings.timezone)) if settings.seed_mock_data else SeedData()
    return InMemoryRaidRepository.from_seed(
        seed, creation_delay_seconds=settings.raid_creation_delay_seconds
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: tests may inject their own repository beforehand
    if not hasattr(app.state, "repository"):
        app.state.repository = create_repository()
    logger.info(f"Raid Planner ready (timezone={settings.timezone})")
    yield


app = FastAPI(
    title="Raid Planner",
    description="Guild raid scheduling, calendar and roster management",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Raid Planner API",
        "version": "0.1.0",
        "docs": "/docs",
        "custom_key": settings.custom_key,
    }


# Register routers
app.include_router(health_router)
app.include_router(raids_router)
app.include_router(characters_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
