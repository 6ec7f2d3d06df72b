# standhub/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from standhub.data.database import Base, engine
from standhub.api.routers import health, sales, traffic, audit, users, stands, vehicles, inquiries, favorites
from standhub.utils.logging import get_logger

# import modeli przed create_all, rejestruje tabele w Base.metadata
import standhub.data.models  # noqa: F401

logger = get_logger(__name__)


def init_db():
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables created")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Standhub Analytics",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(sales.router)
    app.include_router(traffic.router)
    app.include_router(audit.router)
    app.include_router(users.router)
    app.include_router(stands.router)
    app.include_router(vehicles.router)
    app.include_router(inquiries.router)
    app.include_router(favorites.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
