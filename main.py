from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger

from link_shortener.config import settings
from link_shortener.database.connection import engine, Base
from link_shortener.logging_config import setup_logging
from link_shortener.services.exceptions import ShortenerError
from link_shortener.storage.factory import MappingStoreBackend, MappingStoreFactory
from link_shortener.api.v1 import shorten

# Import models to ensure they're registered with Base
from link_shortener.models import UrlMappingRecord

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables for the relational backend, close Mongo on shutdown"""
    logger.info(
        "Starting {} v{} ({} storage)",
        settings.app_name, settings.app_version, settings.storage_backend
    )
    if MappingStoreBackend(settings.storage_backend) == MappingStoreBackend.SQLALCHEMY:
        Base.metadata.create_all(bind=engine)

    yield

    MappingStoreFactory.close()
    logger.info("Shutting down {}", settings.app_name)


# Create FastAPI app; interactive docs live at /ui
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=settings.app_description,
    debug=settings.debug,
    docs_url="/ui",
    redoc_url=None,
    lifespan=lifespan,
)


@app.exception_handler(ShortenerError)
async def shortener_error_handler(request: Request, exc: ShortenerError):
    """Render service errors as {"error": message}"""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/", response_class=PlainTextResponse)
def read_root():
    """Plain-text greeting"""
    return f"Hello from {settings.app_name}!"


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(shorten.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
