import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sitecontent.api.v1.routes import content, search
from sitecontent.config import settings
from sitecontent.services.cache import ContentCache
from sitecontent.sources.factory import build_content_source

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # One cache per app instance; content is loaded lazily on first request
    app.state.content_cache = ContentCache(build_content_source(settings))
    logger.info("Serving %s content for %s", settings.CONTENT_SOURCE, settings.SITE_URL)
    yield
    app.state.content_cache.reset()

app = FastAPI(
    title=f"{settings.SITE_NAME} Content API",
    description="Search and listings for the site's posts and pages.",
    version="0.1.0",
    docs_url="/docs" if settings.ENVIRONMENT == "development" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT == "development" else None,
    lifespan=lifespan,
)

# CORS
origins = [
    settings.SITE_URL,
    "http://localhost:4321", # Site dev server
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# API Routes
app.include_router(search.router, prefix="/api/v1/search", tags=["search"])
app.include_router(content.router, prefix="/api/v1/content", tags=["content"])

@app.get("/health")
async def health_check():
    return {"status": "ok"}
