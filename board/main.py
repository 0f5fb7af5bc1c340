import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from board import __version__
from board.config import settings
from board.database import create_schema, engine
from board.exceptions import PostNotFoundError
from board.middleware import RequestLoggingMiddleware
from board.routers import posts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.CREATE_SCHEMA:
        await create_schema()
        logger.info("Database schema ready")
    try:
        yield
    finally:
        # Shutdown
        await engine.dispose()

app = FastAPI(
    title="Post Board API",
    description="Create, read, update and delete blog posts",
    version=__version__,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(posts.router)


@app.exception_handler(PostNotFoundError)
async def post_not_found_handler(request: Request, exc: PostNotFoundError) -> JSONResponse:
    logger.info("Post not found: id=%s (%s %s)", exc.post_id, request.method, request.url.path)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__}
