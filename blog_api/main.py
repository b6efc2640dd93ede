import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_api import __version__
from blog_api.config import settings
from blog_api.database import create_engine, create_session_factory, create_tables, warm_pool
from blog_api.errors import BlogError, InternalError, StorageError, ValidationError
from blog_api.middleware import TimingMiddleware, install_query_counter
from blog_api.routers import comments, metrics, posts, users

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one engine (and pool) for the lifetime of the process.
    logging.basicConfig(level=settings.LOG_LEVEL)
    engine = create_engine(settings)
    install_query_counter(engine)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    if settings.CREATE_TABLES:
        await create_tables(engine)
    await warm_pool(engine, settings.POOL_MIN_IDLE)
    logger.info("Blog API started (%s)", settings.APP_ENV)
    yield
    # Shutdown
    await engine.dispose()

app = FastAPI(
    title="Blog API",
    description="Users, posts and comments over a relational store",
    version=__version__,
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(users.router)
app.include_router(posts.router)
app.include_router(comments.router)
app.include_router(metrics.router)

# Error mapping
@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError):
    if isinstance(exc, StorageError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
    return await blog_error_handler(request, ValidationError("Validation error: " + "; ".join(messages)))

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
    return await blog_error_handler(request, InternalError("Internal server error"))

@app.get("/health")
async def health():
    return {"status": "healthy", "version": __version__}
