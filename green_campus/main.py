from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from green_campus.config import insecure_defaults_in_use, settings
from green_campus.database import init_db
from green_campus.exceptions import GreenCampusError, InternalError
from green_campus.routers import auth, care, dashboard, growth, maps, species, trees, user

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def warn_insecure_defaults(config=settings) -> None:
    for name in insecure_defaults_in_use(config):
        logger.warning(f"{name.upper()} is still set to its default value; override it before deploying")


@asynccontextmanager
async def lifespan(app: FastAPI):
    warn_insecure_defaults()
    # Startup: create tables and seed the species catalog
    await init_db()
    logger.info("Database ready")
    yield


app = FastAPI(
    title="Green Campus Tree Tracker API",
    description="Track campus tree planting, growth and care",
    version="1.0.0",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GreenCampusError)
async def domain_error_handler(request: Request, exc: GreenCampusError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


# Include routers
app.include_router(auth.router)
app.include_router(user.router)
app.include_router(species.router)
app.include_router(trees.router)
app.include_router(growth.router)
app.include_router(care.router)
app.include_router(dashboard.router)
app.include_router(maps.router)

# Uploaded photos
Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
app.mount(settings.photo_url_prefix, StaticFiles(directory=settings.upload_dir), name="tree_photos")


@app.get("/api/health")
async def health_check():
    """API health check endpoint"""
    return {
        "status": "healthy",
        "service": "green-campus-api",
        "version": "1.0.0"
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Green Campus Tree Tracker API",
        "docs": "/docs",
        "health": "/api/health"
    }


def run():
    import uvicorn

    uvicorn.run("green_campus.main:app", host="0.0.0.0", port=8000)
