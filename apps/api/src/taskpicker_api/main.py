import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from task_selector import __version__ as selector_version
from task_selector import list_strategies
from task_selector.errors import SelectionError
from taskpicker_api.config import settings
from taskpicker_api.exceptions import (
    TaskPickerException,
    general_exception_handler,
    http_exception_handler,
    selection_exception_handler,
    taskpicker_exception_handler,
    validation_exception_handler,
)
from taskpicker_api.routers import selection, workspace


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)
    logger.info("🚀 FastAPI server starting up...")

    # Log configuration info
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Host: {settings.host}, Port: {settings.port}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Categories: {settings.categories_list}")
    logger.info(f"Strategies: {list_strategies()}")
    logger.info(f"Workspace file: {settings.workspace_file}")

    logger.info("✅ FastAPI server startup complete")
    yield
    # Shutdown
    logger.info("🔄 FastAPI server shutting down...")


# Initialize FastAPI app
app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Slow request threshold in seconds
SLOW_REQUEST_THRESHOLD = 1.0


@app.middleware("http")
async def timing_middleware(request, call_next):
    perf_logger = logging.getLogger("taskpicker.perf")
    start_time = time.monotonic()
    response = await call_next(request)
    duration = time.monotonic() - start_time

    method = request.method
    path = request.url.path
    if duration >= SLOW_REQUEST_THRESHOLD:
        perf_logger.warning("SLOW %s %s %d %.3fs", method, path, response.status_code, duration)
    else:
        perf_logger.info("%s %s %d %.3fs", method, path, response.status_code, duration)

    # Add timing header for client-side observability
    response.headers["X-Response-Time"] = f"{duration:.3f}s"
    return response


# Add exception handlers
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(TaskPickerException, taskpicker_exception_handler)
app.add_exception_handler(SelectionError, selection_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include API routers
app.include_router(selection.router, prefix="/api")
app.include_router(workspace.router, prefix="/api")


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse({"status": "healthy", "message": "OK"})


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information"""
    return JSONResponse(
        {
            "message": settings.api_title,
            "status": "active",
            "version": settings.api_version,
            "selector_version": selector_version,
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "taskpicker_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
