"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from src.api import auth, cart, products
from src.config import get_settings
from src.database import init_db
from src.exceptions import StorefrontError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    logger.info(f"Storefront API ready ({settings.environment}) on port {settings.port}")
    yield


app = FastAPI(
    title="Storefront API",
    description="Product catalog, shopper accounts and carts",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware)


@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)
    return JSONResponse({"success": False, "error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(p) for p in error['loc'] if p != 'body')}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(
        {"success": False, "error": message or "Invalid request"},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Storage error", exc_info=exc)
    return JSONResponse(
        {"success": False, "error": "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# Register routers
app.include_router(auth.router)
app.include_router(products.router)
app.include_router(cart.router)

app.mount("/images", StaticFiles(directory=settings.upload_dir, check_dir=False), name="images")


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Plaintext liveness banner."""
    return "Storefront API is running..."


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the app with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.port)  # noqa: S104
