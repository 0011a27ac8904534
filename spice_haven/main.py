from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from spice_haven.core.config import get_settings
from spice_haven.routers.auth import router as auth_router
from spice_haven.routers.gallery import gallery_router, testimonials_router
from spice_haven.routers.health import router as health_router
from spice_haven.routers.menu import categories_router, items_router
from spice_haven.routers.reservations import router as reservations_router
from spice_haven.routers.restaurant import router as restaurant_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Restaurant website API - menu, gallery, testimonials, reservations and the admin console.",
    version="0.1.0",
    debug=settings.DEBUG,
)


# Global exception handler for unhandled errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected server errors without leaking details to the caller."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"message": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject invalid payloads and path/query params with 400 and per-field errors."""
    errors = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        # Drop the "body"/"path"/"query" prefix; the client only cares about the field
        if loc and loc[0] in ("body", "path", "query", "cookie", "header"):
            loc = loc[1:]
        errors.append({
            "path": loc,
            "message": error.get("msg", "Invalid value"),
            "code": error.get("type", "value_error"),
        })

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": errors},
    )


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(auth_router, prefix="/api")
app.include_router(restaurant_router, prefix="/api")
app.include_router(categories_router, prefix="/api")
app.include_router(items_router, prefix="/api")
app.include_router(gallery_router, prefix="/api")
app.include_router(testimonials_router, prefix="/api")
app.include_router(reservations_router, prefix="/api")


@app.get("/")
def read_root():
    return {
        "message": "Welcome to the Spice Haven API",
        "docs": "/docs",
        "health": "/health"
    }
