import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from . import routers
from .config import settings
from .database import check_db_connection, init_db
from .schemas.common import ErrorResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Wedding guest, invite and expense management API",
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Create tables when the app starts"""
    logger.info(f"Starting {settings.APP_NAME} ({settings.environment})")
    init_db()


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Every error body is {"error": message}"""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors like any other: 400"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part != "body"
        )
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"

    logger.warning(f"Request validation failed on {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(),
    )


# Include routers
app.include_router(routers.guests.router, prefix="/api/guests", tags=["guests"])
app.include_router(routers.groups.router, prefix="/api/groups", tags=["groups"])
app.include_router(routers.labels.router, prefix="/api/labels", tags=["labels"])
app.include_router(
    routers.functions.router, prefix="/api/functions", tags=["functions"]
)
app.include_router(routers.invites.router, prefix="/api/invites", tags=["invites"])
app.include_router(routers.expenses.router, prefix="/api/expenses", tags=["expenses"])
app.include_router(routers.imports.router, prefix="/api/import", tags=["import"])
app.include_router(routers.search.router, prefix="/api/search", tags=["search"])
app.include_router(
    routers.dashboard.router, prefix="/api/dashboard", tags=["dashboard"]
)


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.APP_NAME}", "status": "running"}


@app.get("/health")
async def health_check():
    database = check_db_connection()
    return {
        "status": "healthy" if all(database.values()) else "degraded",
        "service": "wedding-guest-manager",
        "version": settings.APP_VERSION,
        "database": database,
    }


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
