from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from kidcode.core.config import settings

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Import core components
from kidcode.core.database import create_db_and_tables, SessionLocal
from kidcode.core.exceptions import KidCodeError, Unauthorized
from kidcode.routes import api_router # Import the main API router
from kidcode.services import seed_service


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API for the KidCode programming lessons platform: lessons, quizzes, progress and achievements.",
    version="0.1.0",
)

# --- Event Handlers ---
@app.on_event("startup")
def startup_event():
    logger.info("Application startup...")
    # In production, use Alembic migrations (alembic upgrade head).
    logger.info("Creating database tables if they don't exist...")
    create_db_and_tables()
    logger.info("Database tables checked/created.")

    if settings.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_service.seed_if_empty(db)
        finally:
            db.close()

@app.on_event("shutdown")
def shutdown_event():
    logger.info("Application shutdown...")

# --- Middleware ---
logger.info(f"Allowed CORS origins: {settings.CORS_ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error Handlers ---
# Every error leaves the API as {"error": "<message>"}.
def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)

@app.exception_handler(KidCodeError)
async def kidcode_error_handler(request: Request, exc: KidCodeError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} for request {request.method} {request.url.path}: {exc.message}", exc_info=exc.__cause__)
    else:
        logger.info(f"{type(exc).__name__} for request {request.method} {request.url.path}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return _error_response(exc.status_code, exc.message, headers)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning(f"Validation error {request.method} {request.url.path}: {errors}")
    message = "Invalid request."
    if errors:
        first = errors[0]
        # Drop the leading 'body'/'path'/'query' marker from the location
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg") or message)
    return _error_response(status.HTTP_400_BAD_REQUEST, message)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

# Global Error Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception for request {request.method} {request.url}: {exc}", exc_info=True)
    # Avoid exposing detailed error messages for generic exceptions
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected internal server error occurred.")

# --- API Routers ---
app.include_router(api_router) # This includes all routes from kidcode.routes (e.g., /api/lessons/...)

@app.get("/", tags=["Root"])
def read_root():
    """
    Root endpoint to check if the API is running.
    """
    return {"message": "Welcome to the KidCode Lessons API! Navigate to /docs for API documentation."}

# --- Main execution (for development) ---
if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Uvicorn server on {settings.HOST}:{settings.PORT} with log level {settings.UVICORN_LOG_LEVEL}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.UVICORN_LOG_LEVEL)
