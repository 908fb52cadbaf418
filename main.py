from contextlib import asynccontextmanager
import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from config import settings, ConfigurationError
from database.connection import Database
from routes import rooms, messages
from routes.responses import ERROR_RESPONSES
from services.results import ErrorKind
from utils.log import setup_logging, get_logger

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: refuse to serve without a database
    database = Database(settings.require_database_url())
    database.create_tables()
    app.state.database = database
    logger.info("Database connected")

    yield

    # Shutdown: release pooled connections
    database.dispose()
    logger.info("Application shutdown")


app = FastAPI(
    title="Room Chat API",
    description="Short-code chat rooms with polled messages",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
)

app.include_router(rooms.router, tags=["Rooms"])
app.include_router(messages.router, tags=["Messages"])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    status_code, message = ERROR_RESPONSES[ErrorKind.VALIDATION]
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/", response_class=PlainTextResponse)
def root():
    """Liveness check"""
    return "API is running"


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


def run():
    import uvicorn

    try:
        settings.require_database_url()
    except ConfigurationError as e:
        logger.critical(str(e))
        sys.exit(1)

    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
    )


if __name__ == "__main__":
    run()
