import time
import logging
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from typing import Optional
import os

# Load env vars
load_dotenv()

from holiday_api.db import MongoConnection
from holiday_api.routes import holidays
from holiday_api.utils.logging_config import setup_logging

# Configure logging on import
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
setup_logging(level=LOG_LEVEL, log_file=os.getenv("LOG_FILE"))
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


def create_app(connection: Optional[MongoConnection] = None) -> FastAPI:
    """
    Build the application around a single connection provider.
    Tests pass their own provider; otherwise one is built from the environment.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application started")
        yield
        app.state.mongo.close()
        logger.info("Application shutdown")

    app = FastAPI(title="Holiday API", lifespan=lifespan)
    app.state.mongo = connection if connection is not None else MongoConnection()

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every HTTP request: method, path, status, duration."""
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        """Methods the router itself rejects get the same body as the endpoint's own 405."""
        if exc.status_code == 405:
            return holidays.error_response(405, "Method not allowed")
        return await http_exception_handler(request, exc)

    app.include_router(holidays.router)

    @app.get("/")
    async def root():
        return {"message": "Holiday API is running"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
