# app/main.py

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Routers
from app.routes.auth import auth_router
from app.routes.bookings import booking_router
from app.routes.services import service_router

# Error Handlers
from thrive.core.error_handlers import (
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)
from thrive.core.config import settings
from thrive.core.logging_config import setup_logging
from thrive.db.database import create_client, ping

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)


# ------------------------
# MongoDB lifecycle
# ------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    client = create_client()
    app.state.mongo_client = client
    app.state.db = client[settings.DB_NAME]
    await ping(client)
    try:
        yield
    finally:
        client.close()


# ------------------------
# App init
# ------------------------
app = FastAPI(title="Trip Thrive API", lifespan=lifespan)

# ------------------------
# CORS
# ------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ------------------------
# Request log
# ------------------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


# ------------------------
# Routes
# ------------------------
app.include_router(auth_router)
app.include_router(service_router)
app.include_router(booking_router)

# ------------------------
# Exception handlers
# ------------------------
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


# ------------------------
# Health & root
# ------------------------
@app.get("/", response_class=PlainTextResponse)
async def root():
    return "My server is running..."


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


def run():
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
