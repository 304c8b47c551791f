"""
Main module that runs the whole application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from services.errors import CalendarError
from utils import logging
from utils.redis_client import RedisClient

from .db import create_tables
from .routers import ROUTERS

logging.setup_logger()
logger = logging.get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    create_tables()
    yield
    await RedisClient.close()


app = FastAPI(title="Church Calendar", lifespan=lifespan)

for router in ROUTERS:
    app.include_router(router)


@app.exception_handler(CalendarError)
async def calendar_error_handler(request: Request, exc: CalendarError):
    """
    Map calendar errors onto their HTTP status with a ``detail`` message.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/")
async def root():
    """
    Root endpoint.
    :return: HTTP response
    """
    return {"message": "Church calendar is running"}
