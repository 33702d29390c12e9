import os
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import endpoints
from lifespan import get_lifespan
from logging_config import setup_logging


setup_logging()


logger = logging.getLogger(__name__)


app = FastAPI(
    title="Stream Faker Schema Processor",
    description="Enhances JSON schemas with faker/format tags and starts mock data streams",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=get_lifespan,
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Error bodies are {"message": ...} across the API
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Invalid request payload."})


app.include_router(endpoints.router, tags=["schema-processor"])
logger.info("Registered schema-processor router with FastAPI app.")


@app.get("/")
async def root():
    return {"message": "Stream Faker Schema Processor"}


def run():
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
