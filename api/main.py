"""
FastAPI API Service Entry Point
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.routes import chat
from shared.config import get_settings
from shared.logging_config import configure_logging

# Configure structured JSON logging on startup
configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="VIP Stylist Assistant API",
    version="1.0.0",
)

settings = get_settings()
origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(chat.router, tags=["chat"])


@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Return 400 with validation error details."""
    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "details": jsonable_errors(exc.errors())},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 instead of FastAPI's default 422."""
    logger.warning(
        f"Request validation failed: {exc.errors()}",
        extra={"request_path": request.url.path},
    )
    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "details": jsonable_errors(exc.errors())},
    )


def jsonable_errors(errors: list[dict]) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in errors
    ]


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "VIP Stylist Assistant API - Use /health for health checks"}


def run() -> None:
    """Serve the API with uvicorn on HOST:PORT."""
    logger.info(f"Assistant server on :{settings.PORT}")
    uvicorn.run("api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
