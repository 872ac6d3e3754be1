from __future__ import annotations

import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from morizo_web.config import Settings
from morizo_web.telemetry import LogCategory, get_logger, setup_logging

from morizo_web.api.v1.ingredients import router as ingredients_router
from morizo_web.api.v1.whisper import router as whisper_router
from morizo_web.api.v1.subscription import router as subscription_router
from morizo_web.api.v1.menu import router as menu_router
from morizo_web.api.v1.revenuecat import router as revenuecat_router

logger = get_logger(LogCategory.API)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Ensure data dir exists so the metrics log can write
    settings = Settings()
    os.makedirs(settings.data_dir, exist_ok=True)
    logger.info("Morizo AI upstream: %s", settings.morizo_ai_url)
    yield


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ())[1:])
    message = f"{field}: {first.get('msg', 'invalid request')}" if field else first.get("msg", "invalid request")
    logger.warning("invalid request %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": message, "detail": errors},
    )


def create_app() -> FastAPI:
    settings = Settings()
    setup_logging(settings)
    app = FastAPI(title="Morizo Web API", version="1.0", lifespan=lifespan)

    # CORS (narrow it down in .env via CORS_ALLOW_ORIGINS in production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Cache-Control"],
        max_age=86400,
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(ingredients_router)
    app.include_router(whisper_router)
    app.include_router(subscription_router)
    app.include_router(menu_router)
    app.include_router(revenuecat_router)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.get("/readyz")
    def readyz():
        return {"status": "ready"}

    return app

app = create_app()
