"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from lottery_engine.config import settings
from lottery_engine.engine.exceptions import (
    ConfigNotFound,
    DrawNotFound,
    LotteryEngineError,
)
from lottery_engine.engine.games import VALID_GAMES

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
if settings.LOG_FILE:
    Path(settings.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
    logger.add(settings.LOG_FILE, rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ({}) ...", settings.APP_NAME, settings.APP_ENV)
    logger.info("Registered games: {}", ", ".join(VALID_GAMES))

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="彩票统计、智能选号与奖金计算服务",
    lifespan=lifespan,
)


@app.exception_handler(LotteryEngineError)
async def engine_error_handler(request: Request, exc: LotteryEngineError):
    status_code = 404 if isinstance(exc, (ConfigNotFound, DrawNotFound)) else 422
    logger.warning("{} {} -> {}: {}", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind, "constraint": exc.constraint},
    )


# Include API routers
from lottery_engine.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok", "games": list(VALID_GAMES)}
