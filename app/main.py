import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.core.config import Settings, get_settings
from app.llm import OpenAIClient
from app.routers import game_routers
from app.services import SafetyFilter
from utils.logger_config import configure_logging

logger = logging.getLogger(__name__)

LEGACY_PREFIX = "/api/hillview-sim" # path used by the original browser client


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await app.state.llm.close()
        logger.info("OpenAI client closed")

    # create FastAPI
    app = FastAPI(title="Hillview Teacher Simulator API", version="1.0", lifespan=lifespan)

    # process wide, immutable after startup
    app.state.settings = settings
    app.state.llm = OpenAIClient(settings)
    app.state.safety_filter = SafetyFilter.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # get routers
    app.include_router(game_routers.router, tags=["Game"])
    app.include_router(game_routers.router, prefix=LEGACY_PREFIX, tags=["Game"], include_in_schema=False)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request body for %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=422, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # Basic health check
    @app.get("/", response_class=PlainTextResponse)
    async def index():
        return "Hillview Middle School Teacher Simulator API is running."

    logger.info("App created (text model=%s, image model=%s)", settings.TEXT_MODEL, settings.IMAGE_MODEL)
    return app


app = create_app()


def run():
    settings = get_settings()
    logger.info("Hillview sim backend listening on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
