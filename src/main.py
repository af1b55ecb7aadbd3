import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import SecurityHeadersMiddleware
from src.api.router import api_router
from src.core.config import AppConfig, ConfigurationError, load_config
from src.modules.images.openai_client import OpenAIImageClient
from src.modules.keys.unkey_client import UnkeyClient
from src.utils.logger import get_logger, setup_logging


def create_app(config: AppConfig) -> FastAPI:
    """Build the application from an already loaded configuration."""
    is_production = config.is_production

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger = setup_logging(is_production, config.app.LOG_LEVEL)
        logger.info(
            "Starting Quota Image API...",
            environment=config.app.ENVIRONMENT,
            unkey_api_id=config.unkey.UNKEY_API_ID,
        )

        yield

        await app.state.image_client.close()
        logger.info("Shutting down Quota Image API...")

    app = FastAPI(
        title="Quota Image API",
        description="Image generation behind usage-limited API keys",
        version=config.app.API_VERSION,
        lifespan=lifespan,
        # Security: Disable docs in production
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )

    timeout = config.app.HTTP_TIMEOUT_SECONDS
    app.state.config = config
    app.state.unkey_client = UnkeyClient(config.unkey, timeout=timeout)
    app.state.image_client = OpenAIImageClient(config.openai, timeout=timeout)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["*"],
    )
    app.add_middleware(
        SecurityHeadersMiddleware,
        api_version=config.app.API_VERSION,
        is_production=is_production,
    )
    app.middleware("http")(logging_middleware)

    app.include_router(api_router)

    return app


def run_server():
    """Load configuration from the environment and serve the API."""
    try:
        config = load_config()
    except ConfigurationError as e:
        setup_logging()
        get_logger(__name__).error("Refusing to start", problems=e.problems)
        raise SystemExit(1) from e

    uvicorn.run(
        create_app(config),
        host=config.app.HOST,
        port=config.app.PORT,
        access_log=False,
    )


if __name__ == "__main__":
    run_server()
