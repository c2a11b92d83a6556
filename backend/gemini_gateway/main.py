# gemini_gateway/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from gemini_gateway import __version__
from gemini_gateway.core import AppError
from gemini_gateway.core.config import Settings, settings as default_settings
from gemini_gateway.core.exception_handlers import (
    app_error_handler,
    unhandled_exception_handler,
    validation_error_handler,
)
from gemini_gateway.core.logging_config import configure_logging
from gemini_gateway.llm.client import TextProvider
from gemini_gateway.llm.providers.gemini import GeminiProvider
from gemini_gateway.middleware.request_logging import RequestLoggingMiddleware
from gemini_gateway.routers.gemini import router as gemini_router
from gemini_gateway.routers.health import router as health_router

configure_logging(default_settings.LOG_LEVEL)


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app(settings: Settings | None = None, provider: TextProvider | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(title=settings.SERVICE_NAME, version=__version__)

    # Built once; every request shares this instance.
    app.state.settings = settings
    app.state.llm_provider = provider or GeminiProvider(api_key=settings.API_KEY)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:5173,https://app.example.com"
    allow_origins = _split_csv(settings.CORS_ALLOW_ORIGINS) or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials="*" not in allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(gemini_router)

    return app


app = create_app()
