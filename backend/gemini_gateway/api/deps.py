from fastapi import Request

from gemini_gateway.core.config import Settings
from gemini_gateway.llm.client import TextProvider


def get_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_llm_provider(request: Request) -> TextProvider:
    """
    The process-wide provider built by create_app().
    Using Depends(get_llm_provider) allows swapping in a stub in tests.
    """
    return request.app.state.llm_provider
