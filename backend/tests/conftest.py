import pytest
from fastapi.testclient import TestClient

from gemini_gateway.core.config import Settings
from gemini_gateway.llm.types import LLMRequest, LLMResponse
from gemini_gateway.main import create_app


class StubProvider:
    """Stands in for GeminiProvider; records every request it receives."""

    name = "stub"

    def __init__(self, text: str = "ok", exc: Exception | None = None):
        self.text = text
        self.exc = exc
        self.calls: list[LLMRequest] = []

    async def generate(self, req: LLMRequest) -> LLMResponse:
        self.calls.append(req)
        if self.exc is not None:
            raise self.exc
        return LLMResponse(trace_id=req.trace_id, model=req.model, output_text=self.text, latency_ms=1)


@pytest.fixture
def settings():
    return Settings(_env_file=None, API_KEY="test-key", SERVICE_NAME="Gemini Integration API")


@pytest.fixture
def stub():
    return StubProvider()


@pytest.fixture
def client(settings, stub):
    app = create_app(settings=settings, provider=stub)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def make_client(settings):
    def _make(provider):
        return TestClient(create_app(settings=settings, provider=provider), raise_server_exceptions=False)

    return _make
