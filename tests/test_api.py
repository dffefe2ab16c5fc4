import pytest
from fastapi.testclient import TestClient

from image_service.api.dependencies import get_image_generator
from image_service.domain.interfaces.image_generator import (
    ImageGenerator,
    ImageParameterError,
    ProtocolViolationError,
    ProviderRequestError,
)
from image_service.infrastructure.openai.openai_image_generator import OpenAIImageGenerator
from image_service.main import app


class StubGenerator(ImageGenerator):
    """Generator double returning a fixed URL or raising a fixed error."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    @property
    def attributes(self):
        return {}

    async def generate_image(self, description, width, height, quality="standard", style="vivid"):
        self.calls.append((description, width, height, quality, style))
        if self.error is not None:
            raise self.error
        return "http://example/img.png"


@pytest.fixture
def stub():
    return StubGenerator()


@pytest.fixture
def client(stub):
    app.dependency_overrides[get_image_generator] = lambda: stub
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "image-service"}


def test_root(client):
    response = client.get("/")
    assert response.json()["service"] == "image-service"


def test_generate_returns_url(client, stub):
    response = client.post(
        "/api/images/generate",
        json={"prompt": "a red fox", "width": 512, "height": 512, "quality": "hd", "style": "natural"},
    )

    assert response.status_code == 200
    assert response.json() == {"url": "http://example/img.png", "prompt": "a red fox", "size": "512x512"}
    assert stub.calls == [("a red fox", 512, 512, "hd", "natural")]


def test_generate_applies_request_defaults(client, stub):
    response = client.post("/api/images/generate", json={"prompt": "a red fox"})

    assert response.status_code == 200
    assert stub.calls == [("a red fox", 1024, 1024, "standard", "vivid")]


def test_missing_prompt_is_rejected(client):
    response = client.post("/api/images/generate", json={"width": 512, "height": 512})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "error,status_code",
    [
        (ImageParameterError("width", 300, "bad size"), 400),
        (ProviderRequestError("upstream down", status_code=503), 502),
        (ProtocolViolationError("no images"), 500),
    ],
)
def test_errors_map_to_status_codes(client, stub, error, status_code):
    stub.error = error

    response = client.post("/api/images/generate", json={"prompt": "a red fox"})

    assert response.status_code == status_code


def test_parameter_error_names_parameter(client, stub):
    stub.error = ImageParameterError("quality", "ultra", "Quality must be either 'standard' or 'hd'.")

    response = client.post("/api/images/generate", json={"prompt": "a red fox", "quality": "ultra"})

    detail = response.json()["detail"]
    assert detail["parameter"] == "quality"
    assert "ultra" in detail["message"]


def test_dependency_builds_generator_from_settings(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_ORGANIZATION", "org-env")

    generator = get_image_generator()

    assert isinstance(generator, OpenAIImageGenerator)
    assert generator.attributes == {"organization": "org-env"}
    assert get_image_generator() is generator


def test_dependency_requires_api_key(monkeypatch, tmp_path):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ValueError):
        get_image_generator()


def test_dependency_rejects_blank_key_before_opening_client(monkeypatch, tmp_path):
    created = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "   ")
    monkeypatch.setattr(
        "image_service.api.dependencies.HttpxRequestExecutor",
        lambda **kwargs: created.append(kwargs),
    )

    with pytest.raises(ValueError):
        get_image_generator()

    assert created == []
