import pytest
import respx

from image_service.api.dependencies import reset_dependencies
from image_service.config.settings import get_settings
from image_service.infrastructure.openai.http_executor import HttpxRequestExecutor
from image_service.infrastructure.openai.openai_image_generator import OpenAIImageGenerator

ENDPOINT = "https://api.openai.com/v1/images/generations"


@pytest.fixture(autouse=True)
def _clean_singletons():
    """Drop cached settings and generator between tests."""
    get_settings.cache_clear()
    reset_dependencies()
    yield
    get_settings.cache_clear()
    reset_dependencies()


@pytest.fixture
def mock_api():
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def executor():
    return HttpxRequestExecutor(max_retries=2, backoff_multiplier=0)


@pytest.fixture
def generator(executor):
    return OpenAIImageGenerator(api_key="sk-test", organization="org-123", executor=executor)
