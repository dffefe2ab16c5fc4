import pytest

from image_service.domain.entities.image_generation import (
    GenerationResponse,
    ImageResult,
    ResponseFormat,
)
from image_service.domain.interfaces.image_generator import ProtocolViolationError
from image_service.infrastructure.openai.response_extractor import extract_all, extract_first


def test_extract_first_returns_url():
    results = [ImageResult(url="http://example/img.png")]
    assert extract_first(results, ResponseFormat.URL.select) == "http://example/img.png"


def test_extract_first_only_uses_first_result():
    results = [ImageResult(url="http://example/1.png"), ImageResult(url="http://example/2.png")]
    assert extract_first(results, ResponseFormat.URL.select) == "http://example/1.png"


def test_extract_first_with_base64_selector():
    results = [ImageResult(b64_json="aGVsbG8=")]
    assert extract_first(results, ResponseFormat.BASE64.select) == "aGVsbG8="


def test_extract_first_without_selector_returns_projected_value():
    assert extract_first(["http://example/img.png"]) == "http://example/img.png"


@pytest.mark.parametrize("selector", [ResponseFormat.URL.select, None])
def test_extract_first_on_empty_response_raises(selector):
    with pytest.raises(ProtocolViolationError):
        extract_first([], selector)


def test_extract_first_missing_field_raises():
    results = [ImageResult(b64_json="aGVsbG8=")]
    with pytest.raises(ProtocolViolationError):
        extract_first(results, ResponseFormat.URL.select)


def test_extract_all_projects_every_result():
    response = GenerationResponse.model_validate(
        {
            "created": 1700000000,
            "data": [
                {"url": "http://example/1.png", "revised_prompt": "a fox"},
                {"url": "http://example/2.png"},
            ],
        }
    )
    assert extract_all(response.data, ResponseFormat.URL.select) == [
        "http://example/1.png",
        "http://example/2.png",
    ]


def test_extract_all_rejects_result_missing_field():
    with pytest.raises(ProtocolViolationError):
        extract_all([ImageResult(url="http://example/1.png"), ImageResult()], ResponseFormat.URL.select)
