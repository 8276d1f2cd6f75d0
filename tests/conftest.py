"""Shared pytest fixtures for stabilitykit tests."""

import base64
import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from stabilitykit.models import TextPrompt  # noqa: E402
from stabilitykit.services.client import StabilityClient  # noqa: E402
from stabilitykit.utils.config import ApiServer, ClientConfig  # noqa: E402

# PNG signature plus a few bytes that are not valid UTF-8
SAMPLE_IMAGE = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe\x80--\r\n"


@pytest.fixture
def sample_image() -> bytes:
    """Binary init image payload."""
    return SAMPLE_IMAGE


@pytest.fixture
def sample_prompts() -> list[TextPrompt]:
    """Two prompts, only the first one weighted."""
    return [
        TextPrompt("A lighthouse on a cliff", weight=0.5),
        TextPrompt("stormy sea"),
    ]


@pytest.fixture
def minimal_config() -> ClientConfig:
    """Configuration with only an API key."""
    return ClientConfig(api_key="sk-test")


@pytest.fixture
def full_config() -> ClientConfig:
    """Configuration with every optional field set."""
    return ClientConfig(
        api_key="sk-test",
        client_id="render-farm",
        client_version="2.1.0",
        organization="org-123",
        api=ApiServer(scheme="http", host="localhost:8080", path_prefix="/proxy"),
    )


@pytest.fixture
def artifacts_payload() -> dict:
    """Generation envelope with two artifacts."""
    return {
        "artifacts": [
            {
                "base64": base64.b64encode(b"first image").decode(),
                "finishReason": "SUCCESS",
                "seed": 1234,
            },
            {
                "base64": base64.b64encode(b"second image").decode(),
                "finishReason": "CONTENT_FILTERED",
                "seed": 5678,
            },
        ]
    }


@pytest.fixture
def make_client() -> Callable[..., StabilityClient]:
    """Build a client whose requests go to ``handler`` instead of the network.

    Every request seen by the handler is appended to ``client.sent``.
    """

    def _make(handler, config: ClientConfig | None = None) -> StabilityClient:
        sent: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        client = StabilityClient(
            config or ClientConfig(api_key="sk-test"),
            transport=httpx.MockTransport(_record),
        )
        client.sent = sent
        return client

    return _make
