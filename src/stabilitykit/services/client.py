"""Stability Client - async HTTP client for the Stability REST API."""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from ..errors import StabilityTransportError
from ..models.generation import ImageToImageRequest, TextToImageRequest
from ..models.responses import (
    Account,
    Balance,
    Engine,
    GenerationResponse,
    ImageResponse,
)
from ..utils.config import ClientConfig, load_config
from .multipart import encode_image_to_image, make_boundary
from .validation import parse_response

logger = logging.getLogger(__name__)

# JSON lookups are quick; generation latency is unpredictable, so it gets no timeout
DEFAULT_TIMEOUT = 60.0
GENERATION_TIMEOUT = None

ENGINES_PATH = "/v1/engines/list"
ACCOUNT_PATH = "/v1/user/account"
BALANCE_PATH = "/v1/user/balance"
TEXT_TO_IMAGE_PATH = "/v1/generation/{engine_id}/text-to-image"
IMAGE_TO_IMAGE_PATH = "/v1/generation/{engine_id}/image-to-image"

_engine_list = TypeAdapter(list[Engine])


class StabilityClient:
    """Async client for the Stability REST API.

    The client holds only immutable configuration and a connection pool;
    every call builds its own request, so calls may run concurrently. Nothing
    is retried. Callers own their retry policy.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration. Loaded from the environment when omitted.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.config = config or load_config()
        self.client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, transport=transport)

    async def __aenter__(self) -> "StabilityClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def build_headers(self, extra: Optional[dict[str, str]] = None) -> dict[str, str]:
        """Authentication and identification headers for one request.

        Optional headers are only present when configured.
        """
        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        if self.config.organization:
            headers["Organization"] = self.config.organization
        if self.config.client_id:
            headers["Stability-Client-ID"] = self.config.client_id
        if self.config.client_version:
            headers["Stability-Client-Version"] = self.config.client_version
        if extra:
            headers.update(extra)
        return headers

    @staticmethod
    def _engine_path(template: str, engine_id: str) -> str:
        if not engine_id:
            raise ValueError("engine_id must be non-empty")
        # One path segment; "?", "#" and "/" must not reroute the request
        return template.format(engine_id=quote(engine_id, safe=""))

    async def _send(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        timeout: Any = DEFAULT_TIMEOUT,
        **kwargs,
    ) -> httpx.Response:
        url = self.config.api.url_for(path)
        logger.debug(f"{method} {url}", extra={"headers": headers})
        try:
            return await self.client.request(
                method, url, headers=headers, timeout=timeout, **kwargs
            )
        except httpx.TransportError as e:
            logger.warning(f"{method} {url} failed before a response was received: {e!r}")
            raise StabilityTransportError(f"Request to {url} failed: {e}") from e

    async def list_engines(self) -> list[Engine]:
        """List engines available to the account.

        Returns:
            Engines in server order

        Raises:
            StabilityError: If the request fails (see stabilitykit.errors)
        """
        response = await self._send(
            "GET", ENGINES_PATH, self.build_headers({"Accept": "application/json"})
        )
        return parse_response(response, _engine_list.validate_json)

    async def get_account(self) -> Account:
        """Get the account associated with the API key."""
        response = await self._send(
            "GET", ACCOUNT_PATH, self.build_headers({"Accept": "application/json"})
        )
        return parse_response(response, Account.model_validate_json)

    async def get_balance(self) -> Balance:
        """Get the credit balance of the account or configured organization."""
        response = await self._send(
            "GET", BALANCE_PATH, self.build_headers({"Accept": "application/json"})
        )
        return parse_response(response, Balance.model_validate_json)

    async def generate_from_text(
        self, request: TextToImageRequest, engine_id: str
    ) -> list[ImageResponse]:
        """Generate images from text prompts.

        Args:
            request: Text-to-image parameters
            engine_id: Engine to generate with (see list_engines)

        Returns:
            Generated artifacts

        Raises:
            StabilityError: If the request fails (see stabilitykit.errors)
        """
        path = self._engine_path(TEXT_TO_IMAGE_PATH, engine_id)
        headers = self.build_headers(
            {"Accept": "application/json", "Content-Type": "application/json"}
        )

        logger.info(f"Generating from {len(request.text_prompts)} prompt(s) with {engine_id}")

        response = await self._send(
            "POST",
            path,
            headers,
            timeout=GENERATION_TIMEOUT,
            json=request.to_dict(),
        )
        artifacts = parse_response(response, GenerationResponse.model_validate_json).artifacts

        logger.info(f"{engine_id} returned {len(artifacts)} artifact(s)")
        return artifacts

    async def generate_from_image(
        self, request: ImageToImageRequest, engine_id: str
    ) -> list[ImageResponse]:
        """Generate images from an init image and text prompts.

        The body is multipart/form-data with a boundary unique to this call.

        Args:
            request: Request built with ImageToImageRequest.strength() or
                ImageToImageRequest.step_schedule()
            engine_id: Engine to generate with (see list_engines)

        Returns:
            Generated artifacts

        Raises:
            MultipartEncodingError: If the request cannot be encoded (before dispatch)
            StabilityError: If the request fails (see stabilitykit.errors)
        """
        path = self._engine_path(IMAGE_TO_IMAGE_PATH, engine_id)
        boundary = make_boundary()
        body = encode_image_to_image(request, boundary)
        headers = self.build_headers(
            {
                "Accept": "application/json",
                "Content-Type": f"multipart/form-data; boundary={boundary}",
            }
        )

        logger.info(
            f"Generating from init image ({request.init_image_mode.value}) with {engine_id}"
        )

        response = await self._send(
            "POST",
            path,
            headers,
            timeout=GENERATION_TIMEOUT,
            content=body,
        )
        artifacts = parse_response(response, GenerationResponse.model_validate_json).artifacts

        logger.info(f"{engine_id} returned {len(artifacts)} artifact(s)")
        return artifacts

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
