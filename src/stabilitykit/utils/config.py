"""Configuration loading and validation for stabilitykit."""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import httpx
from dotenv import find_dotenv, load_dotenv

from ..errors import ConfigurationError

DEFAULT_SCHEME = "https"
DEFAULT_HOST = "api.stability.ai"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


@dataclass(frozen=True)
class ApiServer:
    """Where requests are sent: ``{scheme}://{host}{path_prefix}{endpoint}``."""

    scheme: str = DEFAULT_SCHEME
    host: str = DEFAULT_HOST
    path_prefix: Optional[str] = None

    def __post_init__(self):
        if not self.scheme or not _SCHEME_RE.match(self.scheme):
            raise ConfigurationError(f"Invalid URL scheme: {self.scheme!r}")
        if not self.host or re.search(r"[\s/?#]", self.host):
            raise ConfigurationError(f"Invalid API host: {self.host!r}")
        if self.path_prefix and not self.path_prefix.startswith("/"):
            raise ConfigurationError(
                f"Path prefix must start with '/': {self.path_prefix!r}"
            )
        try:
            httpx.URL(self.url_for("/"))
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid API server URL: {e}") from e

    def url_for(self, path: str) -> str:
        """Build the absolute URL for an endpoint path like ``/v1/engines/list``."""
        if not path.startswith("/"):
            raise ConfigurationError(f"Endpoint path must start with '/': {path!r}")
        prefix = (self.path_prefix or "").rstrip("/")
        return f"{self.scheme}://{self.host}{prefix}{path}"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration.

    Attributes:
        api_key: Key used for the ``Authorization: Bearer`` header
        client_id: Identifies the calling application (``Stability-Client-ID``)
        client_version: Version of the calling application (``Stability-Client-Version``)
        organization: Scopes requests to a non-default organization (``Organization``)
        api: Server location
    """

    api_key: str
    client_id: Optional[str] = None
    client_version: Optional[str] = None
    organization: Optional[str] = None
    api: ApiServer = field(default_factory=ApiServer)

    def __post_init__(self):
        if not self.api_key:
            raise ConfigurationError("STABILITY_API_KEY is required")

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        return (
            f"ClientConfig(api_key='***', client_id={self.client_id!r}, "
            f"client_version={self.client_version!r}, "
            f"organization={self.organization!r}, api={self.api!r})"
        )


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value or None


def load_config(env_file: Optional[str | Path] = None) -> ClientConfig:
    """Load configuration from environment variables.

    Values from ``env_file`` (default: ``.env`` discovered from the working
    directory) never override variables already set in the environment.

    Raises:
        ConfigurationError: If the API key is missing or the server settings are invalid
    """
    load_dotenv(env_file if env_file is not None else find_dotenv(usecwd=True))

    api = ApiServer(
        scheme=_env("STABILITY_API_SCHEME") or DEFAULT_SCHEME,
        host=_env("STABILITY_API_HOST") or DEFAULT_HOST,
        path_prefix=_env("STABILITY_API_PATH_PREFIX"),
    )

    return ClientConfig(
        api_key=_env("STABILITY_API_KEY") or "",
        client_id=_env("STABILITY_CLIENT_ID"),
        client_version=_env("STABILITY_CLIENT_VERSION"),
        organization=_env("STABILITY_ORGANIZATION"),
        api=api,
    )
