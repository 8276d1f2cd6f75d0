"""Pydantic models for payloads returned by the Stability REST API."""

import binascii
from base64 import b64decode
from pathlib import Path

from pydantic import BaseModel, Field

from ..errors import ArtifactDecodeError
from .presets import EngineType, FinishReason


class Engine(BaseModel):
    """A generation engine available to the account."""

    id: str
    name: str
    description: str
    type: EngineType

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "stable-diffusion-xl-1024-v1-0",
                    "name": "Stable Diffusion XL 1.0",
                    "description": "Stability-AI Stable Diffusion XL v1.0",
                    "type": "PICTURE",
                }
            ]
        }
    }


class ImageResponse(BaseModel):
    """One generated artifact."""

    base64: str
    finish_reason: FinishReason = Field(alias="finishReason")
    seed: int

    model_config = {"populate_by_name": True}

    @property
    def data(self) -> bytes:
        """Decode the artifact into raw image bytes.

        Raises:
            ArtifactDecodeError: If the payload is not valid base64
        """
        try:
            return b64decode(self.base64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ArtifactDecodeError(f"Artifact is not valid base64: {e}") from e

    def save(self, path: str | Path) -> Path:
        """Write the decoded image to ``path`` and return it."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.data)
        return path


class GenerationResponse(BaseModel):
    """Envelope returned by the generation endpoints."""

    artifacts: list[ImageResponse]


class Organization(BaseModel):
    """Organization membership of an account."""

    id: str
    name: str
    role: str
    is_default: bool


class Account(BaseModel):
    """The authenticated user's account."""

    id: str
    email: str
    organizations: list[Organization]
    profile_picture: str | None = None


class Balance(BaseModel):
    """Credit balance of the account or organization."""

    credits: float


class APIErrorBody(BaseModel):
    """Structured error payload returned on failed requests."""

    id: str
    message: str
    name: str
