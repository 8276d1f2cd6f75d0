"""Typed async client for the Stability REST API."""

from .errors import (
    ArtifactDecodeError,
    ConfigurationError,
    MultipartEncodingError,
    ResponseDecodeError,
    StabilityAPIError,
    StabilityError,
    StabilityTransportError,
    StatusCodeError,
)
from .models import (
    Account,
    APIErrorBody,
    Balance,
    ClipGuidancePreset,
    Engine,
    EngineType,
    FinishReason,
    GenerationOptions,
    ImageResponse,
    ImageToImageRequest,
    InitImageMode,
    Organization,
    Sampler,
    StepScheduleImageRequest,
    StrengthImageRequest,
    StylePreset,
    TextPrompt,
    TextToImageRequest,
)
from .services import StabilityClient
from .utils import ApiServer, ClientConfig, load_config, setup_logging

__version__ = "1.0.0"

__all__ = [
    "StabilityClient",
    "ApiServer",
    "ClientConfig",
    "load_config",
    "setup_logging",
    # Requests
    "TextPrompt",
    "GenerationOptions",
    "TextToImageRequest",
    "ImageToImageRequest",
    "StrengthImageRequest",
    "StepScheduleImageRequest",
    # Responses
    "Account",
    "APIErrorBody",
    "Balance",
    "Engine",
    "ImageResponse",
    "Organization",
    # Presets
    "ClipGuidancePreset",
    "EngineType",
    "FinishReason",
    "InitImageMode",
    "Sampler",
    "StylePreset",
    # Errors
    "StabilityError",
    "ConfigurationError",
    "StabilityTransportError",
    "StabilityAPIError",
    "StatusCodeError",
    "MultipartEncodingError",
    "ResponseDecodeError",
    "ArtifactDecodeError",
]
