# Data models for stabilitykit
from .presets import (
    ClipGuidancePreset,
    EngineType,
    FinishReason,
    InitImageMode,
    Sampler,
    StylePreset,
)
from .generation import (
    GenerationOptions,
    ImageToImageRequest,
    StepScheduleImageRequest,
    StrengthImageRequest,
    TextPrompt,
    TextToImageRequest,
)
from .responses import (
    Account,
    APIErrorBody,
    Balance,
    Engine,
    GenerationResponse,
    ImageResponse,
    Organization,
)

__all__ = [
    # Presets
    "ClipGuidancePreset",
    "EngineType",
    "FinishReason",
    "InitImageMode",
    "Sampler",
    "StylePreset",
    # Requests
    "GenerationOptions",
    "ImageToImageRequest",
    "StepScheduleImageRequest",
    "StrengthImageRequest",
    "TextPrompt",
    "TextToImageRequest",
    # Responses
    "Account",
    "APIErrorBody",
    "Balance",
    "Engine",
    "GenerationResponse",
    "ImageResponse",
    "Organization",
]
