"""Closed value sets accepted and returned by the Stability REST API."""

from enum import Enum


class Sampler(str, Enum):
    """Sampler used for the diffusion process.

    Omitting the sampler lets the server pick an appropriate one.
    """

    DDIM = "DDIM"  # Denoising Diffusion Implicit Model
    DDPM = "DDPM"  # Denoising Diffusion Probabilistic Models
    K_DPMPP_2M = "K_DPMPP_2M"
    K_DPMPP_2S_ANCESTRAL = "K_DPMPP_2S_ANCESTRAL"
    K_DPM_2 = "K_DPM_2"
    K_DPM_2_ANCESTRAL = "K_DPM_2_ANCESTRAL"
    K_EULER = "K_EULER"
    K_EULER_ANCESTRAL = "K_EULER_ANCESTRAL"
    K_HEUN = "K_HEUN"
    K_LMS = "K_LMS"  # Kernel Least Mean Square


class ClipGuidancePreset(str, Enum):
    """CLIP guidance strategy (server default: NONE)."""

    NONE = "NONE"
    FAST_BLUE = "FAST_BLUE"
    FAST_GREEN = "FAST_GREEN"
    SIMPLE = "SIMPLE"
    SLOW = "SLOW"
    SLOWER = "SLOWER"
    SLOWEST = "SLOWEST"


class StylePreset(str, Enum):
    """Pre-defined styles. The server-side list is subject to change."""

    MODEL_3D = "3d-model"
    ANALOG_FILM = "analog-film"
    ANIME = "anime"
    CINEMATIC = "cinematic"
    COMIC_BOOK = "comic-book"
    DIGITAL_ART = "digital-art"
    ENHANCE = "enhance"
    FANTASY_ART = "fantasy-art"
    ISOMETRIC = "isometric"
    LINE_ART = "line-art"
    LOW_POLY = "low-poly"
    MODELING_COMPOUND = "modeling-compound"
    NEON_PUNK = "neon-punk"
    ORIGAMI = "origami"
    PHOTOGRAPHIC = "photographic"
    PIXEL_ART = "pixel-art"
    TILE_TEXTURE = "tile-texture"


class FinishReason(str, Enum):
    """Why generation of a single artifact stopped."""

    CONTENT_FILTERED = "CONTENT_FILTERED"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"


class EngineType(str, Enum):
    """Kind of content an engine produces."""

    AUDIO = "AUDIO"
    CLASSIFICATION = "CLASSIFICATION"
    PICTURE = "PICTURE"
    STORAGE = "STORAGE"
    TEXT = "TEXT"
    VIDEO = "VIDEO"


class InitImageMode(str, Enum):
    """How the init image's influence on an image-to-image result is controlled."""

    IMAGE_STRENGTH = "IMAGE_STRENGTH"
    STEP_SCHEDULE = "STEP_SCHEDULE"


def wire_value(value):
    """Convert enum members to their API literal; other values pass through."""
    if isinstance(value, Enum):
        return value.value
    return value
