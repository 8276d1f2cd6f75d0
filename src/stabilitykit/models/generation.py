"""Request models for text-to-image and image-to-image generation.

Requests are immutable. Every ``with_*`` method returns a new request with
one change applied, so a partially built request can be shared as a
template between concurrent calls.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Iterator, Optional, Sequence

from .presets import ClipGuidancePreset, InitImageMode, Sampler, StylePreset, wire_value


@dataclass(frozen=True)
class TextPrompt:
    """One weighted prompt fragment.

    A negative weight turns the prompt into a negative prompt.
    """

    text: str
    weight: Optional[float] = None

    def __post_init__(self):
        if not self.text:
            raise ValueError("TextPrompt text must be non-empty")

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON request bodies."""
        result: dict = {"text": self.text}
        if self.weight is not None:
            result["weight"] = self.weight
        return result


@dataclass(frozen=True)
class GenerationOptions:
    """Tuning fields shared by every generation request.

    Ranges are documented by the API and enforced server-side:
    cfg_scale 0-35, samples 1-10, seed 0-4294967295 (0 = random), steps 10-150.
    """

    cfg_scale: Optional[int] = None
    clip_guidance_preset: Optional[ClipGuidancePreset] = None
    sampler: Optional[Sampler] = None
    samples: Optional[int] = None
    seed: Optional[int] = None
    steps: Optional[int] = None
    style_preset: Optional[StylePreset] = None

    def form_fields(self) -> Iterator[tuple[str, Any]]:
        """Yield present fields as (name, value) in declaration order."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                yield f.name, value

    def to_dict(self) -> dict:
        """Convert present fields to a JSON-ready dictionary."""
        return {name: wire_value(value) for name, value in self.form_fields()}


def _validate_prompts(text_prompts: Sequence[TextPrompt]) -> tuple[TextPrompt, ...]:
    prompts = tuple(text_prompts)
    if not prompts:
        raise ValueError("At least one text prompt is required")
    return prompts


class _OptionSetters:
    """Immutable setters for the shared tuning fields.

    Subclasses are frozen dataclasses holding an ``options`` field.
    """

    options: GenerationOptions

    def with_options(self, **changes):
        """Return a copy with the given tuning fields replaced."""
        return replace(self, options=replace(self.options, **changes))

    def with_cfg_scale(self, cfg_scale: Optional[int]):
        """How strictly the diffusion process adheres to the prompt text."""
        return self.with_options(cfg_scale=cfg_scale)

    def with_clip_guidance_preset(self, preset: Optional[ClipGuidancePreset]):
        return self.with_options(clip_guidance_preset=preset)

    def with_sampler(self, sampler: Optional[Sampler]):
        return self.with_options(sampler=sampler)

    def with_samples(self, samples: Optional[int]):
        """Number of images to generate."""
        return self.with_options(samples=samples)

    def with_seed(self, seed: Optional[int]):
        """Random noise seed (0 or None for a random seed)."""
        return self.with_options(seed=seed)

    def with_steps(self, steps: Optional[int]):
        """Number of diffusion steps to run."""
        return self.with_options(steps=steps)

    def with_style_preset(self, style_preset: Optional[StylePreset]):
        return self.with_options(style_preset=style_preset)


@dataclass(frozen=True)
class TextToImageRequest(_OptionSetters):
    """Request for text-to-image generation.

    ``height`` and ``width`` must be multiples of 64 and their product must
    fall in the engine's supported range (262,144 to 1,048,576 pixels for most
    engines, from 589,824 for 768 engines). The server validates this.
    """

    text_prompts: Sequence[TextPrompt]
    height: Optional[int] = None
    width: Optional[int] = None
    options: GenerationOptions = field(default_factory=GenerationOptions)

    def __post_init__(self):
        object.__setattr__(self, "text_prompts", _validate_prompts(self.text_prompts))

    def to_dict(self) -> dict:
        """Convert to the flat JSON body expected by the API."""
        result: dict = {}
        if self.height is not None:
            result["height"] = self.height
        if self.width is not None:
            result["width"] = self.width
        result["text_prompts"] = [prompt.to_dict() for prompt in self.text_prompts]
        result.update(self.options.to_dict())
        return result


@dataclass(frozen=True)
class ImageToImageRequest(_OptionSetters):
    """Request for image-to-image generation.

    Use :meth:`strength` or :meth:`step_schedule` to build one; each returns
    a concrete variant that only carries its own mode fields.
    """

    text_prompts: Sequence[TextPrompt]
    init_image: bytes
    options: GenerationOptions = field(default_factory=GenerationOptions)

    init_image_mode = None

    def __post_init__(self):
        if type(self) is ImageToImageRequest:
            raise TypeError(
                "ImageToImageRequest is abstract; use ImageToImageRequest.strength() "
                "or ImageToImageRequest.step_schedule()"
            )
        object.__setattr__(self, "text_prompts", _validate_prompts(self.text_prompts))

    @classmethod
    def strength(
        cls,
        prompts: Sequence[TextPrompt],
        init_image: bytes,
        image_strength: Optional[float] = None,
    ) -> "StrengthImageRequest":
        """Create a request controlled by image strength.

        Args:
            prompts: Text prompts to use for generation
            init_image: Image used to initialize diffusion in lieu of random noise
            image_strength: 0-1; values close to 1 yield images very similar to
                the init image, values close to 0 wildly different ones

        Returns:
            StrengthImageRequest
        """
        return StrengthImageRequest(
            text_prompts=prompts, init_image=init_image, image_strength=image_strength
        )

    @classmethod
    def step_schedule(
        cls,
        prompts: Sequence[TextPrompt],
        init_image: bytes,
        step_schedule_start: Optional[float] = None,
        step_schedule_end: Optional[float] = None,
    ) -> "StepScheduleImageRequest":
        """Create a request controlled by a step schedule.

        Args:
            prompts: Text prompts to use for generation
            init_image: Image used to initialize diffusion in lieu of random noise
            step_schedule_start: Proportion of the start of the diffusion steps
                to skip (0-1, server default 0.65)
            step_schedule_end: Proportion of the end of the diffusion steps to
                skip (0-1)

        Returns:
            StepScheduleImageRequest
        """
        return StepScheduleImageRequest(
            text_prompts=prompts,
            init_image=init_image,
            step_schedule_start=step_schedule_start,
            step_schedule_end=step_schedule_end,
        )

    def mode_fields(self) -> Iterator[tuple[str, Any]]:
        raise NotImplementedError

    def form_fields(self) -> list[tuple[str, Any]]:
        """Scalar form fields in emission order.

        Tuning fields come first, then the mode marker and the mode fields.
        """
        result = list(self.options.form_fields())
        result.append(("init_image_mode", self.init_image_mode))
        result.extend(self.mode_fields())
        return result

    def to_dict(self) -> dict:
        """JSON-ready view of the request, without the image bytes."""
        result = {"text_prompts": [prompt.to_dict() for prompt in self.text_prompts]}
        result.update({name: wire_value(value) for name, value in self.form_fields()})
        return result


@dataclass(frozen=True)
class StrengthImageRequest(ImageToImageRequest):
    """Image-to-image request in IMAGE_STRENGTH mode."""

    image_strength: Optional[float] = None

    init_image_mode = InitImageMode.IMAGE_STRENGTH

    def mode_fields(self) -> Iterator[tuple[str, Any]]:
        if self.image_strength is not None:
            yield "image_strength", self.image_strength

    def with_image_strength(self, image_strength: Optional[float]) -> "StrengthImageRequest":
        return replace(self, image_strength=image_strength)

    def to_step_schedule(self) -> "StepScheduleImageRequest":
        """Equivalent request expressed as a step schedule.

        An image strength of 0.35 maps to a step_schedule_start of 0.65.
        """
        start = None if self.image_strength is None else 1 - self.image_strength
        return StepScheduleImageRequest(
            text_prompts=self.text_prompts,
            init_image=self.init_image,
            options=self.options,
            step_schedule_start=start,
        )


@dataclass(frozen=True)
class StepScheduleImageRequest(ImageToImageRequest):
    """Image-to-image request in STEP_SCHEDULE mode."""

    step_schedule_start: Optional[float] = None
    step_schedule_end: Optional[float] = None

    init_image_mode = InitImageMode.STEP_SCHEDULE

    def mode_fields(self) -> Iterator[tuple[str, Any]]:
        if self.step_schedule_start is not None:
            yield "step_schedule_start", self.step_schedule_start
        if self.step_schedule_end is not None:
            yield "step_schedule_end", self.step_schedule_end

    def with_step_schedule(
        self,
        step_schedule_start: Optional[float],
        step_schedule_end: Optional[float] = None,
    ) -> "StepScheduleImageRequest":
        return replace(
            self,
            step_schedule_start=step_schedule_start,
            step_schedule_end=step_schedule_end,
        )
