"""multipart/form-data encoding for image-to-image requests."""

import logging
import uuid
from typing import Any, Iterable

from ..errors import MultipartEncodingError
from ..models.generation import ImageToImageRequest, TextPrompt
from ..models.presets import wire_value

logger = logging.getLogger(__name__)

CRLF = b"\r\n"
INIT_IMAGE_FIELD = "init_image"
INIT_IMAGE_FILENAME = "init_image.png"
INIT_IMAGE_CONTENT_TYPE = "image/png"


def make_boundary() -> str:
    """Return a fresh boundary token. Never reuse one across requests."""
    return f"Boundary-{uuid.uuid4().hex}"


class MultipartFormData:
    """Builds one multipart/form-data body.

    Instances hold per-request state; create a new one for every request.
    Parts are emitted in the order they are added.
    """

    def __init__(self, boundary: str):
        if not boundary:
            raise MultipartEncodingError("Multipart boundary must be non-empty")
        self.boundary = boundary
        self._delimiter = self._encode(f"--{boundary}", "boundary")
        self._parts: list[bytes] = []

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    def _encode(self, text: str, name: str) -> bytes:
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MultipartEncodingError(
                f"Field '{name}' cannot be encoded as UTF-8: {e}"
            ) from e

    def _append_part(self, name: str, headers: list[str], content: bytes) -> None:
        if self._delimiter in content:
            raise MultipartEncodingError(
                f"Field '{name}' contains the multipart boundary"
            )
        part = [self._delimiter, CRLF]
        for header in headers:
            part += [self._encode(header, name), CRLF]
        part += [CRLF, content, CRLF]
        self._parts.append(b"".join(part))

    def add_field(self, name: str, value: Any) -> None:
        """Add a scalar text field. ``None`` values emit no part at all."""
        if value is None:
            return
        self._append_part(
            name,
            [f'Content-Disposition: form-data; name="{name}"'],
            self._encode(str(wire_value(value)), name),
        )

    def add_file(self, name: str, data: bytes, filename: str, content_type: str) -> None:
        """Add a binary field. The payload is written verbatim."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise MultipartEncodingError(
                f"Field '{name}' expects bytes, got {type(data).__name__}"
            )
        self._append_part(
            name,
            [
                f'Content-Disposition: form-data; name="{name}"; filename="{filename}"',
                f"Content-Type: {content_type}",
            ],
            bytes(data),
        )

    def add_prompts(self, name: str, prompts: Iterable[TextPrompt]) -> None:
        """Flatten prompts into ``name[i][text]`` and ``name[i][weight]`` fields."""
        for index, prompt in enumerate(prompts):
            prefix = f"{name}[{index}]"
            self.add_field(f"{prefix}[text]", prompt.text)
            self.add_field(f"{prefix}[weight]", prompt.weight)

    def getvalue(self) -> bytes:
        """Return the complete body, including the closing delimiter."""
        return b"".join(self._parts) + self._delimiter + b"--" + CRLF


def encode_image_to_image(request: ImageToImageRequest, boundary: str) -> bytes:
    """Serialize an image-to-image request into a multipart body.

    Order: prompts, init image, tuning fields, init_image_mode, mode fields.

    Raises:
        MultipartEncodingError: If any field cannot be represented in the body
    """
    form = MultipartFormData(boundary)
    form.add_prompts("text_prompts", request.text_prompts)
    form.add_file(
        INIT_IMAGE_FIELD,
        request.init_image,
        INIT_IMAGE_FILENAME,
        INIT_IMAGE_CONTENT_TYPE,
    )
    for name, value in request.form_fields():
        form.add_field(name, value)
    body = form.getvalue()
    logger.debug(
        f"Encoded {request.init_image_mode.value} request: "
        f"{len(request.text_prompts)} prompt(s), {len(body)} bytes"
    )
    return body
