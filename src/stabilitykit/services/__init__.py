# Services for stabilitykit
from .client import StabilityClient
from .multipart import MultipartFormData, encode_image_to_image, make_boundary
from .validation import parse_response, raise_for_api_error

__all__ = [
    "StabilityClient",
    "MultipartFormData",
    "encode_image_to_image",
    "make_boundary",
    "parse_response",
    "raise_for_api_error",
]
