"""Unit tests for response classification and error mapping."""

import json

import httpx
import pytest

from stabilitykit.errors import (
    ResponseDecodeError,
    StabilityAPIError,
    StabilityError,
    StatusCodeError,
)
from stabilitykit.models import Balance, GenerationResponse
from stabilitykit.services.validation import parse_response, raise_for_api_error

pytestmark = pytest.mark.unit


def make_response(status_code: int, body) -> httpx.Response:
    content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return httpx.Response(status_code, content=content)


class TestParseResponse:
    """Tests for parse_response."""

    def test_success_decodes_artifacts(self, artifacts_payload):
        """A 200 envelope yields artifacts equal to the input JSON."""
        response = make_response(200, artifacts_payload)
        result = parse_response(response, GenerationResponse.model_validate_json)

        assert len(result.artifacts) == len(artifacts_payload["artifacts"])
        for artifact, raw in zip(result.artifacts, artifacts_payload["artifacts"]):
            assert artifact.base64 == raw["base64"]
            assert artifact.finish_reason.value == raw["finishReason"]
            assert artifact.seed == raw["seed"]

    def test_success_with_wrong_schema_is_decode_error(self):
        """A 200 body of the wrong shape is a decode error, not an API error."""
        response = make_response(200, {"unexpected": True})
        with pytest.raises(ResponseDecodeError) as exc_info:
            parse_response(response, GenerationResponse.model_validate_json)
        assert not isinstance(exc_info.value, StabilityAPIError)

    def test_success_with_non_json_is_decode_error(self):
        """A 200 body that is not JSON is a decode error."""
        response = make_response(200, b"<html>ok</html>")
        with pytest.raises(ResponseDecodeError):
            parse_response(response, Balance.model_validate_json)

    def test_unknown_finish_reason_is_decode_error(self, artifacts_payload):
        """Enum values outside the known set are schema mismatches."""
        artifacts_payload["artifacts"][0]["finishReason"] = "EXPLODED"
        response = make_response(200, artifacts_payload)
        with pytest.raises(ResponseDecodeError):
            parse_response(response, GenerationResponse.model_validate_json)

    def test_non_200_delegates_to_error_mapping(self):
        """Error statuses never reach the decoder."""
        decoder_calls = []

        def decode(content):
            decoder_calls.append(content)

        response = make_response(500, {"id": "x", "message": "boom", "name": "server_error"})
        with pytest.raises(StabilityAPIError):
            parse_response(response, decode)
        assert decoder_calls == []


class TestRaiseForApiError:
    """Tests for the two-tier error fallback."""

    def test_structured_error_body(self):
        """A decodable error body yields the server's message verbatim."""
        response = make_response(
            429, {"id": "x", "message": "quota exceeded", "name": "QuotaError"}
        )
        with pytest.raises(StabilityAPIError) as exc_info:
            raise_for_api_error(response)

        error = exc_info.value
        assert error.message == "quota exceeded"
        assert str(error) == "quota exceeded"
        assert error.status_code == 429
        assert error.error_id == "x"
        assert error.name == "QuotaError"

    def test_html_body_yields_status_error(self):
        """A gateway HTML page yields a generic status error with the code."""
        response = make_response(502, b"<html><body>Bad Gateway</body></html>")
        with pytest.raises(StatusCodeError) as exc_info:
            raise_for_api_error(response)
        assert exc_info.value.status_code == 502
        assert "502" in str(exc_info.value)

    def test_empty_body_yields_status_error(self):
        """An empty body is not a crash."""
        with pytest.raises(StatusCodeError) as exc_info:
            raise_for_api_error(make_response(503, b""))
        assert exc_info.value.status_code == 503

    def test_json_of_other_shape_yields_status_error(self):
        """JSON that is not an error payload falls back to the status code."""
        with pytest.raises(StatusCodeError) as exc_info:
            raise_for_api_error(make_response(400, {"detail": "nope"}))
        assert exc_info.value.status_code == 400

    def test_all_errors_share_base_class(self):
        """Callers can catch every client error with StabilityError."""
        with pytest.raises(StabilityError):
            raise_for_api_error(make_response(404, b"not found"))
