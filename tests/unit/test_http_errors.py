"""Tests for building errors from httpx artifacts."""

import httpx

from vertexai_sdk.errors import VertexAIErrorCode, bad_response_error, fetch_error
from vertexai_sdk.types import ErrorDetails

URL = "https://us-central1-aiplatform.googleapis.com/v1/models/gemini-pro:generateContent"


def _response(status: int, **kwargs) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request("POST", URL), **kwargs)


class TestFetchError:
    """Tests for fetch_error."""

    def test_from_httpx_error(self) -> None:
        """Test transport exception becomes FETCH_ERROR."""
        exc = httpx.ConnectTimeout("timed out")
        error = fetch_error(URL, exc)
        assert error.kind == VertexAIErrorCode.FETCH_ERROR
        assert error.message == f"Error fetching from {URL}: timed out"
        assert error.custom_data.url == URL

    def test_empty_exception_message(self) -> None:
        """Test exception without text falls back to its class name."""
        error = fetch_error(URL, ConnectionResetError())
        assert error.message.endswith(": ConnectionResetError")


class TestBadResponseError:
    """Tests for bad_response_error."""

    def test_google_error_envelope(self) -> None:
        """Test message extracted from error body."""
        response = _response(
            400,
            json={"error": {"code": 400, "message": "Invalid argument", "status": "INVALID_ARGUMENT"}},
        )
        error = bad_response_error(URL, response)
        assert error.kind == VertexAIErrorCode.BAD_RESPONSE
        assert error.message == f"Bad response from {URL}: [400 Bad Request] Invalid argument"
        assert error.custom_data.status == 400
        assert error.custom_data.status_text == "Bad Request"
        assert error.custom_data.error_details is None

    def test_error_details(self) -> None:
        """Test details are appended and kept in order."""
        details = [
            {
                "@type": "type.googleapis.com/google.rpc.ErrorInfo",
                "reason": "SERVICE_DISABLED",
                "domain": "googleapis.com",
                "metadata": {"service": "aiplatform.googleapis.com"},
            },
            {"@type": "type.googleapis.com/google.rpc.Help", "links": [{"url": "x"}]},
        ]
        response = _response(403, json={"error": {"message": "API disabled", "details": details}})
        error = bad_response_error(URL, response)

        assert error.message.startswith(f"Bad response from {URL}: [403 Forbidden] API disabled [")
        assert '"reason":"SERVICE_DISABLED"' in error.message

        stored = error.custom_data.error_details
        assert stored is not None
        assert len(stored) == 2
        assert isinstance(stored[0], ErrorDetails)
        assert stored[0].type == "type.googleapis.com/google.rpc.ErrorInfo"
        assert stored[0].reason == "SERVICE_DISABLED"
        assert stored[0].metadata == {"service": "aiplatform.googleapis.com"}
        assert stored[1].model_dump(by_alias=True, exclude_none=True) == details[1]

    def test_non_json_body(self) -> None:
        """Test non-JSON body gives an empty message."""
        response = _response(502, text="<html>Bad Gateway</html>")
        error = bad_response_error(URL, response)
        assert error.message == f"Bad response from {URL}: [502 Bad Gateway] "
        assert error.custom_data.status == 502

    def test_json_without_error_object(self) -> None:
        """Test JSON body of another shape."""
        response = _response(500, json=["unexpected"])
        error = bad_response_error(URL, response)
        assert error.message.endswith("[500 Internal Server Error] ")

    def test_details_of_another_shape_are_kept(self) -> None:
        """Test details that don't fit ErrorDetails still give a BAD_RESPONSE."""
        details = [
            {"reason": 7, "metadata": ["a"]},
            "plain text detail",
            {"@type": "type.googleapis.com/google.rpc.ErrorInfo", "reason": "QUOTA"},
        ]
        response = _response(400, json={"error": {"message": "bad", "details": details}})
        error = bad_response_error(URL, response)

        assert error.kind == VertexAIErrorCode.BAD_RESPONSE
        assert error.custom_data.status == 400
        assert error.custom_data.url == URL

        stored = error.custom_data.error_details
        assert stored is not None
        assert len(stored) == 3
        assert stored[0] == {"reason": 7, "metadata": ["a"]}
        assert stored[1] == "plain text detail"
        assert isinstance(stored[2], ErrorDetails)
        assert stored[2].reason == "QUOTA"

    def test_details_keep_non_ascii_text(self) -> None:
        """Test non-ASCII text in details is not escaped in the message."""
        response = _response(400, json={"error": {"message": "bad", "details": [{"reason": "é"}]}})
        error = bad_response_error(URL, response)
        assert error.message.endswith('bad [{"reason":"é"}]')
