"""Error codes for the VertexAI SDK.

Each failure the SDK can report is tagged with exactly one
:class:`VertexAIErrorCode`. The set is closed.
"""

from __future__ import annotations

from enum import Enum

SERVICE = "vertexAI"
"""Service id used to qualify error codes (e.g. 'vertexAI/no-model')."""

SERVICE_NAME = "VertexAI"
"""Display name prefixed to full error messages."""


class VertexAIErrorCode(str, Enum):
    """Closed set of error kinds raised by the SDK."""

    FETCH_ERROR = "fetch-error"
    """The HTTP request could not be completed."""

    INVALID_CONTENT = "invalid-content"
    """Request content is malformed."""

    NO_API_KEY = "no-api-key"
    """No API key was configured."""

    NO_MODEL = "no-model"
    """No model name was given."""

    NO_PROJECT_ID = "no-project-id"
    """No project id was configured."""

    PARSE_FAILED = "parse-failed"
    """A response body could not be parsed."""

    BAD_RESPONSE = "bad-response"
    """The API answered with a non-2xx status."""

    RESPONSE_ERROR = "response-error"
    """A successful response reported an application-level error."""

    @property
    def full_code(self) -> str:
        """Service-qualified code, e.g. 'vertexAI/fetch-error'."""
        return f"{SERVICE}/{self.value}"
