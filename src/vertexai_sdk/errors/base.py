"""Error class raised by the VertexAI SDK.

Provides:
- CustomData: structured diagnostic data attached to an error
- VertexAIError: the single exception type of the SDK
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from vertexai_sdk.errors.codes import SERVICE_NAME, VertexAIErrorCode

if TYPE_CHECKING:
    from vertexai_sdk.types.errors import ErrorDetails
    from vertexai_sdk.types.responses import GenerateContentResponse


@dataclass(frozen=True)
class CustomData:
    """Diagnostic data attached to a VertexAIError.

    Values are stored exactly as they were passed when the error was built.
    """

    url: str | None = None
    """Requested URL"""

    status: int | None = None
    """HTTP status code"""

    status_text: str | None = None
    """HTTP status text associated with the error"""

    error_details: Sequence[ErrorDetails | Mapping[str, Any]] | None = None
    """Additional error details from an HTTP response"""

    response: GenerateContentResponse | Mapping[str, Any] | None = None
    """The response that carried an application-level error"""

    def to_dict(self) -> dict[str, Any]:
        """Return the fields that are set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


class VertexAIError(Exception):
    """An error returned by the VertexAI SDK.

    Attributes:
        kind: Error kind
        code: Service-qualified code (e.g. 'vertexAI/bad-response')
        message: Human-readable message
        custom_data: Diagnostic data for programmatic handling
    """

    def __init__(
        self,
        kind: VertexAIErrorCode,
        message: str,
        custom_data: CustomData | None = None,
    ) -> None:
        self.kind = kind
        self.code = kind.full_code
        self.message = message
        self.custom_data = custom_data if custom_data is not None else CustomData()
        super().__init__(f"{SERVICE_NAME}: {message} ({self.code}).")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"
