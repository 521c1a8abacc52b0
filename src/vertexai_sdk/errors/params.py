"""Per-kind parameter records for VertexAI errors.

Every :class:`VertexAIErrorCode` has one frozen params record declaring the
fields its message template and diagnostic data need. The union of all
records is :data:`ErrorConstructionRequest`, the single argument accepted by
:func:`vertexai_sdk.errors.create_error`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, ClassVar, Union

from vertexai_sdk.errors.codes import VertexAIErrorCode

if TYPE_CHECKING:
    from vertexai_sdk.types.errors import ErrorDetails
    from vertexai_sdk.types.responses import GenerateContentResponse

CUSTOM_DATA_FIELDS: tuple[str, ...] = (
    "url",
    "status",
    "status_text",
    "error_details",
    "response",
)
"""Params fields that are copied into ``VertexAIError.custom_data``."""


class _ErrorParams:
    """Shared behavior of the params records."""

    code: ClassVar[VertexAIErrorCode]

    def template_values(self) -> dict[str, Any]:
        """All declared fields, keyed by name, for template substitution."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    def custom_data(self) -> dict[str, Any]:
        """Declared diagnostic fields that carry a value."""
        return {
            name: value
            for name, value in self.template_values().items()
            if name in CUSTOM_DATA_FIELDS and value is not None
        }


@dataclass(frozen=True)
class FetchErrorParams(_ErrorParams):
    """The request to ``url`` failed before a response arrived."""

    code: ClassVar[VertexAIErrorCode] = VertexAIErrorCode.FETCH_ERROR

    url: str
    message: str


@dataclass(frozen=True)
class InvalidContentParams(_ErrorParams):
    code: ClassVar[VertexAIErrorCode] = VertexAIErrorCode.INVALID_CONTENT

    message: str


@dataclass(frozen=True)
class NoApiKeyParams(_ErrorParams):
    code: ClassVar[VertexAIErrorCode] = VertexAIErrorCode.NO_API_KEY


@dataclass(frozen=True)
class NoModelParams(_ErrorParams):
    code: ClassVar[VertexAIErrorCode] = VertexAIErrorCode.NO_MODEL


@dataclass(frozen=True)
class NoProjectIdParams(_ErrorParams):
    code: ClassVar[VertexAIErrorCode] = VertexAIErrorCode.NO_PROJECT_ID


@dataclass(frozen=True)
class ParseFailedParams(_ErrorParams):
    code: ClassVar[VertexAIErrorCode] = VertexAIErrorCode.PARSE_FAILED

    message: str


@dataclass(frozen=True)
class BadResponseParams(_ErrorParams):
    """The API at ``url`` answered with a non-2xx status.

    Attributes:
        url: Requested URL
        status: HTTP status code
        status_text: HTTP reason phrase
        message: Error message extracted from the body
        error_details: Structured causes from the body, in the order received
    """

    code: ClassVar[VertexAIErrorCode] = VertexAIErrorCode.BAD_RESPONSE

    url: str
    status: int
    status_text: str
    message: str
    error_details: Sequence[ErrorDetails | Mapping[str, Any]] | None = None


@dataclass(frozen=True)
class ResponseErrorParams(_ErrorParams):
    """A decoded response reported an error; ``response`` is kept verbatim."""

    code: ClassVar[VertexAIErrorCode] = VertexAIErrorCode.RESPONSE_ERROR

    message: str
    response: GenerateContentResponse | Mapping[str, Any]


ErrorConstructionRequest = Union[
    FetchErrorParams,
    InvalidContentParams,
    NoApiKeyParams,
    NoModelParams,
    NoProjectIdParams,
    ParseFailedParams,
    BadResponseParams,
    ResponseErrorParams,
]

PARAMS_BY_CODE: Mapping[VertexAIErrorCode, type[_ErrorParams]] = {
    cls.code: cls
    for cls in (
        FetchErrorParams,
        InvalidContentParams,
        NoApiKeyParams,
        NoModelParams,
        NoProjectIdParams,
        ParseFailedParams,
        BadResponseParams,
        ResponseErrorParams,
    )
}

PARAMETERLESS_CODES: frozenset[VertexAIErrorCode] = frozenset(
    code for code, cls in PARAMS_BY_CODE.items() if not fields(cls)  # type: ignore[arg-type]
)
"""Kinds whose params record declares no fields."""
