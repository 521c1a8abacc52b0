"""Error registry: the single construction entry point for VertexAI errors."""

from __future__ import annotations

from typing import Literal, overload

from vertexai_sdk.errors.base import CustomData, VertexAIError
from vertexai_sdk.errors.codes import VertexAIErrorCode
from vertexai_sdk.errors.messages import ERROR_MESSAGES, replace_template
from vertexai_sdk.errors.params import (
    PARAMETERLESS_CODES,
    PARAMS_BY_CODE,
    ErrorConstructionRequest,
)


@overload
def create_error(request: ErrorConstructionRequest) -> VertexAIError: ...


@overload
def create_error(
    request: Literal[
        VertexAIErrorCode.NO_API_KEY,
        VertexAIErrorCode.NO_MODEL,
        VertexAIErrorCode.NO_PROJECT_ID,
    ],
) -> VertexAIError: ...


def create_error(
    request: ErrorConstructionRequest | VertexAIErrorCode,
) -> VertexAIError:
    """Create a VertexAIError.

    The caller is responsible for raising the returned error.

    Args:
        request: Params record of the error kind, or the bare code of a
            kind that declares no params

    Returns:
        VertexAIError with rendered message and custom data

    Raises:
        TypeError: If a bare code is given for a kind that requires params

    Example:
        >>> raise create_error(FetchErrorParams(url=url, message="timeout"))
    """
    if isinstance(request, VertexAIErrorCode):
        if request not in PARAMETERLESS_CODES:
            raise TypeError(
                f"{request.full_code} requires {PARAMS_BY_CODE[request].__name__}"
            )
        request = PARAMS_BY_CODE[request]()  # type: ignore[assignment]

    message = replace_template(ERROR_MESSAGES[request.code], request.template_values())
    return VertexAIError(request.code, message, CustomData(**request.custom_data()))
