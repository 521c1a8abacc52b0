"""
Error taxonomy for vertexai-sdk.

Every failure is a VertexAIError tagged with a VertexAIErrorCode. Errors are
built through create_error() from a per-kind params record and raised by
the caller.
"""

from vertexai_sdk.errors.base import CustomData, VertexAIError
from vertexai_sdk.errors.codes import SERVICE, SERVICE_NAME, VertexAIErrorCode
from vertexai_sdk.errors.http import bad_response_error, fetch_error
from vertexai_sdk.errors.messages import ERROR_MESSAGES, placeholders, replace_template
from vertexai_sdk.errors.params import (
    CUSTOM_DATA_FIELDS,
    PARAMETERLESS_CODES,
    PARAMS_BY_CODE,
    BadResponseParams,
    ErrorConstructionRequest,
    FetchErrorParams,
    InvalidContentParams,
    NoApiKeyParams,
    NoModelParams,
    NoProjectIdParams,
    ParseFailedParams,
    ResponseErrorParams,
)
from vertexai_sdk.errors.registry import create_error
from vertexai_sdk.errors.response import format_block_error_message, response_error

__all__ = [
    # Codes and templates
    "CUSTOM_DATA_FIELDS",
    "ERROR_MESSAGES",
    "PARAMETERLESS_CODES",
    "PARAMS_BY_CODE",
    "SERVICE",
    "SERVICE_NAME",
    # Params
    "BadResponseParams",
    "CustomData",
    "ErrorConstructionRequest",
    "FetchErrorParams",
    "InvalidContentParams",
    "NoApiKeyParams",
    "NoModelParams",
    "NoProjectIdParams",
    "ParseFailedParams",
    "ResponseErrorParams",
    # Errors
    "VertexAIError",
    "VertexAIErrorCode",
    # Builders
    "bad_response_error",
    "create_error",
    "fetch_error",
    "format_block_error_message",
    "placeholders",
    "replace_template",
    "response_error",
]
