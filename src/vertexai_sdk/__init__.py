"""
vertexai-sdk: error taxonomy and configuration for the Vertex AI generative API.

Errors are built with create_error() and carry a rendered message plus
structured custom data for programmatic handling.
"""
from __future__ import annotations

from vertexai_sdk.config import VertexAIOptions, normalize_model_name
from vertexai_sdk.errors import (
    CustomData,
    VertexAIError,
    VertexAIErrorCode,
    create_error,
)
from vertexai_sdk.types import ErrorDetails, GenerateContentResponse

__version__ = "0.1.0"

__all__ = [
    # Errors
    "CustomData",
    "ErrorDetails",
    "GenerateContentResponse",
    "VertexAIError",
    "VertexAIErrorCode",
    # Config
    "VertexAIOptions",
    "create_error",
    "normalize_model_name",
    # Version
    "__version__",
]
