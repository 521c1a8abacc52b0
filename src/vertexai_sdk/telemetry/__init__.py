"""
Telemetry module for vertexai-sdk.

Structured logging with API key masking.
"""

from vertexai_sdk.telemetry.logger import (
    JsonFormatter,
    LogLevel,
    SdkLogger,
    SensitiveDataMasker,
    TextFormatter,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "LogLevel",
    "SdkLogger",
    "SensitiveDataMasker",
    "TextFormatter",
    "get_logger",
]
