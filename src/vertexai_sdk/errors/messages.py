"""Message templates for VertexAI errors.

Templates use ``{$name}`` placeholders, where ``name`` is a field of the
params record declared for the error kind.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from vertexai_sdk.errors.codes import VertexAIErrorCode

_PLACEHOLDER = re.compile(r"\{\$([^}]+)\}")

ERROR_MESSAGES: Mapping[VertexAIErrorCode, str] = MappingProxyType(
    {
        VertexAIErrorCode.FETCH_ERROR: "Error fetching from {$url}: {$message}",
        VertexAIErrorCode.INVALID_CONTENT: "Content formatting error: {$message}",
        VertexAIErrorCode.NO_API_KEY: (
            'The "api_key" field is empty in the local VertexAI config. '
            "VertexAI requires this field to contain a valid API key."
        ),
        VertexAIErrorCode.NO_PROJECT_ID: (
            'The "project_id" field is empty in the local VertexAI config. '
            "VertexAI requires this field to contain a valid project ID."
        ),
        VertexAIErrorCode.NO_MODEL: (
            "Must provide a model name. "
            "Example: getGenerativeModel({ model: 'my-model-name' })"
        ),
        VertexAIErrorCode.PARSE_FAILED: "Parsing failed: {$message}",
        VertexAIErrorCode.BAD_RESPONSE: (
            "Bad response from {$url}: [{$status} {$status_text}] {$message}"
        ),
        VertexAIErrorCode.RESPONSE_ERROR: (
            "Response error: {$message}. "
            "Response body stored in error.custom_data.response"
        ),
    }
)


def placeholders(template: str) -> list[str]:
    """List the placeholder names referenced by a template, in order."""
    return _PLACEHOLDER.findall(template)


def replace_template(template: str, data: Mapping[str, Any]) -> str:
    """Fill ``{$name}`` placeholders in a template.

    Each placeholder is replaced with ``str(data[name])``. A placeholder whose
    field is missing from ``data`` or is ``None`` is left untouched.

    Args:
        template: Template string
        data: Field name to value mapping

    Returns:
        Rendered string

    Example:
        >>> replace_template("Parsing failed: {$message}", {"message": "bad"})
        'Parsing failed: bad'
    """

    def _substitute(match: re.Match[str]) -> str:
        value = data.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return _PLACEHOLDER.sub(_substitute, template)
