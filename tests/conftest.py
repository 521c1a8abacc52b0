"""Root pytest fixtures for vertexai-sdk tests."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

_SDK_ENV_VARS = (
    "VERTEXAI_API_KEY",
    "GOOGLE_API_KEY",
    "VERTEXAI_PROJECT_ID",
    "GOOGLE_CLOUD_PROJECT",
    "VERTEXAI_LOCATION",
)


@pytest.fixture
def clean_env():
    """Run a test with no SDK configuration in the environment."""
    env = {k: v for k, v in os.environ.items() if k not in _SDK_ENV_VARS}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def blocked_response_body() -> dict:
    """A generateContent response whose prompt was blocked."""
    return {
        "promptFeedback": {
            "blockReason": "SAFETY",
            "blockReasonMessage": "The prompt was blocked for safety reasons.",
            "safetyRatings": [
                {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "probability": "HIGH"}
            ],
        },
        "usageMetadata": {"promptTokenCount": 7},
    }
