"""
SDK configuration.

Options are resolved from:
1. Explicit values
2. Environment variables
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from vertexai_sdk.errors import VertexAIErrorCode, create_error
from vertexai_sdk.telemetry.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LOCATION = "us-central1"

_API_KEY_ENV = ("VERTEXAI_API_KEY", "GOOGLE_API_KEY")
_PROJECT_ID_ENV = ("VERTEXAI_PROJECT_ID", "GOOGLE_CLOUD_PROJECT")
_LOCATION_ENV = "VERTEXAI_LOCATION"


def _first_env(names: tuple[str, ...]) -> str | None:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


@dataclass
class VertexAIOptions:
    """Options identifying the project an SDK instance talks to.

    Attributes:
        api_key: API key sent with every request
        project_id: Google Cloud project id
        location: Region of the Vertex AI endpoint
    """

    api_key: str | None = None
    project_id: str | None = None
    location: str = DEFAULT_LOCATION

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        project_id: str | None = None,
        location: str | None = None,
    ) -> VertexAIOptions:
        """Build options, filling unset values from the environment.

        Args:
            api_key: Explicit API key (overrides VERTEXAI_API_KEY / GOOGLE_API_KEY)
            project_id: Explicit project id (overrides VERTEXAI_PROJECT_ID / GOOGLE_CLOUD_PROJECT)
            location: Explicit location (overrides VERTEXAI_LOCATION)

        Returns:
            Resolved options (not validated)
        """
        return cls(
            api_key=api_key or _first_env(_API_KEY_ENV),
            project_id=project_id or _first_env(_PROJECT_ID_ENV),
            location=location or os.getenv(_LOCATION_ENV) or DEFAULT_LOCATION,
        )

    def validate(self) -> VertexAIOptions:
        """Check that the options are usable.

        Returns:
            self, for chaining

        Raises:
            VertexAIError: NO_API_KEY or NO_PROJECT_ID
        """
        if not self.api_key:
            logger.warning("VertexAI options have no API key")
            raise create_error(VertexAIErrorCode.NO_API_KEY)
        if not self.project_id:
            logger.warning("VertexAI options have no project id")
            raise create_error(VertexAIErrorCode.NO_PROJECT_ID)
        return self


def normalize_model_name(model: str | None) -> str:
    """Turn a model name into a full publisher model resource name.

    Examples:
        'gemini-pro' -> 'publishers/google/models/gemini-pro'
        'models/gemini-pro' -> 'publishers/google/models/gemini-pro'
        'projects/p/locations/l/publishers/google/models/m' is kept as is

    Raises:
        VertexAIError: NO_MODEL if the name is empty
    """
    if not model:
        raise create_error(VertexAIErrorCode.NO_MODEL)
    if "/" not in model:
        return f"publishers/google/models/{model}"
    if model.startswith("models/"):
        return f"publishers/google/{model}"
    return model
