"""
Types layer - data shapes exchanged with the Vertex AI API.

- ErrorDetails for structured upstream error causes
- GenerateContentResponse and its nested records
"""

from vertexai_sdk.types.errors import ErrorDetails
from vertexai_sdk.types.responses import (
    BAD_FINISH_REASONS,
    BlockReason,
    FinishReason,
    GenerateContentCandidate,
    GenerateContentResponse,
    PromptFeedback,
    SafetyRating,
    UsageMetadata,
)

__all__ = [
    "BAD_FINISH_REASONS",
    "BlockReason",
    # Errors
    "ErrorDetails",
    "FinishReason",
    "GenerateContentCandidate",
    # Responses
    "GenerateContentResponse",
    "PromptFeedback",
    "SafetyRating",
    "UsageMetadata",
]
