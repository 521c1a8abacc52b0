"""
Response shapes returned by the Vertex AI generateContent endpoint.

Only the parts needed to inspect and describe failed responses are modeled.
Unknown fields are preserved so a response can be carried around verbatim.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FinishReason(str, Enum):
    """Why a candidate stopped generating."""

    FINISH_REASON_UNSPECIFIED = "FINISH_REASON_UNSPECIFIED"
    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    RECITATION = "RECITATION"
    OTHER = "OTHER"


class BlockReason(str, Enum):
    """Why a prompt was blocked."""

    BLOCKED_REASON_UNSPECIFIED = "BLOCKED_REASON_UNSPECIFIED"
    SAFETY = "SAFETY"
    OTHER = "OTHER"


BAD_FINISH_REASONS: frozenset[str] = frozenset(
    {FinishReason.RECITATION.value, FinishReason.SAFETY.value}
)


class SafetyRating(BaseModel):
    """Safety rating for a prompt or candidate."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    category: str | None = None
    probability: str | None = None
    blocked: bool | None = None


class PromptFeedback(BaseModel):
    """Feedback about the prompt, present when the prompt was blocked."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    block_reason: str | None = Field(default=None, alias="blockReason")
    block_reason_message: str | None = Field(default=None, alias="blockReasonMessage")
    safety_ratings: list[SafetyRating] = Field(default_factory=list, alias="safetyRatings")


class GenerateContentCandidate(BaseModel):
    """A single candidate produced by the model."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    index: int = 0
    content: dict[str, Any] | None = None
    finish_reason: str | None = Field(default=None, alias="finishReason")
    finish_message: str | None = Field(default=None, alias="finishMessage")
    safety_ratings: list[SafetyRating] | None = Field(default=None, alias="safetyRatings")
    citation_metadata: dict[str, Any] | None = Field(default=None, alias="citationMetadata")

    def had_bad_finish_reason(self) -> bool:
        """Check whether generation was cut off for a blocking reason."""
        return self.finish_reason in BAD_FINISH_REASONS


class UsageMetadata(BaseModel):
    """Token accounting for a request."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    prompt_token_count: int | None = Field(default=None, alias="promptTokenCount")
    candidates_token_count: int | None = Field(default=None, alias="candidatesTokenCount")
    total_token_count: int | None = Field(default=None, alias="totalTokenCount")


class GenerateContentResponse(BaseModel):
    """Decoded generateContent response."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    candidates: list[GenerateContentCandidate] | None = None
    prompt_feedback: PromptFeedback | None = Field(default=None, alias="promptFeedback")
    usage_metadata: UsageMetadata | None = Field(default=None, alias="usageMetadata")
