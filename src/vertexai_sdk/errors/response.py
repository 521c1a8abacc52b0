"""Build RESPONSE_ERROR errors from blocked generateContent responses."""

from __future__ import annotations

from vertexai_sdk.errors.base import VertexAIError
from vertexai_sdk.errors.params import ResponseErrorParams
from vertexai_sdk.errors.registry import create_error
from vertexai_sdk.types.responses import GenerateContentResponse


def format_block_error_message(response: GenerateContentResponse) -> str:
    """Describe why a response was blocked.

    Args:
        response: Decoded response

    Returns:
        Description of the block, or an empty string if nothing was blocked
    """
    message = ""
    if not response.candidates and response.prompt_feedback:
        message += "Response was blocked"
        if response.prompt_feedback.block_reason:
            message += f" due to {response.prompt_feedback.block_reason}"
        if response.prompt_feedback.block_reason_message:
            message += f": {response.prompt_feedback.block_reason_message}"
    elif response.candidates:
        candidate = response.candidates[0]
        if candidate.had_bad_finish_reason():
            message += f"Candidate was blocked due to {candidate.finish_reason}"
            if candidate.finish_message:
                message += f": {candidate.finish_message}"
    return message


def response_error(
    response: GenerateContentResponse,
    message: str | None = None,
) -> VertexAIError:
    """Create a RESPONSE_ERROR carrying the response verbatim.

    Args:
        response: Decoded response
        message: Error message (defaults to the block description)

    Returns:
        VertexAIError to raise
    """
    if message is None:
        message = format_block_error_message(response)
    return create_error(ResponseErrorParams(message=message, response=response))
