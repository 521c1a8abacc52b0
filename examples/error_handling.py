#!/usr/bin/env python3
"""
Error handling example.

This example demonstrates how SDK code raises VertexAIError and how callers
inspect it:
- Configuration errors (missing API key, project id, model)
- Bad responses with structured error details
- Response errors carrying the full response

Runs offline: HTTP responses come from an httpx.MockTransport.

Usage:
    python examples/error_handling.py
"""

import httpx

from vertexai_sdk import (
    GenerateContentResponse,
    VertexAIError,
    VertexAIErrorCode,
    VertexAIOptions,
    normalize_model_name,
)
from vertexai_sdk.errors import bad_response_error, fetch_error, response_error

URL = (
    "https://us-central1-aiplatform.googleapis.com/v1/projects/demo/locations/"
    "us-central1/publishers/google/models/gemini-pro:generateContent"
)


def _mock_api(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        403,
        json={
            "error": {
                "code": 403,
                "message": "Vertex AI API has not been used in project demo.",
                "details": [
                    {
                        "@type": "type.googleapis.com/google.rpc.ErrorInfo",
                        "reason": "SERVICE_DISABLED",
                        "domain": "googleapis.com",
                    }
                ],
            }
        },
    )


def configuration_errors() -> None:
    """Show configuration errors."""
    print("Configuration errors:")
    try:
        VertexAIOptions(api_key="demo-key").validate()
    except VertexAIError as e:
        print(f"  {e.code}: {e.message}")

    try:
        normalize_model_name("")
    except VertexAIError as e:
        print(f"  {e.code}: {e.message}")
    print()


def generate(client: httpx.Client) -> GenerateContentResponse:
    """Call the API the way the SDK does, raising VertexAIError on failure."""
    try:
        response = client.post(URL, json={"contents": []})
    except httpx.HTTPError as e:
        raise fetch_error(URL, e) from e

    if not response.is_success:
        raise bad_response_error(URL, response)

    return GenerateContentResponse.model_validate(response.json())


def bad_response() -> None:
    """Show a bad response with error details."""
    print("Bad response:")
    with httpx.Client(transport=httpx.MockTransport(_mock_api)) as client:
        try:
            generate(client)
        except VertexAIError as e:
            print(f"  kind: {e.kind.value}")
            print(f"  status: {e.custom_data.status} {e.custom_data.status_text}")
            for detail in e.custom_data.error_details or []:
                print(f"  detail: {detail.reason} ({detail.domain})")
    print()


def blocked_response() -> None:
    """Show a response error for a blocked prompt."""
    print("Blocked response:")
    response = GenerateContentResponse.model_validate(
        {"promptFeedback": {"blockReason": "SAFETY"}}
    )
    try:
        raise response_error(response)
    except VertexAIError as e:
        assert e.kind == VertexAIErrorCode.RESPONSE_ERROR
        print(f"  {e}")
        print(f"  block reason: {e.custom_data.response.prompt_feedback.block_reason}")


def main() -> None:
    configuration_errors()
    bad_response()
    blocked_response()


if __name__ == "__main__":
    main()
