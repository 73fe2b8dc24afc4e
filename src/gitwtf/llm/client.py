"""HTTP client for an OpenAI-compatible chat-completion endpoint."""

from typing import Optional

import requests
from loguru import logger
from pydantic import ValidationError

from gitwtf.config import DEFAULT_ENDPOINT, DEFAULT_MODEL, DEFAULT_TIMEOUT
from gitwtf.errors import EmptyChoices, EndpointError, MalformedResponse, TransportError
from gitwtf.llm.prompts import compose_request
from gitwtf.models.completion import CompletionResponse, PromptRequest


def send_request(
    request: PromptRequest,
    api_key: str,
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> str:
    """POST a request and return the content of the first choice.

    No retries are attempted; every failure is raised to the caller.

    Raises:
        TransportError: connection, timeout or TLS failure.
        EndpointError: non-2xx status, with the body kept verbatim.
        MalformedResponse: body is not JSON or lacks ``choices[].message``.
        EmptyChoices: the ``choices`` list is empty.
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    logger.info(f"Sending request to {endpoint}...")
    try:
        response = requests.post(endpoint, json=request.model_dump(), headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Request to {endpoint} failed: {e}") from e

    if not 200 <= response.status_code < 300:
        logger.debug(f"API error response: {response.text}")
        raise EndpointError(response.status_code, response.text)

    try:
        payload = CompletionResponse.model_validate_json(response.text)
    except ValidationError as e:
        raise MalformedResponse(e, response.text) from e

    if not payload.choices:
        raise EmptyChoices()

    logger.info("Received successful response from API")
    return payload.choices[0].message.content


def describe(
    instruction: str,
    content: str,
    *,
    api_key: str,
    model: str = DEFAULT_MODEL,
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> str:
    """Compose a prompt from an instruction and content, send it, return the answer."""
    request = compose_request(instruction, content, model=model)
    return send_request(request, api_key, endpoint=endpoint, timeout=timeout)
