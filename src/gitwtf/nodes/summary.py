"""Shared compose-and-send step used by the summary nodes."""

from gitwtf.config import DEFAULT_ENDPOINT, DEFAULT_MODEL, DEFAULT_TIMEOUT
from gitwtf.llm import client
from gitwtf.models.state import AgentState


def summarize(state: AgentState, instruction: str, content: str) -> str:
    """Ask the completion endpoint to explain ``content`` following ``instruction``."""
    if "api_key" not in state:
        raise ValueError("api_key is required in AgentState")

    return client.describe(
        instruction,
        content,
        api_key=state["api_key"],
        model=state.get("model", DEFAULT_MODEL),
        endpoint=state.get("endpoint", DEFAULT_ENDPOINT),
        timeout=state.get("timeout", DEFAULT_TIMEOUT),
    )
