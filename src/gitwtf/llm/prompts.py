"""System instructions and request composition for the completion endpoint."""

from langchain_core.prompts import ChatPromptTemplate

from gitwtf.config import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from gitwtf.models.completion import ChatMessage, PromptRequest

COMMIT_DELIMITER = "\n\n---\n\n"

PROJECT_DESCRIPTION_INSTRUCTION = (
    "You are an AI assistant that provides concise project descriptions. "
    "Based on the README content and other information provided, give a brief, clear description "
    "of what this project is about in plain English. Keep it under 100 words."
)

COMMIT_EXPLANATION_INSTRUCTION = (
    "You are an AI assistant that explains git commits in plain language. "
    "For each commit, explain what changes were made in simple terms that anyone can understand. "
    "Focus on the practical impact of the changes rather than technical details."
)

EDIT_EXPLANATION_INSTRUCTION = (
    "You are an AI assistant that explains code changes in plain language. "
    "For each edit, explain what was changed and why it might have been changed. "
    "Focus on the functional impact rather than listing every line change. "
    "Make it understandable to non-technical people."
)

# Instruction and content are substituted as values, so braces in diffs are kept verbatim
SUMMARY_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", "{instruction}"),
        ("human", "{content}"),
    ]
)

_WIRE_ROLES = {"system": "system", "human": "user", "ai": "assistant"}


def compose_request(instruction: str, content: str, model: str = DEFAULT_MODEL) -> PromptRequest:
    """Build a fresh chat-completion request for one summary."""
    messages = SUMMARY_PROMPT.format_messages(instruction=instruction, content=content)

    return PromptRequest(
        model=model,
        messages=[ChatMessage(role=_WIRE_ROLES[m.type], content=m.content) for m in messages],
        temperature=DEFAULT_TEMPERATURE,
    )
