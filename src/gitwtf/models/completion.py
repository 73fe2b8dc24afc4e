"""Wire models for the chat-completion endpoint."""

from typing import List

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    """A single role-tagged message."""

    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class PromptRequest(BaseModel):
    """Request body sent to the chat-completion endpoint."""

    model_config = ConfigDict(frozen=True)

    model: str
    messages: List[ChatMessage]
    temperature: float


class Choice(BaseModel):
    message: ChatMessage


class CompletionResponse(BaseModel):
    """Subset of the response body the client relies on."""

    choices: List[Choice]
