"""Error types raised by the git-wtf pipeline."""

from typing import Optional


class WtfError(Exception):
    """Base class for every failure the pipeline surfaces to the user."""


class CredentialMissing(WtfError):
    """The API key could not be found or is empty."""


class RepositoryUnavailable(WtfError):
    """The given path does not resolve to a Git repository."""


class TraversalError(WtfError):
    """Commit history could not be walked."""


class DiffComputationError(WtfError):
    """Trees of a single-parent commit could not be diffed."""


class ReadmeUnavailable(WtfError):
    """README.md is missing at HEAD. Never fatal."""


class EndpointError(WtfError):
    """The completion endpoint answered with a non-2xx status."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"API error (HTTP {status}): {body}")


class EmptyChoices(WtfError):
    """The endpoint answered successfully but returned no choices."""

    def __init__(self, message: str = "No choices in API response"):
        super().__init__(message)


class MalformedResponse(WtfError):
    """The response body did not match the chat-completion shape."""

    def __init__(self, error: Exception, body: Optional[str] = None):
        self.error = error
        self.body = body
        super().__init__(f"Failed to parse API response: {error}")


class TransportError(WtfError):
    """Network-level failure talking to the endpoint."""
