"""State management types for the git-wtf workflow."""

from typing import List, Optional, TypedDict

from .base import CommitRecord


class AgentState(TypedDict, total=False):
    """
    Shared state passed between nodes.
    Each node adds the fields it produces.
    """

    # Run configuration
    repo_path: str
    num_commits: int
    api_key: str
    model: str
    endpoint: str
    timeout: Optional[float]

    # Commit Discovery Node Output
    commits: List[CommitRecord]
    commit_count: int
    commit_texts: List[str]

    # Project Description Node Output
    readme: str
    project_description: str

    # Commit Summary Node Output
    commit_descriptions: str

    # Edit Summary Node Output
    diffs: List[str]
    skipped_commits: int
    edits_description: str
