"""Base types used across git-wtf."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CommitRecord:
    """Metadata of a single commit as read from the repository."""

    hash: str
    author: Optional[str]
    timestamp: int  # commit time, seconds since epoch
    message: str
    parent_count: int = 1
