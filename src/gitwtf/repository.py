"""
Read-only access to the repository: commit walking, formatting, diffs and files at HEAD.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, ODBError
from git.objects.commit import Commit
from loguru import logger

from gitwtf.errors import DiffComputationError, ReadmeUnavailable, RepositoryUnavailable, TraversalError
from gitwtf.models.base import CommitRecord

UNKNOWN_AUTHOR = "Unknown"
NO_MESSAGE = "No commit message"
README_PATH = "README.md"


def open_repository(repo_path: Union[str, Path]) -> Repo:
    """Open the Git repository at ``repo_path``."""
    try:
        return Repo(repo_path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryUnavailable(f"Failed to open Git repository at {repo_path}: {e}") from e


def _decode(value: Union[str, bytes, None]) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def _create_commit_record(commit: Commit) -> CommitRecord:
    """Create a CommitRecord from a GitPython Commit object."""
    return CommitRecord(
        hash=commit.hexsha,
        author=commit.author.name if commit.author else None,
        timestamp=int(commit.committed_date),
        message=_decode(commit.message),
        parent_count=len(commit.parents),
    )


def is_unborn(repo: Repo) -> bool:
    """Tell whether HEAD names a branch that has no commit yet.

    A branch whose ref exists but points at a missing object is not unborn.
    """
    if repo.head.is_detached:
        return False
    return repo.head.reference.path not in {ref.path for ref in repo.references}


def count_commits(repo: Repo) -> int:
    """Number of commits reachable from HEAD."""
    if is_unborn(repo):
        return 0

    try:
        return int(repo.git.rev_list("--count", "HEAD"))
    except (GitCommandError, ValueError) as e:
        raise TraversalError(f"Failed to count commits: {e}") from e


def walk_commits(repo: Repo, num_commits: int) -> List[CommitRecord]:
    """Return up to ``num_commits`` commits reachable from HEAD, newest first.

    A repository without any commit yields an empty list.
    """
    if num_commits <= 0:
        return []

    try:
        if is_unborn(repo):
            logger.debug(f"Branch {repo.head.reference.name} has no commits yet")
            return []
        head = repo.head.commit
        commits = list(repo.iter_commits(head.hexsha, max_count=num_commits))
        return [_create_commit_record(commit) for commit in commits]
    except (GitCommandError, ValueError, ODBError) as e:
        raise TraversalError(f"Failed to walk commit history: {e}") from e


def format_commit(record: CommitRecord) -> str:
    """Render a commit as a plain-text block. Never fails."""
    author = record.author if record.author and record.author.strip() else UNKNOWN_AUTHOR
    message = record.message if record.message and record.message.strip() else NO_MESSAGE

    return f"Commit: {record.hash}\nAuthor: {author}\nDate: {record.timestamp}\nMessage: {message}"


def _patch_header(diff) -> str:
    a_path = diff.a_path or diff.b_path
    b_path = diff.b_path or diff.a_path
    old = "/dev/null" if diff.new_file else f"a/{a_path}"
    new = "/dev/null" if diff.deleted_file else f"b/{b_path}"
    return f"diff --git a/{a_path} b/{b_path}\n--- {old}\n+++ {new}\n"


def extract_diff(repo: Repo, record: CommitRecord) -> str:
    """Compute the patch between a single-parent commit and its parent."""
    try:
        commit = repo.commit(record.hash)
        parent = commit.parents[0]
        diff_index = parent.diff(commit, create_patch=True)
    except (GitCommandError, ValueError, IndexError, ODBError) as e:
        raise DiffComputationError(f"Failed to compute diff for commit {record.hash}: {e}") from e

    patch = []
    for d in diff_index:
        patch.append(_patch_header(d))
        if d.diff:
            patch.append(_decode(d.diff))
            if not patch[-1].endswith("\n"):
                patch.append("\n")

    return "".join(patch)


def extract_diffs(repo: Repo, records: List[CommitRecord]) -> Tuple[List[str], int]:
    """Return the patches of all single-parent commits and the number skipped.

    Root and merge commits have no single parent to compare against and are
    left out rather than recorded as empty patches.
    """
    diffs = []
    skipped = 0
    for record in records:
        if record.parent_count != 1:
            logger.debug(f"Skipping commit {record.hash[:8]} with {record.parent_count} parents")
            skipped += 1
            continue
        diffs.append(extract_diff(repo, record))

    return diffs, skipped


def find_file_at_head(repo: Repo, path: str) -> Optional[str]:
    """Return the content of ``path`` in the HEAD tree, or None if it is not there.

    Raises:
        TraversalError: if the HEAD commit or its tree cannot be read.
    """
    if is_unborn(repo):
        return None

    try:
        blob = repo.head.commit.tree / path
        if blob.type != "blob":
            return None
        data = blob.data_stream.read()
    except KeyError:
        return None
    except (ValueError, ODBError) as e:
        raise TraversalError(f"Failed to read {path} at HEAD: {e}") from e

    return _decode(data)


def read_readme(repo: Repo) -> str:
    """Return README.md at HEAD.

    Raises:
        ReadmeUnavailable: if there is no README.md at HEAD.
    """
    content = find_file_at_head(repo, README_PATH)
    if content is None:
        raise ReadmeUnavailable(f"No {README_PATH} at HEAD")
    return content
