"""Shared fixtures building throwaway Git repositories."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from git import Actor, Repo

AUTHOR = Actor("Test Author", "test@example.com")


def create_commit(repo: Repo, file_name: str, content: str, message: str, **kwargs):
    """Write a file, stage it and commit it."""
    file_path = Path(repo.working_dir) / file_name
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content)
    repo.index.add([file_name])
    return repo.index.commit(message, author=AUTHOR, committer=AUTHOR, **kwargs)


def completion_response(content: str = "X", status_code: int = 200) -> MagicMock:
    """A fake ``requests`` response carrying a chat-completion body."""
    response = MagicMock()
    response.status_code = status_code
    response.text = json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]})
    return response


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create an empty temporary Git repository."""
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()
    return Repo.init(repo_path)


@pytest.fixture
def single_commit_repo(temp_git_repo):
    repo = temp_git_repo
    create_commit(repo, "README.md", "# Demo\n\nA demo project.\n", "Initial commit")
    return repo


@pytest.fixture
def linear_repo(temp_git_repo):
    """Repository with ten commits on a straight line."""
    repo = temp_git_repo
    create_commit(repo, "README.md", "# Demo\n", "Initial commit")
    for i in range(1, 10):
        create_commit(repo, "app.py", f"VERSION = {i}\n", f"Bump version to {i}")
    return repo


@pytest.fixture
def merge_repo(temp_git_repo):
    """Repository whose HEAD is a merge of two single-parent commits on top of a root."""
    repo = temp_git_repo
    root = create_commit(repo, "test.txt", "Initial content\n", "Initial commit")
    feature = create_commit(repo, "test.txt", "Feature A\n", "Add feature A")
    side = create_commit(repo, "side.txt", "Side work\n", "Add side work", parent_commits=[root], head=False)
    merge = repo.index.commit(
        "Merge side work", parent_commits=[feature, side], author=AUTHOR, committer=AUTHOR
    )
    return repo, {"root": root, "feature": feature, "side": side, "merge": merge}


def delete_object(repo: Repo, hexsha: str) -> None:
    """Remove a loose object from the object database."""
    (Path(repo.git_dir) / "objects" / hexsha[:2] / hexsha[2:]).unlink()


def point_branch_at(repo: Repo, hexsha: str) -> None:
    """Overwrite the current branch ref without checking the object exists."""
    ref_file = Path(repo.git_dir) / "refs" / "heads" / repo.active_branch.name
    ref_file.write_text(f"{hexsha}\n")
