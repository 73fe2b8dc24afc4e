"""
git-wtf commit discovery node: reads the most recent commits from HEAD.
"""

from loguru import logger

from gitwtf.config import DEFAULT_NUM_COMMITS
from gitwtf.models.state import AgentState
from gitwtf.repository import count_commits, format_commit, open_repository, walk_commits


def commit_discovery_node(state: AgentState) -> AgentState:
    """Walk the latest commits and render each one as text."""
    if "repo_path" not in state:
        raise ValueError("repo_path is required in AgentState")

    logger.info("Executing Commit Discovery Node")

    num_commits = state.get("num_commits", DEFAULT_NUM_COMMITS)
    with open_repository(state["repo_path"]) as repo:
        total = count_commits(repo)
        commits = walk_commits(repo, num_commits)

    logger.info(f"Found {total} commits, will analyze {len(commits)}.")
    for i, commit in enumerate(commits, start=1):
        logger.debug(f"Analyzing commit {i} of {len(commits)}: {commit.hash[:8]}")

    return {
        "commits": commits,
        "commit_count": len(commits),
        "commit_texts": [format_commit(commit) for commit in commits],
    }
