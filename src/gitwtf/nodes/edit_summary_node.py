"""Edit Summary Node: explains what the recent diffs changed."""

from loguru import logger

from gitwtf.llm.prompts import COMMIT_DELIMITER, EDIT_EXPLANATION_INSTRUCTION
from gitwtf.models.state import AgentState
from gitwtf.nodes.summary import summarize
from gitwtf.repository import extract_diffs, open_repository

SINGLE_COMMIT_NOTICE = (
    "Repository has only one commit, so there are no previous versions to compare changes against."
)


def edit_summary_node(state: AgentState) -> AgentState:
    """Explain the diffs of the discovered commits.

    With a single commit there is nothing to compare against, so a fixed
    notice is returned without calling the endpoint.
    """
    if "commits" not in state:
        raise ValueError("commits is required in AgentState")

    logger.info("Executing Edit Summary Node")

    commits = state["commits"]
    if len(commits) <= 1:
        logger.info("Only one commit, skipping edit analysis")
        return {"diffs": [], "skipped_commits": 0, "edits_description": SINGLE_COMMIT_NOTICE}

    with open_repository(state["repo_path"]) as repo:
        diffs, skipped = extract_diffs(repo, commits)

    if skipped:
        logger.warning(f"Skipped {skipped} merge or root commits without a single parent")

    logger.info(f"Extracted {len(diffs)} diffs")
    content = COMMIT_DELIMITER.join(diffs)

    return {
        "diffs": diffs,
        "skipped_commits": skipped,
        "edits_description": summarize(state, EDIT_EXPLANATION_INSTRUCTION, content),
    }
