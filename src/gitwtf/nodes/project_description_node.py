"""Project Description Node: explains the project from its README."""

from loguru import logger

from gitwtf.errors import ReadmeUnavailable
from gitwtf.llm.prompts import PROJECT_DESCRIPTION_INSTRUCTION
from gitwtf.models.state import AgentState
from gitwtf.nodes.summary import summarize
from gitwtf.repository import open_repository, read_readme

NO_README = "No README.md found"


def project_description_node(state: AgentState) -> AgentState:
    """Describe the project based on README.md at HEAD."""
    if "repo_path" not in state:
        raise ValueError("repo_path is required in AgentState")

    logger.info("Executing Project Description Node")

    with open_repository(state["repo_path"]) as repo:
        try:
            readme = read_readme(repo)
        except ReadmeUnavailable as e:
            logger.warning(f"{e}, describing the project without it")
            readme = NO_README

    return {
        "readme": readme,
        "project_description": summarize(state, PROJECT_DESCRIPTION_INSTRUCTION, readme),
    }
