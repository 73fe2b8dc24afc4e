"""Commit Summary Node: explains the discovered commits in plain language."""

from loguru import logger

from gitwtf.llm.prompts import COMMIT_DELIMITER, COMMIT_EXPLANATION_INSTRUCTION
from gitwtf.models.state import AgentState
from gitwtf.nodes.summary import summarize


def commit_summary_node(state: AgentState) -> AgentState:
    if "commit_texts" not in state:
        raise ValueError("commit_texts is required in AgentState")

    logger.info("Executing Commit Summary Node")

    content = COMMIT_DELIMITER.join(state["commit_texts"])
    return {"commit_descriptions": summarize(state, COMMIT_EXPLANATION_INSTRUCTION, content)}
