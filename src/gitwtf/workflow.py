"""git-wtf workflow integration using LangGraph for orchestration."""

import argparse
import os
import sys
from typing import Any, Dict

from langgraph.graph import END, StateGraph
from loguru import logger

from gitwtf.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_ENV_FILE,
    DEFAULT_MODEL,
    DEFAULT_NUM_COMMITS,
    DEFAULT_TIMEOUT,
    load_api_key,
)
from gitwtf.errors import WtfError
from gitwtf.models.state import AgentState
from gitwtf.nodes.commit_discovery_node import commit_discovery_node
from gitwtf.nodes.commit_summary_node import commit_summary_node
from gitwtf.nodes.edit_summary_node import edit_summary_node
from gitwtf.nodes.project_description_node import project_description_node

NO_COMMITS_NOTICE = "No commits found in the repository."


def _route_after_discovery(state: AgentState) -> str:
    """Stop early when there is nothing to explain."""
    return "project_description_node" if state.get("commits") else END


def create_workflow(config: Dict[str, Any]) -> StateGraph:
    """Create the git-wtf workflow graph."""
    workflow = StateGraph(AgentState)

    # Add nodes
    workflow.add_node("commit_discovery_node", commit_discovery_node)
    workflow.add_node("project_description_node", project_description_node)
    workflow.add_node("commit_summary_node", commit_summary_node)
    workflow.add_node("edit_summary_node", edit_summary_node)

    workflow.set_entry_point("commit_discovery_node")

    # Define edges
    workflow.add_conditional_edges(
        "commit_discovery_node",
        _route_after_discovery,
        {"project_description_node": "project_description_node", END: END},
    )
    workflow.add_edge("project_description_node", "commit_summary_node")
    workflow.add_edge("commit_summary_node", "edit_summary_node")
    workflow.add_edge("edit_summary_node", END)

    return workflow.compile()


def run_workflow(config: Dict[str, Any]) -> AgentState:
    """Run the git-wtf workflow and return the final state.

    Any node failure is raised unchanged; there is no partial result.
    """
    initial_state: AgentState = {
        "repo_path": config["repo_path"],
        "num_commits": config.get("num_commits", DEFAULT_NUM_COMMITS),
        "api_key": config["api_key"],
        "model": config.get("model", DEFAULT_MODEL),
        "endpoint": config.get("endpoint", DEFAULT_ENDPOINT),
        "timeout": config.get("timeout", DEFAULT_TIMEOUT),
    }

    app = create_workflow(config)
    return app.invoke(initial_state)


def render_report(state: AgentState) -> str:
    """Lay out the three summaries under their headings."""
    sections = [
        "\n=== PROJECT DESCRIPTION ===\n",
        state["project_description"],
        f"\n=== LAST {state['commit_count']} COMMITS IN PLAIN LANGUAGE ===\n",
        state["commit_descriptions"],
        "\n=== DETAILED ANALYSIS OF RECENT EDITS ===\n",
        state["edits_description"],
    ]
    return "\n".join(sections)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or greater, got {value}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wtf", description="Explains Git repositories in plain language")
    parser.add_argument("repo_path", nargs="?", default=".", help="Path to the Git repository")
    parser.add_argument(
        "-n",
        "--num-commits",
        type=_non_negative_int,
        default=DEFAULT_NUM_COMMITS,
        help="Number of commits to analyze",
    )
    parser.add_argument("--model", type=str, default=DEFAULT_MODEL, help="Chat model to use")
    parser.add_argument("--endpoint", type=str, default=DEFAULT_ENDPOINT, help="Chat completion endpoint URL")
    parser.add_argument("--env-file", type=str, default=DEFAULT_ENV_FILE, help="File holding OPENAI_API_KEY")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Request timeout in seconds (default: no timeout)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    try:
        api_key = load_api_key(args.env_file)

        config = {
            "repo_path": os.path.abspath(args.repo_path),
            "num_commits": args.num_commits,
            "api_key": api_key,
            "model": args.model,
            "endpoint": args.endpoint,
            "timeout": args.timeout,
        }

        logger.info(f"Analyzing repository: {config['repo_path']}")
        final_state = run_workflow(config)
    except WtfError as e:
        logger.error(str(e))
        sys.exit(1)

    if not final_state.get("commits"):
        print(NO_COMMITS_NOTICE)
        return

    print(render_report(final_state))


if __name__ == "__main__":
    main()
