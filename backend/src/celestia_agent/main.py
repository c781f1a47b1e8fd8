# celestia_agent/main.py
"""
命令行入口
"""

import json
import logging
from dataclasses import asdict
from typing import Optional

import typer

from celestia_agent.agent import CelestiaAgent, create_llm, decode_agent_response
from celestia_agent.config import DEFAULT_PROMPT, LOG_FORMAT, LOG_LEVEL
from celestia_agent.tools import tools
from celestia_agent.tools.celestia.celestia_client import CelestiaSearchError, celestia_client
from celestia_agent.tools.celestia.celestia_tools import format_block_stats

logger = logging.getLogger(__name__)

app = typer.Typer(help="Query Celestia block statistics through an LLM agent.")


@app.callback()
def setup_logging():
    """Celestia block stats agent."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


@app.command()
def ask(
    prompt: str = typer.Option(DEFAULT_PROMPT, "--prompt", "-p", help="Question for the agent."),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Chat model name."),
):
    """
    Ask the agent a question; it may call search_blocks to answer.
    """
    try:
        agent = CelestiaAgent(create_llm(model), tools)
        response = agent.prompt(prompt)
        formatted = decode_agent_response(response)
    except Exception as e:
        logger.error(f"agent 调用失败: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Agent response:\n{formatted}")


@app.command()
def stats(
    height: int = typer.Argument(..., min=0, help="Block height."),
    show_all: bool = typer.Option(False, "--all", help="Print every extracted field as JSON."),
):
    """
    Fetch block statistics directly, without the agent.
    """
    try:
        block_stats = celestia_client.get_block_stats(height)
    except (CelestiaSearchError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if show_all:
        typer.echo(json.dumps(asdict(block_stats), indent=2))
    else:
        typer.echo(format_block_stats(block_stats))


def main():
    app()


if __name__ == "__main__":
    main()
