"""
Command line interface for the vc_change_analyzer tool.

This module defines the ``main`` click group used as the entry point of
the ``diffcheckin`` command. It loads the configuration once, then runs
one of the tools against a working tree and prints the result. Exit
codes are listed below.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import click

from vc_change_analyzer import __version__
from vc_change_analyzer.config.loader import ConfigError, load_config
from vc_change_analyzer.message.formatter import CommitMessageStyle
from vc_change_analyzer.tools.commit_tools import AnalysisFailed, NoChanges
from vc_change_analyzer.tools.commit_tools import generate_commit_message as run_generate
from vc_change_analyzer.tools.commit_tools import get_file_changes_in_directory
from vc_change_analyzer.tools.definitions import build_tools

# Module-level logger with a null handler and no propagation, so that a
# closed root stream (as in unit tests) never breaks logging. Once the
# CLI configures logging, root handlers are installed explicitly.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_NO_CHANGES = 4
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=True)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def print_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def _load_config_or_exit(ctx: click.Context):
    try:
        return load_config()
    except ConfigError as exc:
        print_error(f"Configuration error: {exc}")
        ctx.exit(EXIT_CONFIG_ERROR)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@click.group()
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="diffcheckin")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Rule-based commit message suggestions for Git working trees.

    Inspects uncommitted changes, classifies them and proposes a commit
    message without contacting any language model.
    """
    # force=True reconfigures handlers on repeated invocations (tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    ctx.obj = _load_config_or_exit(ctx)


@main.command("collect-changes")
@click.argument("root_dir", default=".", type=click.Path(file_okay=False))
@click.pass_context
def collect_changes_cmd(ctx: click.Context, root_dir: str) -> None:
    """Print the diff of every changed file as JSON."""
    config = ctx.obj
    result = get_file_changes_in_directory(root_dir, config.exclude)
    if isinstance(result, AnalysisFailed):
        print_error(result.error)
        ctx.exit(EXIT_VCS_FAILURE)

    print_json([record.to_dict() for record in result])


@main.command("generate-commit-message")
@click.argument("root_dir", default=".", type=click.Path(file_okay=False))
@click.option(
    "--style",
    type=click.Choice([style.value for style in CommitMessageStyle]),
    default=None,
    help="Message style (defaults to the configured style, normally conventional).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON.")
@click.pass_context
def generate_commit_message_cmd(
    ctx: click.Context,
    root_dir: str,
    style: Optional[str],
    as_json: bool,
) -> None:
    """Propose a commit message for the changes in ROOT_DIR."""
    config = ctx.obj
    result = run_generate(root_dir, style or config.default_style, config.exclude)

    if as_json:
        print_json(result.to_dict())
    elif result.message is not None:
        click.echo(result.message)

    if isinstance(result, NoChanges):
        if not as_json:
            print_warning(result.error)
        ctx.exit(EXIT_NO_CHANGES)
    if isinstance(result, AnalysisFailed):
        if not as_json:
            print_error(result.error)
        ctx.exit(EXIT_VCS_FAILURE)


@main.command("list-tools")
@click.pass_context
def list_tools_cmd(ctx: click.Context) -> None:
    """Print the available tools with their input schemas as JSON."""
    tools = build_tools(ctx.obj)
    print_json(
        [
            {"name": tool.name, "description": tool.description, "inputSchema": tool.json_schema()}
            for tool in tools
        ]
    )
