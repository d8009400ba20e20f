"""Command-line interface for detect-agent using Typer."""

import logging
from typing import Optional

import typer

from detect_agent import __version__
from detect_agent.config import DetectAgentConfig
from detect_agent.tools import SUPPORTED_TOOLS, ToolDetector
from detect_agent.tools.policy import arrange_results, invalid_tools, wants_all
from detect_agent.utils import display
from detect_agent.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="detect-agent",
    help="Detect AI agent tools installed on your system",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        display.console.print(__version__)
        raise typer.Exit()


@app.command()
def main(
    tools: Optional[list[str]] = typer.Argument(
        None,
        help=f"Tools to detect: {', '.join(SUPPORTED_TOOLS)}, all",
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output JSON format"
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        help="Show how many tools are installed"
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        "-t",
        min=0.1,
        help="Seconds allowed for each probe (default 5)"
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log probe failures to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True
    ),
):
    """Detect AI agent tools installed on your system.

    Examples:
        detect-agent                  # Detect all supported tools
        detect-agent cursor           # Detect only Cursor
        detect-agent cursor gemini    # Detect Cursor and Gemini
        detect-agent all --json       # Detect all tools, output as JSON
    """
    try:
        config = DetectAgentConfig.load_from_file()
    except ValueError as e:
        display.print_error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)
    configure_logging(debug or config.debug)

    requested = tools or []
    unknown = invalid_tools(requested)
    if unknown:
        display.print_error(f"Unknown tool(s): {', '.join(unknown)}")
        display.print_info(f"Supported tools: {', '.join(SUPPORTED_TOOLS)}")
        raise typer.Exit(code=1)

    detector = ToolDetector(timeout=timeout or config.probe_timeout)
    if wants_all(requested):
        results = detector.detect_all()
    else:
        results = detector.detect_many(requested)
    results = arrange_results(results)

    logger.debug(f"Detected {len(results)} tool(s)")

    as_json = json_output or config.json_output
    display.print_results(results, as_json=as_json)
    if summary and not as_json:
        display.print_summary(results)
