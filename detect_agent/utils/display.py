"""Rich console display helpers for detect-agent.

Renders detection results as a text table or as JSON, plus error and
summary messages.
"""

import json
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from detect_agent.tools import DetectionResult


# Global console instances
console = Console()
err_console = Console(stderr=True)

NAME_WIDTH = 12
VERSION_WIDTH = 16

INSTALLED_ICON = "✓"
MISSING_ICON = "✗"


def first_line(version: Optional[str]) -> Optional[str]:
    """Get the first line of a version string.

    Tools often append commit hashes or architecture on later lines.

    Args:
        version: Raw version output.

    Returns:
        First line, trimmed, or None if there is nothing left.
    """
    if not version:
        return None
    return version.splitlines()[0].strip() or None


def format_result(result: DetectionResult) -> Text:
    """Format one result as a table row.

    Args:
        result: Detection result to format.

    Returns:
        Styled text; ``.plain`` gives the uncoloured row.
    """
    name = result.name.ljust(NAME_WIDTH)

    if not result.installed:
        return Text.assemble(
            (MISSING_ICON, "dim"), " ", (name, "dim"), " ", ("-", "dim"),
        )

    version = first_line(result.version)
    if version:
        version_part = (version.ljust(VERSION_WIDTH), "cyan")
    else:
        version_part = ("-".ljust(VERSION_WIDTH), "dim")

    return Text.assemble(
        (INSTALLED_ICON, "green"),
        " ",
        (name, "green"),
        " ",
        version_part,
        " ",
        (result.path or "", "dim"),
    )


def format_results(results: Iterable[DetectionResult]) -> Text:
    """Format results as newline-separated rows."""
    return Text("\n").join(format_result(result) for result in results)


def format_json(results: Iterable[DetectionResult]) -> str:
    """Format results as a pretty-printed JSON array.

    Unset ``version`` and ``path`` fields are omitted.
    """
    return json.dumps(
        [result.to_dict() for result in results],
        indent=2,
        ensure_ascii=False,
    )


def print_results(results: list[DetectionResult], as_json: bool = False) -> None:
    """Display results as JSON or as the text table.

    Args:
        results: Results to display, already in display order.
        as_json: Print JSON instead of the table.
    """
    if as_json:
        console.print(
            format_json(results),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        console.print(format_results(results), highlight=False, soft_wrap=True)


def print_summary(results: list[DetectionResult]) -> None:
    """Display how many of the detected tools are installed."""
    installed = sum(1 for result in results if result.installed)
    console.print(f"\n[bold]{installed}/{len(results)}[/bold] tools installed")


def print_error(message: str) -> None:
    """Display error message on stderr.

    Args:
        message: Error message to display
    """
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def print_info(message: str) -> None:
    """Display info message on stderr.

    Args:
        message: Info message to display
    """
    err_console.print(escape(message), soft_wrap=True, highlight=False)
