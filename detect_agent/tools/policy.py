"""Ordering policy applied to detection results before display.

Kept apart from the detector so that display order can change without
touching detection.
"""

from typing import Iterable, Optional

from .detector import DetectionResult
from .registry import ToolRegistry

ALL_KEYWORD = "all"


def invalid_tools(
    identifiers: Iterable[str],
    registry: Optional[ToolRegistry] = None,
) -> list[str]:
    """Find identifiers that are neither registered nor the ``all`` keyword.

    Args:
        identifiers: Identifiers requested by the user.
        registry: Optional tool registry. Uses default if not provided.

    Returns:
        Invalid identifiers in input order.
    """
    registry = registry or ToolRegistry()
    return [
        identifier for identifier in identifiers
        if identifier != ALL_KEYWORD and identifier not in registry
    ]


def wants_all(identifiers: list[str]) -> bool:
    """Check whether a request covers every tool."""
    return not identifiers or ALL_KEYWORD in identifiers


def dedupe_results(results: Iterable[DetectionResult]) -> list[DetectionResult]:
    """Drop repeated tools, keeping the first occurrence."""
    seen: set[str] = set()
    unique = []
    for result in results:
        if result.name in seen:
            continue
        seen.add(result.name)
        unique.append(result)
    return unique


def sort_installed_first(results: Iterable[DetectionResult]) -> list[DetectionResult]:
    """Move installed tools ahead of missing ones, otherwise keeping order."""
    return sorted(results, key=lambda r: not r.installed)


def arrange_results(results: Iterable[DetectionResult]) -> list[DetectionResult]:
    """Dedupe then sort results for display."""
    return sort_installed_first(dedupe_results(results))
