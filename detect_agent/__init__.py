"""detect-agent - Find the AI coding assistants installed on this machine.

Reports, for each supported CLI (Cursor, Claude Code, Gemini, Codex, ...),
whether it is on the PATH, where, and which version it reports.
"""

from typing import Iterable

from detect_agent.tools import (
    SUPPORTED_TOOLS,
    DetectionResult,
    ToolDetector,
    ToolName,
    ToolRegistry,
    UnknownToolError,
    is_valid_tool,
)

__version__ = "1.0.0"
__author__ = "detect-agent Team"
__license__ = "MIT"


def detect(identifier: str) -> DetectionResult:
    """Detect one tool. Raises UnknownToolError for unknown identifiers."""
    return ToolDetector().detect(identifier)


def detect_many(identifiers: Iterable[str]) -> list[DetectionResult]:
    """Detect several tools in input order, keeping duplicates."""
    return ToolDetector().detect_many(identifiers)


def detect_all() -> list[DetectionResult]:
    """Detect every supported tool in registry order."""
    return ToolDetector().detect_all()


__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "detect",
    "detect_many",
    "detect_all",
    "is_valid_tool",
    "SUPPORTED_TOOLS",
    "DetectionResult",
    "ToolDetector",
    "ToolName",
    "ToolRegistry",
    "UnknownToolError",
]
