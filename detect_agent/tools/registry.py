"""Tool registry for known AI coding assistants.

Defines the closed set of tool identifiers and the command each one is
probed with.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ToolName(str, Enum):
    """Identifiers of the supported AI coding assistant CLIs."""

    CURSOR = "cursor"
    CLAUDE_CODE = "claude-code"
    GEMINI = "gemini"
    CODEX = "codex"
    WINDSURF = "windsurf"
    COPILOT = "copilot"
    OPENCODE = "opencode"
    QODER = "qoder"


SUPPORTED_TOOLS: tuple[str, ...] = tuple(tool.value for tool in ToolName)


@dataclass(frozen=True)
class ToolInfo:
    """Information needed to probe one tool.

    Contains the identifier and the executable it is looked up by.
    """

    name: ToolName
    command: str                          # Executable looked up on PATH
    version_arg: str = "--version"        # Argument to get version


_DEFAULT_TOOLS: dict[ToolName, ToolInfo] = {
    ToolName.CURSOR: ToolInfo(
        name=ToolName.CURSOR,
        command="cursor",
    ),
    ToolName.CLAUDE_CODE: ToolInfo(
        name=ToolName.CLAUDE_CODE,
        command="claude-code",
    ),
    ToolName.GEMINI: ToolInfo(
        name=ToolName.GEMINI,
        command="gemini",
    ),
    ToolName.CODEX: ToolInfo(
        name=ToolName.CODEX,
        command="codex",
    ),
    ToolName.WINDSURF: ToolInfo(
        name=ToolName.WINDSURF,
        command="windsurf",
    ),
    ToolName.COPILOT: ToolInfo(
        name=ToolName.COPILOT,
        command="copilot",
    ),
    ToolName.OPENCODE: ToolInfo(
        name=ToolName.OPENCODE,
        command="opencode",
    ),
    ToolName.QODER: ToolInfo(
        name=ToolName.QODER,
        command="qoder",
    ),
}


def is_valid_tool(identifier: str) -> bool:
    """Check whether an identifier names a supported tool.

    Args:
        identifier: Tool identifier to check.

    Returns:
        True if the identifier is one of SUPPORTED_TOOLS.
    """
    return identifier in SUPPORTED_TOOLS


class ToolRegistry:
    """Registry of the supported AI coding assistants.

    Tools are kept in registration order, which is the order used by
    ``ToolDetector.detect_all``.

    Example:
        registry = ToolRegistry()
        gemini = registry.get("gemini")
        print(gemini.command)
    """

    def __init__(self):
        """Initialize the registry with the default tools."""
        self._tools: dict[str, ToolInfo] = {}
        for tool in ToolName:
            self.register(_DEFAULT_TOOLS[tool])

    def register(self, tool: ToolInfo) -> None:
        """Register a tool, replacing any entry with the same name.

        Args:
            tool: Tool info to register.
        """
        self._tools[tool.name.value] = tool

    def get(self, identifier: str) -> Optional[ToolInfo]:
        """Look up a tool by identifier.

        Args:
            identifier: Tool identifier.

        Returns:
            Tool info or None if not registered.
        """
        if isinstance(identifier, ToolName):
            identifier = identifier.value
        return self._tools.get(identifier)

    def get_all(self) -> list[ToolInfo]:
        """Get all registered tools in registration order."""
        return list(self._tools.values())

    def names(self) -> list[str]:
        """Get all registered identifiers in registration order."""
        return list(self._tools)

    def __contains__(self, identifier: object) -> bool:
        if isinstance(identifier, ToolName):
            identifier = identifier.value
        return identifier in self._tools

    def __len__(self) -> int:
        return len(self._tools)
