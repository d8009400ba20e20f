"""Tool detection for installed AI coding assistants.

Combines the process probes into one normalized result per tool.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from . import probe
from .registry import SUPPORTED_TOOLS, ToolInfo, ToolRegistry

logger = logging.getLogger(__name__)


class UnknownToolError(Exception):
    """Raised when a tool identifier is not in the registry."""

    def __init__(self, tool: str, supported: Iterable[str] = SUPPORTED_TOOLS):
        self.tool = tool
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown tool '{tool}'. Supported tools: {', '.join(self.supported)}"
        )


@dataclass
class DetectionResult:
    """Outcome of probing one tool.

    ``version`` and ``path`` are None unless the tool is installed; an
    installed tool always has a path but may lack a version.
    """

    name: str
    installed: bool
    version: Optional[str] = None
    path: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting unset fields."""
        data = {
            "name": self.name,
            "installed": self.installed,
            "version": self.version,
            "path": self.path,
        }
        return {key: value for key, value in data.items() if value is not None}


class ToolDetector:
    """Detects installed AI coding assistants.

    Every call probes the system afresh; nothing is cached.

    Example:
        detector = ToolDetector()
        for result in detector.detect_all():
            print(f"{result.name}: {result.installed}")
    """

    def __init__(
        self,
        registry: Optional[ToolRegistry] = None,
        timeout: float = probe.DEFAULT_TIMEOUT,
    ):
        """Initialize the detector.

        Args:
            registry: Optional tool registry. Uses default if not provided.
            timeout: Seconds allowed for each probe call.
        """
        self.registry = registry or ToolRegistry()
        self.timeout = timeout

    def detect(self, identifier: str) -> DetectionResult:
        """Detect a specific tool.

        Args:
            identifier: Tool identifier to detect.

        Returns:
            Detection result.

        Raises:
            UnknownToolError: If the identifier is not registered.
        """
        return self.detect_tool(self._lookup(identifier))

    def detect_many(self, identifiers: Iterable[str]) -> list[DetectionResult]:
        """Detect several tools, in input order.

        All identifiers are validated before any probe runs. Duplicates are
        kept.

        Args:
            identifiers: Tool identifiers to detect.

        Returns:
            One result per identifier.

        Raises:
            UnknownToolError: For the first unregistered identifier.
        """
        tools = [self._lookup(identifier) for identifier in identifiers]
        return [self.detect_tool(tool) for tool in tools]

    def detect_all(self) -> list[DetectionResult]:
        """Detect every registered tool in registry order."""
        return [self.detect_tool(tool) for tool in self.registry.get_all()]

    def detect_tool(self, tool: ToolInfo) -> DetectionResult:
        """Detect a single tool.

        Never raises: unexpected errors are reported as not installed.

        Args:
            tool: Tool info to detect.

        Returns:
            Detection result.
        """
        name = tool.name.value
        try:
            path = probe.locate(tool.command, timeout=self.timeout)
            if not path:
                return DetectionResult(name=name, installed=False)

            version = probe.get_version(
                path,
                timeout=self.timeout,
                version_arg=tool.version_arg,
            )
            return DetectionResult(
                name=name,
                installed=True,
                version=version,
                path=path,
            )
        except Exception as e:
            logger.warning(f"Detection of {name} failed: {e}")
            return DetectionResult(name=name, installed=False)

    def _lookup(self, identifier: str) -> ToolInfo:
        tool = self.registry.get(identifier)
        if tool is None:
            raise UnknownToolError(identifier, self.registry.names())
        return tool
