"""Detection of installed AI coding assistant CLIs.

This module probes the system for each supported tool and normalizes the
outcome into DetectionResult objects.
"""

from .detector import DetectionResult, ToolDetector, UnknownToolError
from .policy import arrange_results, dedupe_results, invalid_tools, sort_installed_first
from .registry import SUPPORTED_TOOLS, ToolInfo, ToolName, ToolRegistry, is_valid_tool

__all__ = [
    # Detector
    "ToolDetector",
    "DetectionResult",
    "UnknownToolError",
    # Registry
    "ToolRegistry",
    "ToolInfo",
    "ToolName",
    "SUPPORTED_TOOLS",
    "is_valid_tool",
    # Policy
    "arrange_results",
    "dedupe_results",
    "invalid_tools",
    "sort_installed_first",
]
