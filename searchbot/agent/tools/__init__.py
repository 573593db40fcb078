"""Agent tools module."""

from searchbot.agent.tools.base import Tool
from searchbot.agent.tools.registry import ToolRegistry

__all__ = ["Tool", "ToolRegistry"]
