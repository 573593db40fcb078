"""Tool registry factory for hosts embedding searchbot."""

from pathlib import Path

from searchbot.agent.tools.registry import ToolRegistry
from searchbot.agent.tools.websearch.tool import ApprovalCallback, ErrorSink, WebSearchTool
from searchbot.config.schema import Config


def build_tool_registry(
    *,
    workspace: Path,
    config: Config,
    approval: ApprovalCallback | None = None,
    error_sink: ErrorSink | None = None,
) -> ToolRegistry:
    """Build a registry holding the enabled web tools."""
    registry = ToolRegistry()
    web = config.tools.web

    if web.search.enabled:
        registry.register(
            WebSearchTool(
                workspace=workspace,
                web_search_config=web.search,
                web_browser_config=web.browser,
                approval=approval,
                error_sink=error_sink,
            )
        )

    return registry
