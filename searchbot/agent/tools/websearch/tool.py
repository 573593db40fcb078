"""web_search tool: approval-gated, browser-driven web search."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger

from searchbot.agent.tools.base import Tool
from searchbot.agent.tools.websearch.errors import SearchValidationError
from searchbot.agent.tools.websearch.models import SearchRequest
from searchbot.agent.tools.websearch.runner import WebSearchRunner

if TYPE_CHECKING:
    from searchbot.config.schema import BrowserToolConfig, WebSearchConfig

ApprovalCallback = Callable[[str], Awaitable[bool]]
ErrorSink = Callable[[str, BaseException], Awaitable[None]]

SEARCH_STAGE = "performing web search"
DECLINED_MESSAGE = "Web search declined by user."


async def log_error(stage: str, error: BaseException) -> None:
    """Default error sink."""
    logger.error("Error {}: {}", stage, error)


class WebSearchTool(Tool):
    """Search the web through a headless browser and return analyzed results."""

    name = "web_search"
    description = (
        "Request to search the web for information using configurable parameters. "
        "The search is performed through a headless browser and returns analyzed, "
        "structured results that include relevant excerpts, code snippets, and summaries "
        "from the searched pages. Results are also stored as a JSON file."
    )
    parameters = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "The search query to execute"},
            "domain": {
                "type": "string",
                "description": "Domain to restrict the search to (e.g. 'stackoverflow.com')",
            },
            "max_results": {
                "type": "integer",
                "minimum": 1,
                "description": "Maximum number of search results to process (default: 5)",
            },
            "sliding_window_size": {
                "type": "integer",
                "minimum": 1,
                "description": "Size of the sliding window for text analysis (default: 100)",
            },
            "chunk_dir": {
                "type": "string",
                "description": "Directory to store results (default: './web-search-results')",
            },
        },
        "required": ["query"],
    }

    def __init__(
        self,
        workspace: Path,
        web_search_config: WebSearchConfig | None = None,
        web_browser_config: BrowserToolConfig | None = None,
        approval: ApprovalCallback | None = None,
        error_sink: ErrorSink | None = None,
    ):
        self.runner = WebSearchRunner(
            workspace=workspace,
            web_search_config=web_search_config,
            web_browser_config=web_browser_config,
        )
        self.approval = approval
        self.error_sink = error_sink or log_error

    async def execute(self, **kwargs: Any) -> str:
        config = self.runner.config
        try:
            request = SearchRequest.from_params(
                kwargs,
                max_results=config.max_results,
                sliding_window_size=config.sliding_window_size,
                output_dir=config.output_dir,
            )
        except SearchValidationError as e:
            if e.param == "query":
                return (
                    "Error: Missing value for required parameter 'query'. "
                    "Please retry with complete response."
                )
            return f"Error: {e}"

        if not await self._approve(request):
            logger.info("Web search declined: {!r}", request.query)
            return DECLINED_MESSAGE

        try:
            outcome = await self.runner.run(request)
        except Exception as e:
            await self.error_sink(SEARCH_STAGE, e)
            return f"Error {SEARCH_STAGE}: {e}"
        return outcome.report

    async def _approve(self, request: SearchRequest) -> bool:
        if self.approval is None:
            return True
        return bool(await self.approval(self.approval_message(request)))

    def approval_message(self, request: SearchRequest) -> str:
        """JSON payload describing the search, shown before anything touches disk or network."""
        if request.domain:
            description = f"Search the web for '{request.query}' on {request.domain}"
        else:
            description = f"Search the web for '{request.query}'"

        message: dict[str, Any] = {
            "tool": "webSearch",
            "description": description,
            "path": str(self.runner.resolve_output_dir(request)),
            "query": request.query,
        }
        if request.domain:
            message["domain"] = request.domain
        message["maxResults"] = request.max_results
        return json.dumps(message, ensure_ascii=False)
