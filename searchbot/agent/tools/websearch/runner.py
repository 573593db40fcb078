"""Search orchestration: results listing, per-result detail pages, artifact and report."""

from __future__ import annotations

import time
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from loguru import logger

from searchbot.agent.tools.browser.launcher import launch_browser
from searchbot.agent.tools.browser.network import resource_block_reason, validate_result_url
from searchbot.agent.tools.websearch.artifacts import ArtifactWriter
from searchbot.agent.tools.websearch.errors import ArtifactWriteError, NavigationError
from searchbot.agent.tools.websearch.extractor import (
    ListingSelectors,
    collect_candidates,
    extract_page_details,
)
from searchbot.agent.tools.websearch.models import (
    Candidate,
    ProcessedResults,
    SearchRequest,
    SearchResult,
    now_iso,
)
from searchbot.agent.tools.websearch.processor import derive_key_phrases, derive_summary
from searchbot.agent.tools.websearch.report import format_report

if TYPE_CHECKING:
    from searchbot.config.schema import BrowserToolConfig, WebSearchConfig


@dataclass(slots=True, frozen=True)
class SearchOutcome:
    """Report and artifact produced by one successful search."""

    report: str
    artifact_path: Path
    processed: ProcessedResults


def build_search_url(engine_url: str, query: str, domain: str | None = None) -> str:
    """Engine URL for a query, scoped with ``site:`` when a domain is given."""
    q = f"site:{domain} {query}" if domain else query
    separator = "&" if "?" in engine_url else "?"
    return f"{engine_url}{separator}{urlencode({'q': q})}"


class WebSearchRunner:
    """Run one browser-driven search, strictly sequentially."""

    def __init__(
        self,
        workspace: Path,
        web_search_config: WebSearchConfig | None = None,
        web_browser_config: BrowserToolConfig | None = None,
    ):
        from searchbot.config.schema import BrowserToolConfig, WebSearchConfig

        self.workspace = workspace.resolve()
        self.config = web_search_config or WebSearchConfig()
        self.browser_config = web_browser_config or BrowserToolConfig()
        self.selectors = ListingSelectors(
            result=self.config.result_selector,
            title=self.config.title_selector,
            snippet=self.config.snippet_selector,
        )

    def resolve_output_dir(self, request: SearchRequest) -> Path:
        path = Path(request.output_dir).expanduser()
        return path.resolve() if path.is_absolute() else (self.workspace / path).resolve()

    async def run(self, request: SearchRequest) -> SearchOutcome:
        started_at = time.monotonic()
        output_dir = self.resolve_output_dir(request)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArtifactWriteError(f"failed to create output directory {output_dir}: {e}") from e

        logger.info(
            "Web search started: query={!r} domain={} max_results={}",
            request.query,
            request.domain,
            request.max_results,
        )

        async with self._open_browser() as browser:
            candidates = await self._collect_listing(browser, request)
            results: list[SearchResult] = []
            for candidate in candidates:
                results.append(await self._fetch_result(browser, candidate))

        processed = ProcessedResults(
            query=request.query,
            domain=request.domain,
            results=results,
            key_phrases=derive_key_phrases(
                results,
                request.sliding_window_size,
                max_words=self.config.max_phrase_words,
            ),
            search_summary=derive_summary(results),
            timestamp=now_iso(),
        )

        artifact_path = ArtifactWriter(output_dir).save(processed)
        report = format_report(processed, artifact_path)

        partial = sum(1 for r in results if r.is_partial)
        logger.info(
            "Web search finished: {} results ({} partial) in {}ms -> {}",
            len(results),
            partial,
            int((time.monotonic() - started_at) * 1000),
            artifact_path,
        )
        return SearchOutcome(report=report, artifact_path=artifact_path, processed=processed)

    def _open_browser(self) -> AbstractAsyncContextManager[Any]:
        return launch_browser(self.browser_config)

    async def _collect_listing(self, browser: Any, request: SearchRequest) -> list[Candidate]:
        url = build_search_url(self.config.engine_url, request.query, request.domain)
        page = await browser.new_page()
        try:
            await page.route("**/*", self._filter_request)
            try:
                await page.goto(
                    url,
                    wait_until="networkidle",
                    timeout=self.config.results_timeout_ms,
                )
            except Exception as e:
                raise NavigationError(f"failed to load search results {url}: {e}") from e

            candidates = await collect_candidates(page, self.selectors, request.max_results)
        finally:
            await page.close()

        logger.debug("Collected {} candidates from {}", len(candidates), url)
        return candidates

    async def _fetch_result(self, browser: Any, candidate: Candidate) -> SearchResult:
        ok, reason = validate_result_url(
            candidate.url,
            allow_private_network=self.browser_config.allow_private_network,
        )
        if not ok:
            logger.warning("Skipping detail extraction for {}: {}", candidate.url, reason)
            return SearchResult.partial(candidate, reason)

        page = None
        try:
            page = await browser.new_page()
            await page.route("**/*", self._filter_request)
            await page.goto(
                candidate.url,
                wait_until="networkidle",
                timeout=self.config.detail_timeout_ms,
            )
            details = await extract_page_details(page)
        except Exception as e:
            logger.warning("Error extracting content from {}: {}", candidate.url, e)
            return SearchResult.partial(candidate, str(e) or type(e).__name__)
        finally:
            if page is not None:
                await self._close_page(page)

        logger.debug(
            "Extracted {}: {} chars, {} code blocks, {} headings",
            candidate.url,
            len(details.content or ""),
            len(details.code_snippets),
            len(details.headings),
        )
        return SearchResult.full(candidate, details)

    async def _close_page(self, page: Any) -> None:
        try:
            await page.close()
        except Exception as e:
            logger.debug("Ignoring error while closing page: {}", e)

    async def _filter_request(self, route: Any, request: Any) -> None:
        reason = resource_block_reason(
            request.resource_type,
            request.url,
            blocked_resource_types=self.browser_config.blocked_resource_types,
            block_file_scheme=self.browser_config.block_file_scheme,
        )
        if reason:
            await route.abort("blockedbyclient")
            return
        await route.continue_()
