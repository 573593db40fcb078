"""DOM projections for search listings and result pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from searchbot.agent.tools.websearch.errors import ExtractionError
from searchbot.agent.tools.websearch.models import Candidate, PageDetails

CONTENT_SELECTOR = "main, article, .content, #content"
CODE_SELECTOR = "pre, code"
HEADING_SELECTOR = "h1, h2, h3"

_CONTENT_SCRIPT = """
(selector) => {
  const main = document.querySelector(selector);
  if (main) return main.textContent;
  return document.body ? document.body.textContent : null;
}
"""

_TEXT_LIST_SCRIPT = """
(selector) => Array.from(document.querySelectorAll(selector)).map((el) => el.textContent || "")
"""


@dataclass(slots=True, frozen=True)
class ListingSelectors:
    """Engine-specific markup of the results listing."""

    result: str = "li.b_algo"
    title: str = "h2 a"
    snippet: str = ".b_caption p"


async def collect_candidates(page: Any, selectors: ListingSelectors, limit: int) -> list[Candidate]:
    """Read up to ``limit`` complete entries from a loaded results listing, in listing order."""
    entries = await page.query_selector_all(selectors.result)
    logger.debug("Listing has {} entries", len(entries))

    candidates: list[Candidate] = []
    for index, entry in enumerate(entries, start=1):
        if len(candidates) >= limit:
            break

        title_el = await entry.query_selector(selectors.title)
        snippet_el = await entry.query_selector(selectors.snippet)
        if title_el is None or snippet_el is None:
            logger.debug("Skipping listing entry #{}: missing title or snippet", index)
            continue

        title = (await title_el.text_content() or "").strip()
        url = (await title_el.evaluate("(el) => el.href || ''") or "").strip()
        snippet = (await snippet_el.text_content() or "").strip()
        if not title or not url or not snippet:
            logger.debug("Skipping listing entry #{}: empty title, url or snippet", index)
            continue

        candidates.append(Candidate(title=title, url=url, snippet=snippet))

    return candidates


async def extract_page_details(page: Any) -> PageDetails:
    """Project body text, code blocks and h1-h3 headings out of a loaded page."""
    try:
        content = await page.evaluate(_CONTENT_SCRIPT, CONTENT_SELECTOR)
        raw_code = await page.evaluate(_TEXT_LIST_SCRIPT, CODE_SELECTOR)
        raw_headings = await page.evaluate(_TEXT_LIST_SCRIPT, HEADING_SELECTOR)
    except Exception as e:
        raise ExtractionError(f"failed to extract page content: {e}") from e

    return PageDetails(
        content=content if isinstance(content, str) else None,
        code_snippets=[text for text in raw_code or [] if text and text.strip()],
        headings=[text for text in raw_headings or [] if text],
    )
