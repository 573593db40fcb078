"""Data models for browser-driven web search."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

from searchbot.agent.tools.websearch.errors import SearchValidationError

ExtractionStatus = Literal["full", "partial"]

DEFAULT_MAX_RESULTS = 5
DEFAULT_SLIDING_WINDOW_SIZE = 100
DEFAULT_OUTPUT_DIR = "./web-search-results"


def now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2025-01-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _positive_int(value: Any, param: str) -> int:
    if isinstance(value, bool):
        raise SearchValidationError(param, f"{param} must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise SearchValidationError(param, f"{param} must be a positive integer") from None
    if number < 1:
        raise SearchValidationError(param, f"{param} must be a positive integer")
    return number


@dataclass(slots=True, frozen=True)
class SearchRequest:
    """One search invocation, validated on construction."""

    query: str
    domain: str | None = None
    max_results: int = DEFAULT_MAX_RESULTS
    sliding_window_size: int = DEFAULT_SLIDING_WINDOW_SIZE
    output_dir: str = DEFAULT_OUTPUT_DIR

    def __post_init__(self) -> None:
        if not isinstance(self.query, str) or not self.query.strip():
            raise SearchValidationError("query", "query must be a non-empty string")
        object.__setattr__(self, "max_results", _positive_int(self.max_results, "max_results"))
        object.__setattr__(
            self,
            "sliding_window_size",
            _positive_int(self.sliding_window_size, "sliding_window_size"),
        )
        domain = (self.domain or "").strip() or None
        object.__setattr__(self, "domain", domain)
        output_dir = (self.output_dir or "").strip() or DEFAULT_OUTPUT_DIR
        object.__setattr__(self, "output_dir", output_dir)

    @classmethod
    def from_params(
        cls,
        params: dict[str, Any],
        *,
        max_results: int = DEFAULT_MAX_RESULTS,
        sliding_window_size: int = DEFAULT_SLIDING_WINDOW_SIZE,
        output_dir: str = DEFAULT_OUTPUT_DIR,
    ) -> "SearchRequest":
        """Build a request from tool-call parameters, falling back to the given defaults."""
        query = params.get("query")
        requested_max = params.get("max_results")
        requested_window = params.get("sliding_window_size")
        return cls(
            query=str(query).strip() if query is not None else "",
            domain=params.get("domain"),
            max_results=max_results if requested_max is None else requested_max,
            sliding_window_size=sliding_window_size if requested_window is None else requested_window,
            output_dir=params.get("chunk_dir") or output_dir,
        )


@dataclass(slots=True, frozen=True)
class Candidate:
    """A single entry found in the search engine listing."""

    title: str
    url: str
    snippet: str


@dataclass(slots=True, frozen=True)
class PageDetails:
    """Text projected out of a rendered result page."""

    content: str | None
    code_snippets: list[str] = field(default_factory=list)
    headings: list[str] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Processed result; partial results carry only listing fields plus a reason."""

    title: str
    url: str
    snippet: str
    content: str | None = None
    code_snippets: list[str] | None = None
    headings: list[str] | None = None
    extraction: ExtractionStatus = "full"
    reason: str | None = None

    @classmethod
    def full(cls, candidate: Candidate, details: PageDetails) -> "SearchResult":
        return cls(
            title=candidate.title,
            url=candidate.url,
            snippet=candidate.snippet,
            content=details.content,
            code_snippets=list(details.code_snippets),
            headings=list(details.headings),
        )

    @classmethod
    def partial(cls, candidate: Candidate, reason: str) -> "SearchResult":
        return cls(
            title=candidate.title,
            url=candidate.url,
            snippet=candidate.snippet,
            extraction="partial",
            reason=reason,
        )

    @property
    def is_partial(self) -> bool:
        return self.extraction == "partial"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "title": self.title,
            "url": self.url,
            "snippet": self.snippet,
        }
        if self.content is not None:
            payload["content"] = self.content
        if self.code_snippets is not None:
            payload["codeSnippets"] = list(self.code_snippets)
        if self.headings is not None:
            payload["headings"] = list(self.headings)
        payload["extraction"] = self.extraction
        if self.reason is not None:
            payload["reason"] = self.reason
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchResult":
        code_snippets = data.get("codeSnippets")
        headings = data.get("headings")
        return cls(
            title=str(data.get("title", "")),
            url=str(data.get("url", "")),
            snippet=str(data.get("snippet", "")),
            content=data.get("content"),
            code_snippets=list(code_snippets) if code_snippets is not None else None,
            headings=list(headings) if headings is not None else None,
            extraction="partial" if data.get("extraction") == "partial" else "full",
            reason=data.get("reason"),
        )


@dataclass(slots=True, frozen=True)
class ProcessedResults:
    """Outcome of one completed search; the unit of persistence."""

    query: str
    domain: str | None
    results: list[SearchResult]
    key_phrases: list[str]
    search_summary: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": self.query}
        if self.domain is not None:
            payload["domain"] = self.domain
        payload.update(
            {
                "results": [result.to_dict() for result in self.results],
                "keyPhrases": list(self.key_phrases),
                "searchSummary": self.search_summary,
                "timestamp": self.timestamp,
            }
        )
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProcessedResults":
        if not isinstance(data, dict):
            raise ValueError("processed results must be an object")
        raw_results = data.get("results", [])
        if not isinstance(raw_results, list):
            raise ValueError("results must be an array")
        return cls(
            query=str(data.get("query", "")),
            domain=data.get("domain"),
            results=[SearchResult.from_dict(item) for item in raw_results],
            key_phrases=[str(p) for p in data.get("keyPhrases", [])],
            search_summary=str(data.get("searchSummary", "")),
            timestamp=str(data.get("timestamp", "")),
        )
