"""Plain-text rendering of processed search results."""

from __future__ import annotations

from pathlib import Path

from searchbot.agent.tools.websearch.models import ProcessedResults, SearchResult


def _format_result(result: SearchResult) -> str:
    lines = [
        f"- {result.title}",
        f"  {result.url}",
        f"  {result.snippet}",
    ]
    if result.code_snippets:
        lines.append(f"  Code Snippets: {len(result.code_snippets)} found")
    if result.headings:
        lines.append(f"  Headings: {' > '.join(result.headings)}")
    return "\n".join(lines)


def format_report(processed: ProcessedResults, artifact_path: Path | str) -> str:
    """Render the report handed back to the agent."""
    lines = [f'Web Search Results for: "{processed.query}"']
    if processed.domain:
        lines.append(f"Domain: {processed.domain}")
    lines.extend(
        [
            f"Results stored in: {artifact_path}",
            "",
            "Search Summary:",
            processed.search_summary,
            "",
            "Key Phrases:",
            *processed.key_phrases,
            "",
            "Results:",
        ]
    )
    body = "\n".join(lines)
    if not processed.results:
        return body
    return body + "\n" + "\n\n".join(_format_result(r) for r in processed.results)
