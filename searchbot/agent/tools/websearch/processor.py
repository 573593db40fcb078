"""Key-phrase and summary derivation over extracted results."""

from __future__ import annotations

from collections.abc import Sequence

from searchbot.agent.tools.websearch.models import SearchResult

MAX_KEY_PHRASES = 5
MIN_PHRASE_CHARS = 30
MAX_PHRASE_CHARS = 150
NO_SUMMARY = "No structured summary available"


def derive_key_phrases(
    results: Sequence[SearchResult],
    window_size: int,
    *,
    max_words: int | None = None,
) -> list[str]:
    """
    Slide a word window over each result body and keep phrases of moderate length.

    Args:
        results: Results in listing order.
        window_size: Number of words per phrase.
        max_words: Optional cap on the words considered per result.

    Returns:
        Up to five distinct phrases, in discovery order.
    """
    phrases: dict[str, None] = {}

    for result in results:
        if not result.content:
            continue

        words = result.content.split()
        if max_words is not None:
            words = words[:max_words]

        # The final window is never considered; a window >= token count yields nothing.
        for i in range(len(words) - window_size):
            phrase = " ".join(words[i : i + window_size])
            if MIN_PHRASE_CHARS < len(phrase) < MAX_PHRASE_CHARS:
                phrases.setdefault(phrase, None)
                if len(phrases) >= MAX_KEY_PHRASES:
                    return list(phrases)

    return list(phrases)


def derive_summary(results: Sequence[SearchResult]) -> str:
    """Join each result's headings into a breadcrumb, one line per result."""
    lines = [" > ".join(result.headings) for result in results if result.headings]
    return "\n".join(lines) or NO_SUMMARY
