from searchbot.agent.tools.websearch.models import SearchResult
from searchbot.agent.tools.websearch.processor import (
    NO_SUMMARY,
    derive_key_phrases,
    derive_summary,
)


def _result(content: str | None = None, headings: list[str] | None = None) -> SearchResult:
    return SearchResult(
        title="t",
        url="https://example.com",
        snippet="s",
        content=content,
        headings=headings,
    )


def _words(count: int) -> str:
    return " ".join(f"word{i:02d}" for i in range(count))


def test_key_phrases_capped_at_five_and_length_bounded() -> None:
    phrases = derive_key_phrases([_result(_words(40))], window_size=5)

    assert len(phrases) == 5
    assert phrases[0] == "word00 word01 word02 word03 word04"
    assert all(30 < len(p) < 150 for p in phrases)


def test_key_phrases_window_larger_than_content_contributes_nothing() -> None:
    assert derive_key_phrases([_result(_words(10))], window_size=10) == []
    assert derive_key_phrases([_result(_words(10))], window_size=500) == []


def test_key_phrases_skip_final_window() -> None:
    phrases = derive_key_phrases([_result(_words(6))], window_size=5)
    assert phrases == ["word00 word01 word02 word03 word04"]


def test_key_phrases_length_filter_excludes_short_and_long() -> None:
    short = derive_key_phrases([_result("a b c d e f g h i j")], window_size=2)
    assert short == []

    long_words = " ".join(["x" * 40] * 6)
    assert derive_key_phrases([_result(long_words)], window_size=4) == []


def test_key_phrases_duplicates_collapse_in_discovery_order() -> None:
    content = _words(7)
    phrases = derive_key_phrases([_result(content), _result(content)], window_size=5)
    assert phrases == [
        "word00 word01 word02 word03 word04",
        "word01 word02 word03 word04 word05",
    ]


def test_key_phrases_tokenize_on_any_whitespace() -> None:
    content = "\n  word00\tword01   word02\nword03 word04  word05 \n"
    phrases = derive_key_phrases([_result(content)], window_size=5)
    assert phrases == ["word00 word01 word02 word03 word04"]


def test_key_phrases_ignore_results_without_content() -> None:
    results = [_result(None), _result(""), _result(_words(7))]
    assert len(derive_key_phrases(results, window_size=5)) == 2


def test_key_phrases_respect_word_cap() -> None:
    phrases = derive_key_phrases([_result(_words(40))], window_size=5, max_words=6)
    assert phrases == ["word00 word01 word02 word03 word04"]


def test_summary_joins_headings_per_result() -> None:
    results = [_result(headings=["A", "B"]), _result(headings=[]), _result(headings=["C"])]
    assert derive_summary(results) == "A > B\nC"


def test_summary_fallback_when_no_headings() -> None:
    assert derive_summary([]) == NO_SUMMARY
    assert derive_summary([_result(headings=None), _result(headings=[])]) == NO_SUMMARY
