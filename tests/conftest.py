from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import pytest

from searchbot.agent.tools.websearch.extractor import (
    CODE_SELECTOR,
    CONTENT_SELECTOR,
    HEADING_SELECTOR,
)


class FakeElement:
    def __init__(self, text: str | None = None, href: str | None = None):
        self.text = text
        self.href = href

    async def text_content(self) -> str | None:
        return self.text

    async def evaluate(self, script: str) -> str:
        return self.href or ""


class FakeEntry:
    """One `li.b_algo` listing entry."""

    def __init__(
        self,
        title: str | None = None,
        href: str | None = None,
        snippet: str | None = None,
    ):
        self.children: dict[str, FakeElement] = {}
        if title is not None:
            self.children["h2 a"] = FakeElement(title, href)
        if snippet is not None:
            self.children[".b_caption p"] = FakeElement(snippet)

    async def query_selector(self, selector: str) -> FakeElement | None:
        return self.children.get(selector)


@dataclass
class FakeSite:
    """Scripted web: a results listing plus detail documents keyed by URL."""

    listing: list[FakeEntry] = field(default_factory=list)
    documents: dict[str, dict[str, Any]] = field(default_factory=dict)
    failures: dict[str, Exception] = field(default_factory=dict)
    visits: list[dict[str, Any]] = field(default_factory=list)


class FakePage:
    def __init__(self, site: FakeSite):
        self.site = site
        self.url: str | None = None
        self.closed = False
        self.routes: list[tuple[str, Any]] = []

    async def route(self, pattern: str, handler: Any) -> None:
        self.routes.append((pattern, handler))

    async def goto(self, url: str, wait_until: str | None = None, timeout: int | None = None):
        self.site.visits.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        failure = self.site.failures.get(url)
        if failure is not None:
            raise failure
        self.url = url
        return None

    async def query_selector_all(self, selector: str) -> list[FakeEntry]:
        return list(self.site.listing) if selector == "li.b_algo" else []

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        document = self.site.documents.get(self.url or "", {})
        if arg == CONTENT_SELECTOR:
            return document.get("content")
        if arg == CODE_SELECTOR:
            return document.get("code", [])
        if arg == HEADING_SELECTOR:
            return document.get("headings", [])
        raise AssertionError(f"unexpected evaluate arg: {arg!r}")

    async def close(self) -> None:
        self.closed = True


class FakeBrowser:
    def __init__(self, site: FakeSite):
        self.site = site
        self.pages: list[FakePage] = []
        self.closed = False

    async def new_page(self) -> FakePage:
        page = FakePage(self.site)
        self.pages.append(page)
        return page

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def site() -> FakeSite:
    return FakeSite()


@pytest.fixture
def browser(site: FakeSite) -> FakeBrowser:
    return FakeBrowser(site)


@pytest.fixture
def install_browser(monkeypatch, browser: FakeBrowser):
    """Point a runner's browser acquisition at the fake browser; records openings."""

    def _install(runner: Any) -> dict[str, int]:
        calls = {"open": 0}

        @asynccontextmanager
        async def fake_open():
            calls["open"] += 1
            try:
                yield browser
            finally:
                await browser.close()

        monkeypatch.setattr(runner, "_open_browser", fake_open)
        return calls

    return _install


@pytest.fixture
def make_entry():
    return FakeEntry


@pytest.fixture
def make_page():
    return FakePage
