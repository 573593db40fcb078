"""Scoped Playwright browser acquisition."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager
from typing import TYPE_CHECKING, Any

from loguru import logger

from searchbot.agent.tools.browser.installer import install_browser, is_missing_browser_error
from searchbot.agent.tools.websearch.errors import BrowserError

if TYPE_CHECKING:
    from searchbot.config.schema import BrowserToolConfig

_SUPPORTED_BROWSERS = ("chromium", "firefox")


@asynccontextmanager
async def launch_browser(config: "BrowserToolConfig") -> AsyncIterator[Any]:
    """
    Yield one launched browser and close it (and the driver) on every exit path.

    A launch that fails because the binary is missing triggers a single
    `playwright install` and one more launch attempt when auto-install is on.
    """
    from playwright.async_api import async_playwright

    browser_name = (config.default_browser or "chromium").lower()
    if browser_name not in _SUPPORTED_BROWSERS:
        raise BrowserError(f"browser must be one of {_SUPPORTED_BROWSERS}, got '{browser_name}'")

    async with AsyncExitStack() as stack:
        try:
            playwright = await stack.enter_async_context(async_playwright())
        except Exception as e:
            raise BrowserError(f"failed to start Playwright: {e}") from e

        browser = await _launch(playwright, browser_name, config)
        try:
            yield browser
        finally:
            await browser.close()
            logger.debug("Closed {} browser", browser_name)


async def _launch(playwright: Any, browser_name: str, config: "BrowserToolConfig") -> Any:
    browser_type = getattr(playwright, browser_name)
    launch_kwargs: dict[str, Any] = {"headless": config.headless}
    if browser_name == "chromium" and config.launch_args:
        launch_kwargs["args"] = list(config.launch_args)

    try:
        return await browser_type.launch(**launch_kwargs)
    except Exception as first_error:
        if not config.auto_install_browsers or not is_missing_browser_error(first_error):
            raise BrowserError(f"failed to launch {browser_name}: {first_error}") from first_error

        ok, details = await install_browser(browser_name)
        if not ok:
            raise BrowserError(
                f"failed to install {browser_name}: {details} (initial error: {first_error})"
            ) from first_error

        try:
            return await browser_type.launch(**launch_kwargs)
        except Exception as second_error:
            raise BrowserError(
                f"failed to launch {browser_name} after install: {second_error}"
            ) from second_error
