"""Playwright browser binary installation."""

from __future__ import annotations

import asyncio
import sys

from loguru import logger

_INSTALL_LOCK = asyncio.Lock()
_DEFAULT_INSTALL_TIMEOUT_S = 10 * 60
_MISSING_BINARY_MARKERS = (
    "executable doesn't exist",
    "please run the following command",
    "browser has not been found",
)


def is_missing_browser_error(exc: Exception) -> bool:
    """Detect launch failures caused by a browser binary that was never downloaded."""
    text = str(exc).lower()
    return any(marker in text for marker in _MISSING_BINARY_MARKERS)


async def install_browser(
    browser_name: str,
    *,
    timeout_s: int = _DEFAULT_INSTALL_TIMEOUT_S,
) -> tuple[bool, str]:
    """Run `python -m playwright install <browser>`; returns (ok, combined output)."""
    if not browser_name:
        return False, "No browser target specified"

    async with _INSTALL_LOCK:
        logger.info("Installing Playwright browser: {}", browser_name)
        process = await asyncio.create_subprocess_exec(
            sys.executable,
            "-m",
            "playwright",
            "install",
            browser_name,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout_s)
        except asyncio.TimeoutError:
            process.kill()
            return False, f"playwright install timed out after {timeout_s}s"

    output = "\n".join(
        part
        for part in (
            stdout.decode("utf-8", errors="replace").strip(),
            stderr.decode("utf-8", errors="replace").strip(),
        )
        if part
    )
    if process.returncode == 0:
        return True, _tail(output) or f"{browser_name} installed"
    return False, _tail(output) or f"playwright install exited with code {process.returncode}"


def _tail(text: str, max_chars: int = 2000) -> str:
    """Keep the last ``max_chars`` of installer output, where errors are reported."""
    if len(text) <= max_chars:
        return text
    return f"... ({len(text) - max_chars} chars omitted)\n" + text[-max_chars:]
