"""
Playwright-backed browser session for one browser kind.

- start() / stop()       launch and tear down browser + context + page
- navigate(base_url)     go to `{base_url}/`
- find_element(locator)  bounded polling until visible and enabled
- click_element(el)      scripted `el.click()` instead of a native click
- screenshot(path)       failure artifacts

One session is created per browser kind and reused, serially, by every
case run against that kind.
"""

from __future__ import annotations

import asyncio
import logging
import os
import time
from pathlib import Path
from typing import Any, Optional

from playwright.async_api import (
    Browser,
    BrowserContext,
    Error as PwError,
    Locator as PwLocator,
    Page,
    Playwright,
    async_playwright,
)

from ..core.errors import (
    ActionExecutionError,
    BrowserLaunchError,
    BrowserUnavailableError,
    LookupTimeoutError,
    NavigationError,
)
from .browsers import BrowserKind, find_executable, resolve_kind
from .locators import Locator

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0
DEFAULT_POLL_INTERVAL_S = 0.5

# Playwright messages meaning "this browser is not installed here".
_NOT_INSTALLED_MARKERS = (
    "Executable doesn't exist",
    "is not found at",
    "Host system is missing dependencies",
    "playwright install",
)


def is_not_installed(exc: BaseException) -> bool:
    """True when a launch failure means the browser is missing, not broken."""
    if isinstance(exc, FileNotFoundError):
        return True
    msg = str(exc)
    return any(marker in msg for marker in _NOT_INSTALLED_MARKERS)


class BrowserSession:
    """
    A running browser under automated control, bound to one BrowserKind.
    Unknown kinds are rejected in the constructor, before anything launches.
    """

    def __init__(
        self,
        kind: str | BrowserKind,
        *,
        driver_dir: Optional[Path] = None,
        headless: bool = True,
        default_timeout_s: float = DEFAULT_TIMEOUT_S,
        poll_interval_s: float = DEFAULT_POLL_INTERVAL_S,
    ) -> None:
        self.kind = resolve_kind(kind)
        self.driver_dir = Path(driver_dir) if driver_dir else Path(os.getcwd())
        self.headless = headless
        self.default_timeout_s = default_timeout_s
        self.poll_interval_s = poll_interval_s

        self._pw: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "BrowserSession":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.stop()

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Browser not started. Call start() first.")
        return self._page

    # ---------------- lifecycle ----------------

    async def start(self) -> None:
        """Launch Playwright, the browser, one context and one page."""
        if self._browser is not None:
            return
        spec = self.kind.spec
        launch_kw: dict[str, Any] = {"headless": self.headless}
        exe = find_executable(self.kind, self.driver_dir)
        if exe is not None:
            launch_kw["executable_path"] = str(exe)
        elif spec.channel:
            launch_kw["channel"] = spec.channel

        try:
            self._pw = await async_playwright().start()
            self._browser = await getattr(self._pw, spec.engine).launch(**launch_kw)
            self._context = await self._browser.new_context()
            self._context.set_default_timeout(self.default_timeout_s * 1000)
            self._page = await self._context.new_page()
        except (PwError, OSError) as e:
            await self.stop()
            if is_not_installed(e):
                raise BrowserUnavailableError(
                    self.kind.value, "browser is not installed", cause=e
                ) from e
            raise BrowserLaunchError(self.kind.value, f"browser failed to launch: {e}", cause=e) from e
        logger.info(
            "started %s (%s%s)",
            self.kind.value,
            spec.engine,
            f", executable={exe}" if exe else "",
        )

    async def stop(self) -> None:
        """Close page, context, browser and Playwright. Safe to call twice."""
        try:
            if self._context is not None:
                try:
                    await self._context.close()
                except PwError:
                    pass
            if self._browser is not None:
                await self._browser.close()
        finally:
            if self._pw is not None:
                await self._pw.stop()
            self._pw = None
            self._browser = None
            self._context = None
            self._page = None

    # ---------------- primitives ----------------

    async def navigate(self, base_url: str) -> None:
        url = f"{base_url.rstrip('/')}/"
        try:
            await self.page.goto(url, wait_until="load")
        except PwError as e:
            raise NavigationError(url, cause=e) from e
        logger.info("navigated to %s", url)

    async def find_element(
        self,
        locator: Locator,
        *,
        parent: Optional[PwLocator] = None,
        timeout_s: Optional[float] = None,
    ) -> PwLocator:
        """
        Poll until the first element matching `locator` (inside `parent` when
        given) exists, is visible and is enabled; return it.
        Raises LookupTimeoutError once `timeout_s` elapses.
        """
        timeout = self.default_timeout_s if timeout_s is None else timeout_s
        scope = parent if parent is not None else self.page
        target = scope.locator(locator.selector).first
        deadline = time.monotonic() + timeout
        last_error: Optional[BaseException] = None
        probe_ms = max(1.0, self.poll_interval_s * 1000)

        while True:
            try:
                if await target.is_visible() and await target.is_enabled(timeout=probe_ms):
                    return target
            except PwError as e:
                # detached / navigating mid-poll; try again next tick
                last_error = e
            if time.monotonic() >= deadline:
                raise LookupTimeoutError(str(locator), timeout, cause=last_error)
            logger.debug("waiting for %s", locator)
            await asyncio.sleep(self.poll_interval_s)

    async def click_element(self, element: PwLocator) -> None:
        """Dispatch a click through injected script, bypassing native click semantics."""
        try:
            await element.evaluate("el => el.click()")
        except PwError as e:
            raise ActionExecutionError(
                action="click",
                message="scripted click failed",
                selector=str(element),
                cause=e,
            ) from e

    async def is_displayed(self, element: PwLocator) -> bool:
        try:
            return await element.is_visible()
        except PwError as e:
            raise ActionExecutionError(
                action="is_displayed",
                message="visibility check failed",
                selector=str(element),
                cause=e,
            ) from e

    async def screenshot(self, path: str, *, full_page: bool = True) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        await self.page.screenshot(path=path, full_page=full_page)
