"""In-memory stand-in for BrowserSession used by runner/CLI tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from site_uitests.core.errors import (
    ActionExecutionError,
    BrowserLaunchError,
    BrowserUnavailableError,
    LookupTimeoutError,
)
from site_uitests.io.browsers import resolve_kind
from site_uitests.io.locators import Locator


@dataclass
class FakeElement:
    page: "FakePage"
    key: str

    async def is_visible(self) -> bool:
        return self.page.visible.get(self.key, False)


@dataclass
class FakePage:
    """
    links: link id -> modal id. Modals listed in `broken` never show;
    modals listed in `detached` fail their visibility check.
    """

    links: dict[str, str] = field(default_factory=dict)
    broken: set[str] = field(default_factory=set)
    detached: set[str] = field(default_factory=set)
    visible: dict[str, bool] = field(default_factory=dict)
    clicks: list[str] = field(default_factory=list)
    lookups: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.visible["body"] = True
        for link, modal in self.links.items():
            self.visible[link] = True
            self.visible.setdefault(modal, False)


class FakeSession:
    def __init__(self, kind="Firefox", page: Optional[FakePage] = None, **kw) -> None:
        self.kind = resolve_kind(kind)
        self.page = page or FakePage()
        self.kw = kw
        self.started = False
        self.stopped = False
        self.navigated_to: Optional[str] = None
        self.unavailable = False
        self.crashes = False
        self.screenshots: list[str] = []

    async def start(self) -> None:
        if self.unavailable:
            raise BrowserUnavailableError(self.kind.value, "browser is not installed")
        if self.crashes:
            raise BrowserLaunchError(self.kind.value, "browser failed to launch: crashed")
        self.started = True

    async def stop(self) -> None:
        self.stopped = True

    async def navigate(self, base_url: str) -> None:
        self.navigated_to = f"{base_url.rstrip('/')}/"

    async def find_element(self, locator: Locator, *, parent=None, timeout_s=None):
        self.page.lookups.append(str(locator))
        if locator.strategy == "class_name" and parent is not None:
            key = f"{parent.key}.{locator.value}"
            if self.page.visible.get(parent.key):
                return FakeElement(self.page, key)
        elif self.page.visible.get(locator.value):
            return FakeElement(self.page, locator.value)
        elif locator.value in self.page.broken:
            return FakeElement(self.page, locator.value)
        raise LookupTimeoutError(str(locator), timeout_s or 10)

    async def is_displayed(self, element: FakeElement) -> bool:
        if element.key in self.page.detached:
            raise ActionExecutionError(
                action="is_displayed", message="visibility check failed", selector=element.key
            )
        return await element.is_visible()

    async def click_element(self, element: FakeElement) -> None:
        self.page.clicks.append(element.key)
        if element.key in self.page.links:
            modal = self.page.links[element.key]
            if modal not in self.page.broken:
                self.page.visible[modal] = True
        elif element.key.endswith(".close"):
            self.page.visible[element.key.rsplit(".", 1)[0]] = False

    async def screenshot(self, path: str, *, full_page: bool = True) -> None:
        self.screenshots.append(path)
