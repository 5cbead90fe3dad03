"""
Browser kinds the harness can drive, and how each maps onto Playwright.

- Chrome  -> chromium engine
- Firefox -> firefox engine
- Edge    -> chromium engine, "msedge" channel
- WebKit  -> webkit engine

Internet Explorer has no Playwright engine, so it is not a supported kind.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..core.errors import UnknownBrowserError


@dataclass(frozen=True)
class EngineSpec:
    """Playwright engine name + optional channel + executables to look for."""

    engine: str
    channel: Optional[str] = None
    executables: tuple[str, ...] = ()


class BrowserKind(str, Enum):
    CHROME = "Chrome"
    FIREFOX = "Firefox"
    EDGE = "Edge"
    WEBKIT = "WebKit"

    @property
    def spec(self) -> EngineSpec:
        return _ENGINES[self]


_ENGINES: dict[BrowserKind, EngineSpec] = {
    BrowserKind.CHROME: EngineSpec("chromium", executables=("chrome", "google-chrome", "chromium")),
    BrowserKind.FIREFOX: EngineSpec("firefox", executables=("firefox",)),
    BrowserKind.EDGE: EngineSpec("chromium", channel="msedge", executables=("msedge", "microsoft-edge")),
    BrowserKind.WEBKIT: EngineSpec("webkit"),
}

_ALIASES: dict[str, BrowserKind] = {
    "chromium": BrowserKind.CHROME,
    "msedge": BrowserKind.EDGE,
    "safari": BrowserKind.WEBKIT,
}


def resolve_kind(name: str | BrowserKind) -> BrowserKind:
    """Case-insensitive lookup of a browser kind by name or alias."""
    if isinstance(name, BrowserKind):
        return name
    key = name.strip().lower()
    for kind in BrowserKind:
        if kind.value.lower() == key:
            return kind
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnknownBrowserError(name) from None


def find_executable(kind: BrowserKind, search_dir: Path) -> Optional[Path]:
    """Return the first native executable for `kind` found in `search_dir`, if any."""
    for exe in kind.spec.executables:
        hit = shutil.which(exe, path=str(search_dir))
        if hit:
            return Path(hit)
    return None
