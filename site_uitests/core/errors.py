"""
Error taxonomy for the UI test harness.
- UITestError: base class for all custom errors
- UnknownBrowserError: unsupported browser-kind selector (fails fixture setup)
- BrowserUnavailableError: browser not installed, callers soft-skip
- BrowserLaunchError: browser installed but failed to start, callers fail
- NavigationError: could not load the site url
- LookupTimeoutError: element never became visible/enabled within the timeout
- ActionExecutionError: in-page interaction failed
"""
# @file purpose: Define error taxonomy for site-uitests.

from typing import Any


class UITestError(Exception):
    """Base class for all custom errors in site-uitests."""


class UnknownBrowserError(UITestError, ValueError):
    """Raised when a browser-kind name is not one of the supported kinds."""

    def __init__(self, name: str) -> None:
        super().__init__(f"'{name}': Unknown browser")
        self.name = name


class BrowserUnavailableError(UITestError):
    """
    Raised when the browser for a kind is not installed on this machine.
    Harness callers treat this as a soft skip, not a failure.
    """

    def __init__(self, kind: str, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(f"[{kind}] {message}")
        self.kind = kind
        self.cause = cause


class BrowserLaunchError(UITestError):
    """Raised when an installed browser crashes or refuses to start."""

    def __init__(self, kind: str, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(f"[{kind}] {message}")
        self.kind = kind
        self.cause = cause


class NavigationError(UITestError):
    """Raised when the session cannot load the requested url."""

    def __init__(self, url: str, *, cause: BaseException | None = None) -> None:
        super().__init__(f"failed to open url: {url}")
        self.url = url
        self.cause = cause


class LookupTimeoutError(UITestError):
    """Raised when a locator does not yield a visible, enabled element in time."""

    def __init__(
        self, selector: str, timeout_s: float, *, cause: BaseException | None = None
    ) -> None:
        super().__init__(
            f"element {selector!r} not visible and enabled after {timeout_s:g}s"
        )
        self.selector = selector
        self.timeout_s = timeout_s
        self.cause = cause


class ActionExecutionError(UITestError):
    """
    Raised when an interaction (e.g. scripted click) fails to execute.
    Carries context so the CLI can print a consistent one-line diagnosis.
    """

    def __init__(
        self,
        action: str,
        message: str,
        *,
        selector: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.action: str = action
        self.selector: str | None = selector
        self.details: dict[str, Any] = details or {}
        self.cause: BaseException | None = cause

    def __str__(self) -> str:
        parts = [f"[{self.action}] {super().__str__()}"]
        if self.selector:
            parts.append(f"selector={self.selector}")
        if self.details:
            kv = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f"details={{ {kv} }}")
        return " | ".join(parts)
