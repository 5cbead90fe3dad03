# site_uitests/core/controller/runner.py
"""
Sequential runner for ModalCase[] against one browser session.

Responsibilities:
- check_modal(): the open / verify / close sequence for one case
- CaseRunner.run(): every case in order, one failure never stops the rest
- On failure: save screenshot artifact (if artifacts_dir is set)
- run_suite(): repeat the whole case list once per browser kind
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Iterable, Optional

from ...io.browsers import resolve_kind
from ...io.locators import By
from ...io.session import BrowserSession
from ..cases import ModalCase
from ..errors import (
    BrowserLaunchError,
    BrowserUnavailableError,
    NavigationError,
    UITestError,
)
from ..result import CaseOutcome
from ..settings import Settings

logger = logging.getLogger(__name__)

CLOSE_CLASS = "close"


async def check_modal(
    session: Any, case: ModalCase, *, timeout_s: Optional[float] = None
) -> bool:
    """
    Click the case's link and report whether its modal became visible.
    When it did, close it and wait for the page body to be interactive again.
    Lookup timeouts propagate as LookupTimeoutError.
    """
    link = await session.find_element(By.id(case.link_id), timeout_s=timeout_s)
    await session.click_element(link)

    modal = await session.find_element(By.id(case.modal_id), timeout_s=timeout_s)
    displayed = modal is not None and await session.is_displayed(modal)

    if displayed:
        close = await session.find_element(
            By.class_name(CLOSE_CLASS), parent=modal, timeout_s=timeout_s
        )
        await session.click_element(close)
        await session.find_element(By.tag_name("body"), timeout_s=timeout_s)

    return displayed


class CaseRunner:
    def __init__(
        self,
        *,
        artifacts_dir: Path | None = None,
        timeout_s: float | None = None,
    ) -> None:
        self.artifacts_dir = artifacts_dir
        self.timeout_s = timeout_s
        if self.artifacts_dir:
            self.artifacts_dir.mkdir(parents=True, exist_ok=True)

    async def run(
        self, session: Any, cases: Iterable[ModalCase], *, browser: str | None = None
    ) -> list[CaseOutcome]:
        label = browser or str(getattr(getattr(session, "kind", None), "value", "?"))
        outcomes: list[CaseOutcome] = []

        for case in cases:
            started = time.monotonic()
            try:
                displayed = await check_modal(session, case, timeout_s=self.timeout_s)
            except UITestError as e:
                logger.warning("%s %s failed: %s", label, case.case_id, e)
                artifact = await self._on_failure(session, label, case)
                outcomes.append(
                    CaseOutcome.failed(
                        label,
                        case.case_id,
                        detail=str(e),
                        artifact_path=artifact,
                        elapsed_ms=_elapsed_ms(started),
                    )
                )
                continue

            if displayed:
                outcomes.append(
                    CaseOutcome.passed(label, case.case_id, elapsed_ms=_elapsed_ms(started))
                )
            else:
                artifact = await self._on_failure(session, label, case)
                outcomes.append(
                    CaseOutcome.failed(
                        label,
                        case.case_id,
                        modal_displayed=False,
                        detail=f"modal #{case.modal_id} was not displayed",
                        artifact_path=artifact,
                        elapsed_ms=_elapsed_ms(started),
                    )
                )

        return outcomes

    @staticmethod
    def skipped(browser: str, cases: Iterable[ModalCase], reason: str) -> list[CaseOutcome]:
        return [CaseOutcome.skipped(browser, c.case_id, reason) for c in cases]

    async def _on_failure(self, session: Any, browser: str, case: ModalCase) -> str | None:
        """Best-effort failure artifact (screenshot)."""
        if not self.artifacts_dir:
            return None
        png = self.artifacts_dir / f"fail-{browser}-{case.link_id}.png"
        try:
            await session.screenshot(str(png), full_page=True)
            return str(png)
        except Exception:  # noqa: BLE001
            logger.debug("could not save screenshot %s", png, exc_info=True)
            return None


async def run_suite(
    browsers: Iterable[str],
    site_url: str,
    cases: list[ModalCase],
    settings: Settings,
    *,
    session_factory: Any = BrowserSession,
) -> list[CaseOutcome]:
    """
    Run the full case list once per browser kind, serially.
    All kinds are resolved up front, so an unknown one fails before any case runs.
    """
    kinds = [resolve_kind(b) for b in browsers]
    runner = CaseRunner(
        artifacts_dir=settings.artifacts_dir, timeout_s=settings.default_timeout_seconds
    )
    outcomes: list[CaseOutcome] = []

    for kind in kinds:
        session = session_factory(
            kind,
            driver_dir=settings.driver_dir,
            headless=settings.headless,
            default_timeout_s=settings.default_timeout_seconds,
            poll_interval_s=settings.poll_interval_seconds,
        )
        try:
            await session.start()
        except BrowserUnavailableError as e:
            logger.warning("skipping %s: %s", kind.value, e)
            outcomes.extend(CaseRunner.skipped(kind.value, cases, str(e)))
            continue
        except BrowserLaunchError as e:
            logger.error("%s: %s", kind.value, e)
            outcomes.extend(
                CaseOutcome.failed(kind.value, c.case_id, detail=str(e)) for c in cases
            )
            continue
        try:
            await session.navigate(site_url)
        except NavigationError as e:
            logger.error("%s: %s", kind.value, e)
            outcomes.extend(
                CaseOutcome.failed(kind.value, c.case_id, detail=str(e)) for c in cases
            )
            await session.stop()
            continue
        try:
            outcomes.extend(await runner.run(session, cases, browser=kind.value))
        finally:
            await session.stop()

    return outcomes


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)
