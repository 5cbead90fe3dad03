"""
Structured per-case outcome, reported upward to the CLI.
"""
# @file purpose: Define CaseOutcome model for case results.

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

Status = Literal["passed", "failed", "skipped"]


class CaseOutcome(BaseModel):
    """
    Outcome of one (link, modal) case on one browser kind:
    - status: passed / failed / skipped
    - modal_displayed: the single pass/fail criterion (None when never reached)
    - detail: error or skip reason for the console
    - artifact_path: failure screenshot, if one was taken
    """

    browser: str
    case_id: str
    status: Status
    modal_displayed: Optional[bool] = None
    detail: str = "-"
    artifact_path: Optional[str] = None
    elapsed_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.status != "failed"

    @classmethod
    def passed(cls, browser: str, case_id: str, **kw) -> "CaseOutcome":
        return cls(browser=browser, case_id=case_id, status="passed", modal_displayed=True, **kw)

    @classmethod
    def failed(cls, browser: str, case_id: str, **kw) -> "CaseOutcome":
        return cls(browser=browser, case_id=case_id, status="failed", **kw)

    @classmethod
    def skipped(cls, browser: str, case_id: str, reason: str) -> "CaseOutcome":
        return cls(browser=browser, case_id=case_id, status="skipped", detail=reason)
