"""
Locator strategies (by id, class name, tag name, css) rendered as
Playwright selector strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Strategy = Literal["id", "class_name", "tag_name", "css"]


@dataclass(frozen=True)
class Locator:
    strategy: Strategy
    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(f"empty {self.strategy} locator")

    @property
    def selector(self) -> str:
        if self.strategy == "id":
            return f"id={self.value}"
        if self.strategy == "class_name":
            return f'[class~="{self.value}"]'
        # tag_name and css are already valid css
        return self.value

    def __str__(self) -> str:
        return f"{self.strategy}={self.value}"


class By:
    """Builders mirroring the usual locator strategy names."""

    @staticmethod
    def id(value: str) -> Locator:
        return Locator("id", value)

    @staticmethod
    def class_name(value: str) -> Locator:
        return Locator("class_name", value)

    @staticmethod
    def tag_name(value: str) -> Locator:
        return Locator("tag_name", value)

    @staticmethod
    def css(value: str) -> Locator:
        return Locator("css", value)
