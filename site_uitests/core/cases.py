"""
Test-case data for the home page: which link opens which modal.
Both lists are literal, authored data; they are not runtime configuration.
"""
# @file purpose: Define ModalCase and the compiled-in case / browser lists.

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ModalCase(BaseModel):
    """A link element id paired with the id of the modal it should open."""

    model_config = ConfigDict(frozen=True)

    link_id: NonEmptyStr
    modal_id: NonEmptyStr

    @property
    def case_id(self) -> str:
        return f"{self.link_id}->{self.modal_id}"


HOME_PAGE_CASES: list[ModalCase] = [
    ModalCase(link_id="download-btn", modal_id="pretend-modal"),
    ModalCase(link_id="screen-01", modal_id="screen-modal"),
    ModalCase(link_id="profile-1", modal_id="profile-modal-1"),
]

# Browser kinds the pytest fixture is repeated over.
FIXTURE_BROWSERS: list[str] = ["Firefox"]
