"""
Home page end-to-end tests: every link opens its modal, and the modal closes.

The session fixture is created once per browser kind and shared by all cases
of that kind. A browser that is not installed skips its cases instead of
failing them.
"""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from playwright.async_api import expect

from site_uitests.core.cases import FIXTURE_BROWSERS, HOME_PAGE_CASES, ModalCase
from site_uitests.core.controller.runner import check_modal
from site_uitests.core.errors import BrowserUnavailableError, LookupTimeoutError
from site_uitests.io.locators import By
from site_uitests.io.session import BrowserSession

pytestmark = pytest.mark.asyncio(loop_scope="module")


@pytest_asyncio.fixture(scope="module", loop_scope="module", params=FIXTURE_BROWSERS)
async def session(request: pytest.FixtureRequest, site_url: str) -> AsyncIterator[BrowserSession]:
    s = BrowserSession(request.param, poll_interval_s=0.1)
    try:
        await s.start()
    except BrowserUnavailableError as e:
        pytest.skip(str(e))
    try:
        await s.navigate(site_url)
        yield s
    finally:
        await s.stop()


@pytest.mark.parametrize("case", HOME_PAGE_CASES, ids=lambda c: c.case_id)
async def test_click_link_by_id_should_display_modal_by_id(
    session: BrowserSession, case: ModalCase
) -> None:
    modal_displayed = await check_modal(session, case)

    assert modal_displayed is True
    # closing the modal left the page usable
    assert await (await session.find_element(By.tag_name("body"))).is_visible()
    await expect(session.page.locator(f"id={case.modal_id}")).to_be_hidden()


async def test_missing_modal_times_out(session: BrowserSession) -> None:
    case = ModalCase(link_id="download-btn", modal_id="missing-modal")

    with pytest.raises(LookupTimeoutError) as ei:
        await check_modal(session, case, timeout_s=1)

    assert ei.value.selector == "id=missing-modal"
    assert ei.value.timeout_s == 1

    # the real modal did open; put the page back
    modal = await session.find_element(By.id("pretend-modal"))
    await session.click_element(await session.find_element(By.class_name("close"), parent=modal))


async def test_close_control_is_scoped_to_modal(session: BrowserSession) -> None:
    link = await session.find_element(By.id("download-btn"))
    await session.click_element(link)
    modal = await session.find_element(By.id("pretend-modal"))

    close = await session.find_element(By.class_name("close"), parent=modal)
    assert await close.get_attribute("aria-label") == "Close"

    await session.click_element(close)
    await expect(modal).to_be_hidden()
