"""Indeed (de.indeed.com) job board."""

from __future__ import annotations

import logging
import re

from job_corpus.boards.base import JobBoard, PageTransitionError
from job_corpus.boards.registry import register
from job_corpus.browser.driver import BrowserView, ElementWaitTimeout

logger = logging.getLogger(__name__)

# Sponsored "hiring event" postings open on a separate site without a description.
HIRING_EVENT_PREFIX = "https://events"

# Hides the .popover overlays Indeed shows on top of the result list. The
# <head> element is not available yet when init scripts run.
POPOVER_SUPPRESSION_SCRIPT = """
(() => {
    const style = document.createElement('style');
    style.type = 'text/css';
    style.innerHTML = '.popover{display: none !important}';
    setTimeout(() => {
        const [head] = Array.from(document.getElementsByTagName('head'));
        if (head) {
            head.append(style);
        }
    }, 1000);
})();
"""

_NUMBER = re.compile(r"\d[\d.]*")


def parse_total_results(text: str) -> int:
    """Parse the result count from text like 'Seite 1 von 1.234 Jobs'.

    The last number wins; '.' thousands separators are dropped. Returns 0 if
    the text holds no number.
    """
    numbers = _NUMBER.findall(text or "")
    if not numbers:
        return 0
    return int(numbers[-1].replace(".", ""))


@register
class IndeedBoard(JobBoard):
    name = "indeed.com"
    label = "Indeed.com"
    start_url = "https://de.indeed.com/"

    what_input_selector = "#text-input-what"
    where_input_selector = "#text-input-where"
    search_form_selector = "#whatWhereFormId"
    result_count_selector = "#searchCountPages"
    next_control_selector = "#resultsCol > div.pagination > a:last-child"
    next_control_label = "Weiter"

    result_selector = ".result"
    description_selector = "#jobDescriptionText"
    # The employer name element always carries both of these classes.
    employer_selector = ".icl-u-lg-mr--sm.icl-u-xs-mr--xs"
    heading_selector = ".jobSectionHeader"

    result_count_timeout_ms = 10000

    async def prepare(self, view: BrowserView) -> None:
        await view.add_init_script(POPOVER_SUPPRESSION_SCRIPT)

    async def start_search(self, view: BrowserView, query: str, location: str) -> None:
        await view.fill(self.what_input_selector, query)
        await view.fill(self.where_input_selector, location)
        await view.submit_form(self.search_form_selector)

    async def read_total_results(self, view: BrowserView) -> int:
        try:
            await view.wait_for_selector(
                self.result_count_selector, timeout_ms=self.result_count_timeout_ms
            )
        except ElementWaitTimeout:
            logger.warning("Indeed.com did not report a result count")
            return 0
        return parse_total_results(await view.inner_html(self.result_count_selector))

    async def next_page(self, view: BrowserView) -> bool:
        try:
            controls = await view.query_all(self.next_control_selector)
            if not controls:
                return False
            control = controls[-1]
            # On the last page the last pagination link is a page number.
            if self.next_control_label not in await control.inner_html():
                return False
            await view.follow(control)
        except Exception as e:
            raise PageTransitionError(f"Could not open the next page: {e}") from e
        return True

    def is_hiring_event(self, url: str) -> bool:
        return url.startswith(HIRING_EVENT_PREFIX)
