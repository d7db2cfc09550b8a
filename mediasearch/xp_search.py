"""State of the category and keyword video search tab."""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable, Mapping, Protocol, Sequence, Union

from mediasearch.items import XpVideo
from mediasearch.yt_results import PseudoItem

LOADING = "Loading..."
REQUEST_CANCELLED = "Request cancelled"
SEARCH_LABEL = "Search"
CANCEL_LABEL = "Cancel"
CATEGORIES_LABEL = "Categories"

XpRow = Union[PseudoItem, XpVideo]


class XpSearchService(Protocol):
    """The remote service the tab drives."""

    page: int

    def init_search(self, term: str) -> None: ...

    def search(self) -> None: ...

    def stop(self) -> None: ...

    def load_by_category(self, category: str) -> None: ...

    def load_more(self) -> None: ...

    def load_latest(self) -> None: ...

    def load_top_rated(self) -> None: ...

    def load_most_viewed(self) -> None: ...


def sort_categories(
    categories: Iterable[Sequence[str]],
) -> list[tuple[str, str]]:
    """Sort ``(id, name)`` pairs by their display name."""
    return sorted(((pair[0], pair[1]) for pair in categories), key=lambda p: p[1])


def _parse_array(data: bytes | str) -> list[Any] | None:
    if not data:
        return None
    try:
        doc = json.loads(data)
    except (ValueError, TypeError):
        return None
    return doc if isinstance(doc, list) else None


class XpSearch:
    """Drives the search service and keeps the result list and control state.

    ``confirm`` is asked once per session to accept age-restricted content;
    without it the content is accepted.
    """

    def __init__(
        self,
        service: XpSearchService,
        categories: Iterable[Sequence[str]] = (),
        confirm: Callable[[], bool] | None = None,
        track: Callable[[str, Mapping[str, Any]], None] | None = None,
    ) -> None:
        self.service = service
        self.categories = sort_categories(categories)
        self._confirm = confirm
        self._track = track
        self.consent_taken = False
        self.term = ""
        self.category: str | None = None
        self.rows: list[XpRow] = []
        self.searching = False
        self.button_text = SEARCH_LABEL
        self.search_enabled = False
        self.line_edit_enabled = True
        self.load_more_enabled = service.page > 0
        self.clear_enabled = False

    def _emit(self, event: str, data: Mapping[str, Any]) -> None:
        if self._track is not None:
            self._track(event, data)

    def set_term(self, text: str) -> None:
        """Update the search text; the search button follows it."""
        self.term = text
        self.search_enabled = bool(text)

    def search(self, term: str) -> None:
        """Cancel running requests and search for ``term``."""
        self.set_term(term)
        self.cancel()
        self.set_searching(True)
        self.service.init_search(term)
        self._emit("xpSearchQuery", {"searchTerm": term})
        self.service.search()

    def toggle_search(self) -> None:
        """The search button: cancel a running search or start a new one."""
        if self.searching:
            self.cancel()
            self.set_searching(False)
        else:
            self.search(self.term)

    def load_category(self, category: str | None) -> None:
        """Browse a category; None stands for the header entry and clears."""
        self.set_term("")
        self.rows = []
        self.category = category
        if category is None:
            self.clear()
            return
        self._emit("xpSearchBrowseCategory", {"categoryName": category})
        self.service.load_by_category(category)
        self.set_searching(True)

    def load_more(self) -> None:
        """Fetch the next page of the current listing."""
        self.set_searching(True)
        self.service.load_more()

    def load_latest(self) -> None:
        self.set_term("")
        self.service.load_latest()
        self.set_searching(True)

    def load_top_rated(self) -> None:
        self.set_term("")
        self.service.load_top_rated()
        self.set_searching(True)

    def load_most_viewed(self) -> None:
        self.set_term("")
        self.service.load_most_viewed()
        self.set_searching(True)

    def _show_results(self, data: bytes | str) -> None:
        if not self.consent_taken:
            if self._confirm is not None and not self._confirm():
                self.clear_enabled = True
                self.clear()
                return
            self.consent_taken = True

        self.rows = []
        array = _parse_array(data)
        if array is None:
            return
        page = self.service.page
        if self.term.strip():
            header = PseudoItem(f'Results for "{self.term}" on page {page}')
        else:
            header = PseudoItem(f"Results from page {page}")
        if not array:
            self.rows = [PseudoItem(f'No results returned for "{self.term}"')]
        else:
            self.rows = [header] + [
                XpVideo.from_json(value if isinstance(value, dict) else {})
                for value in array
            ]
        self.clear_enabled = bool(self.rows)

    def process_results(self, data: bytes | str) -> None:
        """Show a finished response and return to the idle state."""
        self._show_results(data)
        self.set_searching(False)

    def process_error(self, error: str) -> None:
        """Show a service error in place of the results."""
        self.rows = [PseudoItem(error)]
        self.set_searching(False)

    def set_searching(self, searching: bool) -> None:
        """Switch the controls between the searching and idle states."""
        self.searching = searching
        if searching:
            self.button_text = CANCEL_LABEL
            self.search_enabled = True
            self.line_edit_enabled = False
            self.load_more_enabled = False
            self.rows = [PseudoItem(LOADING)]
        else:
            self.button_text = SEARCH_LABEL
            self.search_enabled = bool(self.term)
            self.line_edit_enabled = True
            self.load_more_enabled = self.service.page > 0

    def cancel(self) -> None:
        """Stop running requests and say so in the result list."""
        self.service.stop()
        self.rows = [PseudoItem(REQUEST_CANCELLED)]

    def clear(self) -> None:
        """Stop everything and empty the search text, results and category."""
        self.set_searching(False)
        self.service.stop()
        self.set_term("")
        self.rows = []
        self.load_more_enabled = False
        self.category = None
        self.clear_enabled = False