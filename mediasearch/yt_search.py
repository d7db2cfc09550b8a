"""State of the video search tab: requests, results, retries and controls."""

from __future__ import annotations

import enum
from typing import Any, Callable, Collection, Mapping, Protocol

from mediasearch.yt_results import (
    PseudoItem,
    ResultRow,
    SearchMode,
    needs_retry,
    playlist_results,
    trending_results,
    video_results,
)

LOADING = "Loading..."
REQUEST_CANCELLED = "Request cancelled"
SEARCH_LABEL = "Search"
CANCEL_LABEL = "Cancel"


class SearchService(Protocol):
    """The remote search service the tab drives."""

    page: int

    def init(self, instance: str, term: str, mode: SearchMode, region: str) -> None: ...

    def get(self) -> None: ...

    def cancel(self) -> None: ...

    def load_more(self) -> None: ...

    def set_instance_base_url(self, url: str) -> None: ...


class InstanceList(Protocol):
    """The known service instances and which one is in use."""

    current_instance: str

    def random_instance(self) -> str: ...

    def first_instance(self) -> str: ...

    def set_current_instance(self, url: str) -> None: ...


class AgeConsent(enum.Enum):
    """The answer to the warning shown for age-restricted search terms."""

    PROCEED = "proceed"
    DECLINE = "decline"
    ENABLE_XP = "enable_xp"


def placeholder_text(mode: SearchMode) -> str:
    """The search field's placeholder for the chosen search type."""
    if mode is SearchMode.VIDEO:
        return "Search YouTube Videos"
    return "Search YouTube Playlists"


class YtSearch:
    """Drives a search service and keeps the state of the result list and controls."""

    def __init__(
        self,
        service: SearchService,
        instances: InstanceList,
        trigger_words: Collection[str] = (),
        confirm: Callable[[str], AgeConsent] | None = None,
        on_enable_xp: Callable[[], None] | None = None,
        track: Callable[[str, Mapping[str, Any]], None] | None = None,
    ) -> None:
        self.service = service
        self.instances = instances
        self.trigger_words = frozenset(trigger_words)
        self._confirm = confirm
        self._on_enable_xp = on_enable_xp
        self._track = track
        self.term = ""
        self.rows: list[ResultRow] = []
        self.searching = False
        self.retries = 0
        self.button_text = SEARCH_LABEL
        self.search_enabled = False
        self.line_edit_enabled = True
        self.mode_selector_enabled = True
        self.switch_instance_enabled = False
        self.load_more_enabled = service.page > 0
        self.clear_enabled = False
        self.trending_visible = False
        self.first_launch = True

    def set_term(self, text: str) -> None:
        """Update the search text; the search button follows it."""
        self.term = text
        self.search_enabled = bool(text)

    def _emit(self, event: str, data: Mapping[str, Any]) -> None:
        if self._track is not None:
            self._track(event, data)

    def search(self, term: str, mode: SearchMode = SearchMode.VIDEO) -> bool:
        """Start a search; False if the user declined the age warning."""
        if term in self.trigger_words and self._confirm is not None:
            answer = self._confirm(term)
            if answer is AgeConsent.DECLINE:
                return False
            if answer is AgeConsent.ENABLE_XP:
                if self._on_enable_xp is not None:
                    self._on_enable_xp()
                return False
        self.set_term(term)
        self.cancel()
        self.service.init(self.instances.current_instance, term, mode, "")
        self.set_searching(True)
        self._emit("ytSearchQuery", {"searchTerm": term})
        self.service.get()
        return True

    def toggle_search(self, mode: SearchMode = SearchMode.VIDEO) -> None:
        """The search button: cancel a running search or start a new one."""
        if self.searching:
            self.cancel()
            self.set_searching(False)
        else:
            self.search(self.term, mode)

    def get_trending(
        self, mode: SearchMode = SearchMode.TRENDING_MUSIC, region: str = "US"
    ) -> None:
        """Request the trending list of ``mode`` for ``region``."""
        self.cancel()
        self.service.init(self.instances.current_instance, "", mode, region)
        self.set_searching(True)
        self._emit("ytSearchgetTrending", {"searchMode": mode.value, "region": region})
        self.service.get()

    def load_more(self) -> None:
        """Fetch the next page of the current search."""
        self.set_searching(True)
        self.service.load_more()

    def process_results(self, mode: SearchMode, data: bytes | str) -> None:
        """Show a finished response, retrying on another instance if it is empty."""
        if mode is SearchMode.VIDEO:
            self.rows = video_results(data, self.term, self.service.page)
        elif mode is SearchMode.PLAYLIST:
            self.rows = playlist_results(data, self.term, self.service.page)
        else:
            self.rows = trending_results(data, mode)
            self.load_more_enabled = False
        if self.rows:
            self.clear_enabled = True
        if needs_retry(data):
            self.retry()
        self.set_searching(False)

    def process_error(self, error: str) -> None:
        """Show a service error in place of the results."""
        self.rows = [PseudoItem(error)]
        self.set_searching(False)

    def set_searching(self, searching: bool, reset_retries: bool = True) -> None:
        """Switch the controls between the searching and idle states."""
        self.searching = searching
        if searching:
            self.trending_visible = False
            self.button_text = CANCEL_LABEL
            self.search_enabled = True
            self.line_edit_enabled = False
            self.mode_selector_enabled = False
            self.load_more_enabled = False
            self.rows = [PseudoItem(LOADING)]
            self.switch_instance_enabled = True
            if reset_retries:
                self.retries = 0
        else:
            self.button_text = SEARCH_LABEL
            self.search_enabled = bool(self.term)
            self.line_edit_enabled = True
            self.mode_selector_enabled = True
            self.load_more_enabled = self.service.page > 0

    def cancel(self) -> None:
        """Stop running requests and say so in the result list."""
        self.service.cancel()
        self.rows = [PseudoItem(REQUEST_CANCELLED)]

    def clear(self) -> None:
        """Cancel everything and empty the search text and results."""
        self.cancel()
        self.set_searching(False)
        self.set_term("")
        self.rows = []
        self.load_more_enabled = False
        self.clear_enabled = False

    def switch_instance(self) -> None:
        """Move to a random instance and repeat the current request there."""
        if not self.switch_instance_enabled:
            return
        url = self.instances.random_instance()
        self.instances.set_current_instance(url)
        self.cancel()
        self.service.set_instance_base_url(url)
        self.service.get()
        self.set_searching(True, False)

    def retry(self) -> None:
        """Retry once on a random instance, then go back to the first one."""
        self.retries += 1
        if self.retries <= 1:
            self.switch_instance()
        else:
            self.retries = 0
            self.instances.set_current_instance(self.instances.first_instance())

    def toggle_trending_selector(self) -> None:
        """Show the trending selector, or hide it if shown."""
        self.first_launch = False
        self.trending_visible = not self.trending_visible

    def tab_entered(self) -> None:
        """On first entry the trending selector is shown."""
        if self.first_launch:
            self.toggle_trending_selector()