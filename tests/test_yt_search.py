import json

import pytest

from mediasearch.items import YtPlaylist, YtVideo
from mediasearch.yt_results import PseudoItem, SearchMode
from mediasearch.yt_search import AgeConsent, YtSearch, placeholder_text

CURRENT = "https://a.example.com"
RANDOM = "https://b.example.com"


class FakeService:
    def __init__(self, page=0):
        self.page = page
        self.calls = []

    def init(self, instance, term, mode, region):
        self.calls.append(("init", instance, term, mode, region))

    def get(self):
        self.calls.append(("get",))

    def cancel(self):
        self.calls.append(("cancel",))

    def load_more(self):
        self.calls.append(("load_more",))

    def set_instance_base_url(self, url):
        self.calls.append(("base_url", url))


class FakeInstances:
    def __init__(self):
        self.current_instance = CURRENT
        self.chosen = []

    def random_instance(self):
        return RANDOM

    def first_instance(self):
        return CURRENT

    def set_current_instance(self, url):
        self.chosen.append(url)
        self.current_instance = url


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def instances():
    return FakeInstances()


def test_search_initialises_and_fetches(service, instances):
    tab = YtSearch(service, instances)
    assert tab.search("cats", SearchMode.PLAYLIST) is True
    assert ("init", CURRENT, "cats", SearchMode.PLAYLIST, "") in service.calls
    assert service.calls[-1] == ("get",)
    assert tab.searching is True
    assert tab.button_text == "Cancel"
    assert tab.rows == [PseudoItem("Loading...")]
    assert tab.line_edit_enabled is False


def test_search_tracks_event(service, instances):
    events = []
    tab = YtSearch(service, instances, track=lambda e, d: events.append((e, d)))
    tab.search("cats")
    assert events == [("ytSearchQuery", {"searchTerm": "cats"})]


def test_trigger_word_declined(service, instances):
    tab = YtSearch(
        service, instances, trigger_words={"bad"}, confirm=lambda t: AgeConsent.DECLINE
    )
    assert tab.search("bad") is False
    assert service.calls == []


def test_trigger_word_enable_xp(service, instances):
    enabled = []
    tab = YtSearch(
        service,
        instances,
        trigger_words={"bad"},
        confirm=lambda t: AgeConsent.ENABLE_XP,
        on_enable_xp=lambda: enabled.append(True),
    )
    assert tab.search("bad") is False
    assert enabled == [True]
    assert service.calls == []


def test_trigger_word_proceed(service, instances):
    tab = YtSearch(
        service, instances, trigger_words={"bad"}, confirm=lambda t: AgeConsent.PROCEED
    )
    assert tab.search("bad") is True
    assert service.calls[-1] == ("get",)


def test_video_results_shown(service, instances):
    tab = YtSearch(service, instances)
    tab.search("cats")
    data = json.dumps([{"title": "A cat", "videoId": "abc"}])
    tab.process_results(SearchMode.VIDEO, data)
    assert tab.rows[0] == PseudoItem('Results for "cats" on page 0')
    assert isinstance(tab.rows[1], YtVideo)
    assert tab.rows[1].title == "A cat"
    assert tab.searching is False
    assert tab.clear_enabled is True
    assert tab.retries == 0


def test_playlist_results_shown(service, instances):
    tab = YtSearch(service, instances)
    tab.search("music", SearchMode.PLAYLIST)
    tab.process_results(SearchMode.PLAYLIST, json.dumps([{"title": "Mix"}]))
    assert isinstance(tab.rows[1], YtPlaylist)
    assert tab.rows[1].title == "Mix"


def test_trending_disables_load_more(instances):
    service = FakeService(page=3)
    tab = YtSearch(service, instances)
    tab.get_trending()
    assert ("init", CURRENT, "", SearchMode.TRENDING_MUSIC, "US") in service.calls
    tab.process_results(SearchMode.TRENDING_MUSIC, json.dumps([{"title": "x"}]))
    assert tab.rows[0] == PseudoItem("Trending Music")
    # idle state re-enables load more from the service page
    assert tab.load_more_enabled is True


def test_empty_result_retries_on_random_instance(service, instances):
    tab = YtSearch(service, instances)
    tab.search("cats")
    tab.process_results(SearchMode.VIDEO, "[]")
    assert tab.retries == 1
    assert instances.chosen == [RANDOM]
    assert ("base_url", RANDOM) in service.calls
    assert tab.searching is False


def test_second_empty_result_returns_to_first_instance(service, instances):
    tab = YtSearch(service, instances)
    tab.search("cats")
    tab.process_results(SearchMode.VIDEO, "[]")
    tab.process_results(SearchMode.VIDEO, "[]")
    assert tab.retries == 0
    assert instances.chosen == [RANDOM, CURRENT]


def test_retry_without_switch_enabled_does_nothing(service, instances):
    tab = YtSearch(service, instances)
    tab.retry()
    assert tab.retries == 1
    assert instances.chosen == []
    assert service.calls == []


def test_process_error(service, instances):
    tab = YtSearch(service, instances)
    tab.search("cats")
    tab.process_error("boom")
    assert tab.rows == [PseudoItem("boom")]
    assert tab.searching is False


def test_clear_resets(service, instances):
    tab = YtSearch(service, instances)
    tab.search("cats")
    tab.clear()
    assert tab.rows == []
    assert tab.term == ""
    assert tab.search_enabled is False
    assert tab.clear_enabled is False
    assert tab.load_more_enabled is False
    assert tab.button_text == "Search"


def test_cancel_shows_message(service, instances):
    tab = YtSearch(service, instances)
    tab.cancel()
    assert tab.rows == [PseudoItem("Request cancelled")]
    assert service.calls == [("cancel",)]


def test_set_searching_false_uses_page(instances):
    service = FakeService(page=2)
    tab = YtSearch(service, instances)
    tab.set_searching(True)
    assert tab.load_more_enabled is False
    tab.set_searching(False)
    assert tab.load_more_enabled is True
    assert tab.mode_selector_enabled is True


def test_set_searching_keeps_retries_when_asked(service, instances):
    tab = YtSearch(service, instances)
    tab.retries = 1
    tab.set_searching(True, False)
    assert tab.retries == 1
    tab.set_searching(True)
    assert tab.retries == 0


def test_toggle_search_cancels_running(service, instances):
    tab = YtSearch(service, instances)
    tab.set_term("cats")
    tab.toggle_search()
    assert tab.searching is True
    tab.toggle_search()
    assert tab.searching is False
    assert tab.rows == [PseudoItem("Request cancelled")]


def test_tab_entered_shows_trending_once(service, instances):
    tab = YtSearch(service, instances)
    tab.tab_entered()
    assert tab.trending_visible is True
    tab.tab_entered()
    assert tab.trending_visible is True
    assert tab.first_launch is False


def test_placeholder_text():
    assert placeholder_text(SearchMode.VIDEO) == "Search YouTube Videos"
    assert placeholder_text(SearchMode.PLAYLIST) == "Search YouTube Playlists"